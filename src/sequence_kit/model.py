"""Data model for SequenceKit: nested nodes, run-length entries and Empty."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


# ---------------------------------------------------------------------------
# Empty — singleton for "no element"
# ---------------------------------------------------------------------------

class _EmptyType:
    """Sentinel returned when a lookup finds nothing."""

    _instance: _EmptyType | None = None

    def __new__(cls) -> _EmptyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False


Empty = _EmptyType()


# ---------------------------------------------------------------------------
# Nested-element nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Leaf:
    value: Any


@dataclass(frozen=True, slots=True)
class Group:
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        # Own a private copy of the child sequence
        object.__setattr__(self, "children", tuple(self.children))


Node = Union[Leaf, Group]


# ---------------------------------------------------------------------------
# Run-length entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Single:
    value: Any


@dataclass(frozen=True, slots=True)
class Run:
    count: int
    value: Any


RunLength = Union[Single, Run]
