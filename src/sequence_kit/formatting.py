"""Text rendering for sequences and run-length entries."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .model import Group, Leaf, Run, Single, _EmptyType


def format_sequence(seq: Sequence[Any], fmt: Callable[[Any], str] = str) -> str:
    """Render *seq* as ``[a; b; c]`` using *fmt* for each element."""
    return "[" + "; ".join(fmt(el) for el in seq) + "]"


def format_pair(pair: tuple[Any, Any]) -> str:
    """Render a two-element tuple as ``(first, second)``."""
    first, second = pair
    return f"({first}, {second})"


def format_entry(entry: Any) -> str:
    """Render a run-length entry or nested node."""
    if isinstance(entry, Single):
        return f"Single {entry.value}"
    if isinstance(entry, Run):
        return f"Run {format_pair((entry.count, entry.value))}"
    if isinstance(entry, Leaf):
        return f"Leaf {entry.value}"
    if isinstance(entry, Group):
        return "Group " + format_sequence(entry.children, format_entry)
    raise TypeError(f"not a run-length entry or node: {type(entry).__name__}")


def format_value(value: Any) -> str:
    """Render any result produced by a SequenceKit operation."""
    if isinstance(value, _EmptyType):
        return "Empty"
    if isinstance(value, (Single, Run, Leaf, Group)):
        return format_entry(value)
    if isinstance(value, list):
        return format_sequence(value, format_value)
    if isinstance(value, tuple):
        return "(" + ", ".join(format_value(v) for v in value) + ")"
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
