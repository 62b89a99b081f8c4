"""Transformation algorithms: flatten, compress, pack, run-length coding."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from .model import Group, Leaf, Node, Run, RunLength, Single
from .traversal import reverse

_EXHAUSTED = object()


def is_palindrome(seq: Sequence[Any]) -> bool:
    """True if *seq* reads the same backwards. An empty sequence is not a palindrome."""
    if not seq:
        return False
    return list(seq) == reverse(seq)


def flatten(nodes: Iterable[Node]) -> list[Any]:
    """Unwrap nested ``Group`` nodes into a flat list of leaf values.

    Traversal is depth-first, left to right. An explicit stack of iterators
    replaces recursion so deep nesting does not hit the recursion limit.
    """
    out: list[Any] = []
    stack = [iter(nodes)]
    while stack:
        node = next(stack[-1], _EXHAUSTED)
        if node is _EXHAUSTED:
            stack.pop()
        elif isinstance(node, Leaf):
            out.append(node.value)
        elif isinstance(node, Group):
            stack.append(iter(node.children))
        else:
            raise TypeError(f"expected Leaf or Group, got {type(node).__name__}")
    return out


def compress(seq: Sequence[Any]) -> list[Any]:
    """Collapse consecutive equal elements: ``[a, a, b, a] -> [a, b, a]``."""
    out: list[Any] = []
    for el in seq:
        if not out or out[-1] != el:
            out.append(el)
    return out


def pack(seq: Sequence[Any]) -> list[list[Any]]:
    """Group maximal runs of equal adjacent elements into sublists.

    An empty input yields a single empty group, ``[[]]``.
    """
    groups: list[list[Any]] = []
    current: list[Any] = []
    for el in seq:
        if current and current[0] != el:
            groups.append(current)
            current = []
        current.append(el)
    groups.append(current)
    return groups


def encode(seq: Sequence[Any]) -> list[RunLength]:
    """Run-length encode *seq*.

    Example::

        ["a", "a", "a", "b", "c", "c"]
        -> [Run(3, "a"), Single("b"), Run(2, "c")]
    """
    out: list[RunLength] = []
    count = 0
    current: Any = None
    for el in seq:
        if count and el == current:
            count += 1
            continue
        if count:
            out.append(_entry(count, current))
        current, count = el, 1
    if count:
        out.append(_entry(count, current))
    return out


def _entry(count: int, value: Any) -> RunLength:
    return Single(value) if count == 1 else Run(count, value)


def decode(entries: Iterable[RunLength]) -> list[Any]:
    """Expand run-length entries back into a flat list.

    ``Run(n, e)`` with ``n <= 0`` expands to nothing.
    """
    out: list[Any] = []
    for entry in entries:
        if isinstance(entry, Single):
            out.append(entry.value)
        elif isinstance(entry, Run):
            out.extend([entry.value] * max(entry.count, 0))
        else:
            raise TypeError(f"expected Single or Run, got {type(entry).__name__}")
    return out


def duplicate(seq: Sequence[Any]) -> list[Any]:
    """Repeat every element twice in place."""
    return replicate(seq, 2)


def replicate(seq: Sequence[Any], times: int) -> list[Any]:
    """Repeat every element *times* times in place.

    Note: ``times <= 0`` returns ``[]`` for any input, including through
    callers such as ``lotto_select``. Kept as observed, intent unconfirmed.
    """
    out: list[Any] = []
    if times <= 0:
        return out
    for el in seq:
        out.extend([el] * times)
    return out
