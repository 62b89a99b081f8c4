"""Core traversal primitives.

Positions in this module are 1-based, unlike the 0-based positional
algorithms in :mod:`sequence_kit.positional`.
"""

from __future__ import annotations

from typing import Any, Sequence

from .errors import IndexOutOfBoundsError
from .model import Empty


def length(seq: Sequence[Any]) -> int:
    """Number of elements in *seq*."""
    return len(seq)


def reverse(seq: Sequence[Any]) -> list[Any]:
    """Return a new list with the elements of *seq* in reverse order."""
    return list(reversed(seq))


def at(i: int, seq: Sequence[Any]) -> Any:
    """Return the element at 1-based position *i*, or ``Empty``."""
    if i < 1 or i > len(seq):
        return Empty
    return seq[i - 1]


def last(seq: Sequence[Any]) -> Any:
    """Return the last element, or ``Empty`` for an empty sequence."""
    if not seq:
        return Empty
    return seq[-1]


def last_two(seq: Sequence[Any]) -> Any:
    """Return the final two elements as a pair, or ``Empty`` if there are fewer."""
    if len(seq) < 2:
        return Empty
    return (seq[-2], seq[-1])


def first_index_of(target: Any, seq: Sequence[Any]) -> int:
    """1-based position of the first element equal to *target*; ``-1`` if absent."""
    for pos, el in enumerate(seq, 1):
        if el == target:
            return pos
    return -1


def select_at(i: int, seq: Sequence[Any]) -> Any:
    """Return the element at 1-based position *i*.

    Raises :class:`IndexOutOfBoundsError` for ``i <= 0`` or ``i`` past the end.
    Zero goes through the same bounds check as any other bad index.
    """
    if i < 1 or i > len(seq):
        raise IndexOutOfBoundsError(i, len(seq))
    return seq[i - 1]
