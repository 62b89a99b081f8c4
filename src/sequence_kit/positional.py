"""Positional algorithms: drop, split, slice, rotate, insert/remove, range.

Positions here are 0-based unless a docstring says otherwise. Negative
positions count from the end of the sequence.
"""

from __future__ import annotations

from typing import Any, Sequence

from .transform import replicate
from .traversal import length, reverse


def drop(seq: Sequence[Any], index: int) -> list[Any]:
    """Remove every element whose 1-based position is a multiple of *index*.

    ``drop([a, b, c, d, e], 2) -> [a, c, e]``.
    """
    if index <= 0:
        # Non-positive index returns an unchanged copy via replicate(seq, 1).
        # Kept as observed, intent unconfirmed.
        return replicate(seq, 1)
    return [el for pos, el in enumerate(seq, 1) if pos % index != 0]


def split(seq: Sequence[Any], first_length: int) -> tuple[list[Any], list[Any]]:
    """Split *seq* into its first *first_length* elements and the rest."""
    if first_length <= 0:
        return [], list(seq)
    return list(seq[:first_length]), list(seq[first_length:])


def slice_(seq: Sequence[Any], start: int, end: int) -> list[Any]:
    """Return the elements between *start* and *end*, both inclusive.

    - Negative indices are taken relative to the length.
    - If ``start > end`` (and ``end`` is not negative) the bounds are swapped.
    - A negative ``end`` yields ``[]``; a negative ``start`` yields the
      prefix through ``end``.
    - Indices past the end are clamped, so ``slice_([a, b, c], 1, 100)``
      is ``[b, c]`` and a start past the end gives ``[]``.
    """
    size = length(seq)
    if start < 0:
        start += size
    if end < 0:
        end += size
    if start > end and end >= 0:
        start, end = end, start

    if end < 0:
        return []
    if start < 0:
        return list(seq[:end + 1])
    return list(seq[start:end + 1])


def rotate(seq: Sequence[Any], shift: int) -> list[Any]:
    """Rotate left by *shift* places, or right by ``-shift`` when negative.

    The shift is taken modulo the length; an empty sequence is returned
    unchanged for any shift.
    """
    size = length(seq)
    if size == 0:
        return []
    shift %= size
    if shift == 0:
        return list(seq)
    if shift > size // 2:
        return _rotate_right(seq, size - shift)
    return _rotate_left(seq, shift)


def _rotate_left(seq: Sequence[Any], shift: int) -> list[Any]:
    head, tail = split(seq, shift)
    return tail + head


def _rotate_right(seq: Sequence[Any], shift: int) -> list[Any]:
    return reverse(_rotate_left(reverse(seq), shift))


def remove_at(pos: int, seq: Sequence[Any]) -> list[Any]:
    """Remove the element at 0-based *pos*.

    An out-of-range position leaves the sequence unchanged.
    """
    size = length(seq)
    if pos < 0:
        pos += size
    if pos < 0 or pos > size - 1:
        return list(seq)
    return list(seq[:pos]) + list(seq[pos + 1:])


def insert_at(el: Any, pos: int, seq: Sequence[Any]) -> list[Any]:
    """Insert *el* at 0-based *pos*.

    Negative positions count from the rear, so ``-1`` appends. An
    out-of-range position leaves the sequence unchanged.
    """
    size = length(seq)
    if pos < 0:
        pos += size + 1
    if pos < 0 or pos > size:
        return list(seq)
    return list(seq[:pos]) + [el] + list(seq[pos:])


def range_(start: int, end: int) -> list[int]:
    """Integers from *start* to *end* inclusive, counting down if ``start > end``."""
    step = 1 if start <= end else -1
    return list(range(start, end + step, step))
