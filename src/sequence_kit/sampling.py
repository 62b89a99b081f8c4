"""Random sampling over sequences.

Every function takes an optional ``random.Random``. When none is given a
fresh generator seeded from OS entropy is created for the call, so no
generator state is shared between callers.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Sequence

from .errors import SamplingError
from .transform import replicate
from .traversal import first_index_of, length, select_at

logger = logging.getLogger(__name__)


def rand_select(
    seq: Sequence[Any],
    count: int,
    rng: random.Random | None = None,
) -> list[Any]:
    """Pick *count* elements of *seq* from distinct positions, in draw order.

    *count* is clamped to the length of *seq*. When a drawn position is
    already taken, the next free position above it is used, then the next
    free one below it. :class:`SamplingError` is raised if neither exists.
    """
    if count <= 0:
        return []
    if rng is None:
        rng = random.Random()
    size = length(seq)
    count = min(count, size)

    positions: list[int] = []
    while len(positions) < count:
        pos = rng.randint(1, size)
        if first_index_of(pos, positions) != -1:
            logger.debug("position %d already drawn, probing", pos)
            pos = _probe(pos, positions, size)
        positions.append(pos)

    logger.debug("rand_select drew positions %s", positions)
    return [select_at(pos, seq) for pos in positions]


def _probe(pos: int, taken: list[int], size: int) -> int:
    """Nearest free position to *pos*: searched upwards first, then downwards."""
    for step in (1, -1):
        candidate = pos + step
        while 1 <= candidate <= size:
            if first_index_of(candidate, taken) == -1:
                return candidate
            candidate += step
    raise SamplingError("A new random element cannot be found")


def lotto_select(
    count: int,
    boundary: int,
    rng: random.Random | None = None,
) -> list[int]:
    """Draw *count* numbers from ``1..boundary``; repeats are allowed."""
    if count <= 0 or boundary <= 0:
        return []
    if boundary == 1:
        return replicate([1], count)
    if rng is None:
        rng = random.Random()
    return [rng.randint(1, boundary) for _ in range(count)]


def permutation(seq: Sequence[Any], rng: random.Random | None = None) -> list[Any]:
    """Random permutation of *seq*. Not implemented: always returns ``[]``."""
    # TODO: return rand_select(seq, length(seq), rng) once callers stop relying on [].
    logger.debug("permutation is not implemented, returning []")
    return []
