"""Tests for sequence_kit.sampling."""

import logging
import random

import pytest

from sequence_kit import SamplingError
from sequence_kit.sampling import _probe, lotto_select, permutation, rand_select

LETTERS = list("abcdefgh")


# ---------------------------------------------------------------------------
# rand_select
# ---------------------------------------------------------------------------

class TestRandSelect:
    def test_count(self):
        assert len(rand_select(LETTERS, 3, random.Random(0))) == 3

    def test_elements_come_from_sequence(self):
        out = rand_select(LETTERS, 5, random.Random(1))
        assert all(el in LETTERS for el in out)

    def test_distinct_positions_over_many_trials(self):
        rng = random.Random(42)
        for _ in range(1000):
            out = rand_select(LETTERS, 6, rng)
            assert len(out) == 6
            assert len(set(out)) == 6

    def test_clamped_to_length(self):
        out = rand_select(LETTERS, 50, random.Random(3))
        assert sorted(out) == LETTERS

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_count(self, count):
        assert rand_select(LETTERS, count, random.Random(0)) == []

    def test_empty_sequence(self):
        assert rand_select([], 3, random.Random(0)) == []

    def test_single_element(self):
        assert rand_select(["only"], 1, random.Random(0)) == ["only"]

    def test_seeded_is_reproducible(self):
        a = rand_select(LETTERS, 4, random.Random(7))
        b = rand_select(LETTERS, 4, random.Random(7))
        assert a == b

    def test_default_rng(self):
        out = rand_select(LETTERS, 2)
        assert len(out) == 2
        assert set(out) <= set(LETTERS)

    def test_every_position_reachable(self):
        rng = random.Random(11)
        seen = set()
        for _ in range(500):
            seen.update(rand_select(LETTERS, 1, rng))
        assert seen == set(LETTERS)

    def test_does_not_mutate(self):
        seq = list(LETTERS)
        rand_select(seq, 4, random.Random(0))
        assert seq == LETTERS

    def test_logs_draws(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="sequence_kit.sampling"):
            rand_select(LETTERS, 8, random.Random(5))
        assert "rand_select drew positions" in caplog.text


class TestProbe:
    def test_upwards_first(self):
        assert _probe(2, [2, 4], 5) == 3

    def test_skips_taken_upwards(self):
        assert _probe(2, [2, 3], 5) == 4

    def test_falls_back_downwards(self):
        assert _probe(4, [3, 4, 5], 5) == 2

    def test_exhausted(self):
        with pytest.raises(SamplingError, match="cannot be found"):
            _probe(2, [1, 2, 3], 3)


# ---------------------------------------------------------------------------
# lotto_select
# ---------------------------------------------------------------------------

class TestLottoSelect:
    def test_count_and_range(self):
        out = lotto_select(6, 49, random.Random(0))
        assert len(out) == 6
        assert all(1 <= n <= 49 for n in out)

    def test_boundary_inclusive(self):
        rng = random.Random(2)
        seen = set()
        for _ in range(200):
            seen.update(lotto_select(5, 3, rng))
        assert seen == {1, 2, 3}

    def test_allows_repeats(self):
        out = lotto_select(20, 2, random.Random(0))
        assert len(out) == 20
        assert len(set(out)) <= 2

    def test_boundary_one(self):
        assert lotto_select(4, 1) == [1, 1, 1, 1]

    @pytest.mark.parametrize("count,boundary", [(0, 10), (-1, 10), (3, 0), (3, -5)])
    def test_empty_results(self, count, boundary):
        assert lotto_select(count, boundary, random.Random(0)) == []

    def test_seeded_is_reproducible(self):
        assert lotto_select(5, 100, random.Random(9)) == lotto_select(5, 100, random.Random(9))


# ---------------------------------------------------------------------------
# permutation
# ---------------------------------------------------------------------------

def test_permutation_is_unimplemented_stub():
    assert permutation(LETTERS) == []
    assert permutation([], random.Random(0)) == []
