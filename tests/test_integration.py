"""Cross-module laws that hold for every sequence."""

import pytest

from sequence_kit import (
    Group,
    Leaf,
    compress,
    decode,
    duplicate,
    encode,
    flatten,
    length,
    pack,
    reverse,
    rotate,
)

SAMPLES = [
    [],
    ["a"],
    ["a", "a", "a", "b", "c", "c"],
    list("aaaabccaadeeee"),
    [1, 2, 3, 4, 5],
    [None, None, 0, 0, ""],
]


@pytest.mark.parametrize("seq", SAMPLES)
def test_decode_inverts_encode(seq):
    assert decode(encode(seq)) == seq


@pytest.mark.parametrize("seq", SAMPLES)
def test_compress_is_idempotent(seq):
    assert compress(compress(seq)) == compress(seq)


@pytest.mark.parametrize("seq", SAMPLES)
def test_pack_concatenates_to_input(seq):
    assert [el for group in pack(seq) for el in group] == seq


@pytest.mark.parametrize("seq", SAMPLES)
def test_length_laws(seq):
    assert length(duplicate(seq)) == 2 * length(seq)
    assert length(reverse(seq)) == length(seq)


def test_flatten_ignores_grouping():
    nested = [Group([Leaf(1), Group([Leaf(2), Leaf(3)])]), Group([Leaf(4)])]
    expanded = [Leaf(1), Leaf(2), Leaf(3), Leaf(4)]
    assert flatten(nested) == flatten(expanded) == [1, 2, 3, 4]


@pytest.mark.parametrize("k1", [-7, -1, 0, 2, 3, 11])
@pytest.mark.parametrize("k2", [-3, 0, 1, 4])
def test_rotation_composes(k1, k2):
    seq = list("abcde")
    assert rotate(rotate(seq, k1), k2) == rotate(seq, (k1 + k2) % length(seq))


@pytest.mark.parametrize("seq", [s for s in SAMPLES if s])
def test_rotation_identities(seq):
    assert rotate(seq, 0) == seq
    assert rotate(seq, length(seq)) == seq
