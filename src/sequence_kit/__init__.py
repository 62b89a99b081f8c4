"""SequenceKit — eager algorithms over ordered sequences."""

from .model import Empty, Group, Leaf, Node, Run, RunLength, Single
from .errors import (
    CommandError,
    IndexOutOfBoundsError,
    SamplingError,
    SequenceKitError,
)
from .traversal import (
    at,
    first_index_of,
    last,
    last_two,
    length,
    reverse,
    select_at,
)
from .transform import (
    compress,
    decode,
    duplicate,
    encode,
    flatten,
    is_palindrome,
    pack,
    replicate,
)
from .positional import (
    drop,
    insert_at,
    range_,
    remove_at,
    rotate,
    slice_,
    split,
)
from .sampling import lotto_select, permutation, rand_select
from .formatting import format_entry, format_pair, format_sequence, format_value
from .repl import SequenceRepl

__all__ = [
    "Empty",
    "Group",
    "Leaf",
    "Node",
    "Run",
    "RunLength",
    "Single",
    "SequenceKitError",
    "IndexOutOfBoundsError",
    "SamplingError",
    "CommandError",
    "length",
    "reverse",
    "at",
    "last",
    "last_two",
    "first_index_of",
    "select_at",
    "is_palindrome",
    "flatten",
    "compress",
    "pack",
    "encode",
    "decode",
    "duplicate",
    "replicate",
    "drop",
    "split",
    "slice_",
    "rotate",
    "remove_at",
    "insert_at",
    "range_",
    "rand_select",
    "lotto_select",
    "permutation",
    "format_sequence",
    "format_pair",
    "format_entry",
    "format_value",
    "SequenceRepl",
]
