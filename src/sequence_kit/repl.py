"""SequenceRepl — interactive shell for trying SequenceKit operations.

Also provides the ``seqkit-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from typing import IO, Any, Callable

from .errors import CommandError, SequenceKitError
from .formatting import format_sequence, format_value
from .positional import drop, insert_at, range_, remove_at, rotate, slice_, split
from .sampling import lotto_select, permutation, rand_select
from .transform import compress, duplicate, encode, is_palindrome, pack, replicate
from .traversal import at, first_index_of, last, last_two, length, reverse, select_at

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Operation table
# ---------------------------------------------------------------------------

# name -> (argument kinds, adapter). Kinds: "i" integer, "s" raw token.
# Adapters receive the current sequence, the shell's rng and coerced args.
OPERATIONS: dict[str, tuple[str, Callable[..., Any]]] = {
    "length": ("", lambda seq, rng: length(seq)),
    "reverse": ("", lambda seq, rng: reverse(seq)),
    "at": ("i", lambda seq, rng, i: at(i, seq)),
    "last": ("", lambda seq, rng: last(seq)),
    "last_two": ("", lambda seq, rng: last_two(seq)),
    "index": ("s", lambda seq, rng, el: first_index_of(el, seq)),
    "select_at": ("i", lambda seq, rng, i: select_at(i, seq)),
    "palindrome": ("", lambda seq, rng: is_palindrome(seq)),
    "compress": ("", lambda seq, rng: compress(seq)),
    "pack": ("", lambda seq, rng: pack(seq)),
    "encode": ("", lambda seq, rng: encode(seq)),
    "duplicate": ("", lambda seq, rng: duplicate(seq)),
    "replicate": ("i", lambda seq, rng, n: replicate(seq, n)),
    "drop": ("i", lambda seq, rng, n: drop(seq, n)),
    "split": ("i", lambda seq, rng, n: split(seq, n)),
    "slice": ("ii", lambda seq, rng, start, end: slice_(seq, start, end)),
    "rotate": ("i", lambda seq, rng, n: rotate(seq, n)),
    "remove_at": ("i", lambda seq, rng, pos: remove_at(pos, seq)),
    "insert_at": ("si", lambda seq, rng, el, pos: insert_at(el, pos, seq)),
    "range": ("ii", lambda seq, rng, start, end: range_(start, end)),
    "rand_select": ("i", lambda seq, rng, n: rand_select(seq, n, rng)),
    "lotto_select": ("ii", lambda seq, rng, n, bound: lotto_select(n, bound, rng)),
    "permutation": ("", lambda seq, rng: permutation(seq, rng)),
}


# ---------------------------------------------------------------------------
# SequenceRepl class (programmatic use)
# ---------------------------------------------------------------------------

class SequenceRepl:
    """Stateful shell holding a current sequence of string tokens.

    Usage::

        repl = SequenceRepl(seed=1)
        repl.eval("= a a a b c c")
        repl.eval("encode")      # → [Run(count=3, value='a'), Single(value='b'), ...]
        repl.eval("rotate 2")    # → ['a', 'b', 'c', 'c', 'a', 'a']
        repl.reset()
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self.rng = random.Random(seed)
        self.current: list[str] = []
        # Batch files currently being read
        self.loading: set[str] = set()

    def eval(self, text: str) -> Any:
        """Apply one command to the current sequence and return the result.

        ``= tokens...`` replaces the current sequence and returns ``None``.
        """
        tokens = text.split()
        if not tokens:
            return None
        if tokens[0] == "=":
            self.current = tokens[1:]
            return None

        name, raw_args = tokens[0], tokens[1:]
        if name not in OPERATIONS:
            logger.debug("unknown operation %r", name)
            raise CommandError(f"unknown operation '{name}'")
        kinds, adapter = OPERATIONS[name]
        if len(raw_args) != len(kinds):
            raise CommandError(
                f"'{name}' takes {len(kinds)} argument(s), got {len(raw_args)}"
            )
        args = [_coerce(raw, kind) for raw, kind in zip(raw_args, kinds)]
        return adapter(self.current, self.rng, *args)

    def reset(self) -> None:
        """Clear the current sequence and re-seed the generator."""
        self.current = []
        self.rng = random.Random(self.seed)


def _coerce(raw: str, kind: str) -> Any:
    if kind == "i":
        try:
            return int(raw)
        except ValueError:
            raise CommandError(f"expected an integer, got '{raw}'") from None
    return raw


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _show_seq(repl: SequenceRepl, dest: IO[str]) -> None:
    print(f"  {format_sequence(repl.current)}", file=dest)


def _show_ops(dest: IO[str]) -> None:
    """Print every operation with its argument kinds."""
    width = max(len(name) for name in OPERATIONS)
    for name, (kinds, _) in OPERATIONS.items():
        args = " ".join("<int>" if k == "i" else "<el>" for k in kinds)
        print(f"  {name:<{width}} {args}".rstrip(), file=dest)


def _process_line(repl: SequenceRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":seq":
        _show_seq(repl, dest)
        return True

    if line == ":ops":
        _show_ops(dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        filepath = line[4:].strip()
        key = os.path.realpath(filepath)
        if key in repl.loading:
            print(f"Error: '{filepath}' is already being loaded", file=dest)
            return True
        repl.loading.add(key)
        try:
            with open(filepath, encoding="utf-8") as fh:
                for file_line in fh:
                    _process_line(repl, file_line.rstrip("\n"), dest)
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        finally:
            repl.loading.discard(key)
        return True

    # ── Operations ────────────────────────────────────────────────────────
    try:
        result = repl.eval(line)
    except SequenceKitError as exc:
        print(f"Error: {exc}", file=dest)
        return True
    if result is not None:
        print(format_value(result), file=dest)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="seqkit-repl",
        description="Interactive shell for SequenceKit operations.",
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for rand_select / lotto_select")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Interactive shell (``seqkit-repl`` / ``python -m sequence_kit.repl``)."""
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(levelname)s %(name)s: %(message)s")
    repl = SequenceRepl(seed=args.seed)

    print("SequenceKit REPL  (:q to quit  |  :seq  :ops  :reset  |  = a b c  |  <op> <args>)")

    while True:
        try:
            line = input("seq> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(repl, line, sys.stdout):
            break


if __name__ == "__main__":
    main()
