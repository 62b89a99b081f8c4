"""Exceptions raised by SequenceKit."""

from __future__ import annotations


class SequenceKitError(Exception):
    """Base class for all SequenceKit failures."""


class IndexOutOfBoundsError(SequenceKitError, IndexError):
    """A 1-based position does not address an element of the sequence."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__("Index is out of bound")
        self.index = index
        self.size = size


class SamplingError(SequenceKitError):
    """Random selection could not find an unused position."""


class CommandError(SequenceKitError):
    """A REPL command line could not be parsed or applied."""
