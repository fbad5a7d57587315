from __future__ import annotations


class SequencedError(Exception):
    """Base class for errors raised by sequenced containers."""


class EmptyContainerError(SequencedError, IndexError):
    """An end of an empty container was peeked at or removed."""


class UnsupportedMutationError(SequencedError, TypeError):
    """A mutating operation was called on a read-only container."""
