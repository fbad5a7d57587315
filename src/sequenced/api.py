from __future__ import annotations

from typing import TypeVar

from .interfaces import SequencedCollection, SequencedMap, SequencedSet
from .read_only_views import ReadOnlyMap, ReadOnlySequence, ReadOnlySet

C = TypeVar("C", SequencedCollection, SequencedMap)


def read_only(container: C) -> C:
    """Wrap ``container`` so that every mutator raises ``UnsupportedMutationError``.

    The decorator matches the container's kind (map, set or plain sequence),
    so ``read_only(OrderedSet())`` still supports set comparisons. A container
    that is already read-only is returned as is.
    """
    if isinstance(container, (ReadOnlyMap, ReadOnlySequence)):
        return container
    if isinstance(container, SequencedMap):
        return ReadOnlyMap(container)
    if isinstance(container, SequencedSet):
        return ReadOnlySet(container)
    if isinstance(container, SequencedCollection):
        return ReadOnlySequence(container)
    raise TypeError(f"read_only() expects a sequenced container, got {type(container).__name__}")


def reversed_view(container: C) -> C:
    """Reverse-ordered view sharing storage with ``container``."""
    if not isinstance(container, (SequencedCollection, SequencedMap)):
        raise TypeError(f"reversed_view() expects a sequenced container, got {type(container).__name__}")
    return container.reversed()
