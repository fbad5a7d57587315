from .api import read_only, reversed_view
from .errors import EmptyContainerError, SequencedError, UnsupportedMutationError
from .interfaces import (
    SequencedCollection,
    SequencedItemsView,
    SequencedKeysView,
    SequencedMap,
    SequencedSet,
    SequencedValuesView,
)
from .ordered_map import OrderedMap
from .ordered_set import OrderedSet
from .read_only_views import ReadOnlyMap, ReadOnlySequence, ReadOnlySet
from .reversed_views import ReversedMap, ReversedSequence, ReversedSet
from .sequence import OrderedSequence

__all__ = [
    "read_only",
    "reversed_view",
    "EmptyContainerError",
    "SequencedError",
    "UnsupportedMutationError",
    "SequencedCollection",
    "SequencedSet",
    "SequencedMap",
    "SequencedKeysView",
    "SequencedValuesView",
    "SequencedItemsView",
    "OrderedSequence",
    "OrderedSet",
    "OrderedMap",
    "ReversedSequence",
    "ReversedSet",
    "ReversedMap",
    "ReadOnlySequence",
    "ReadOnlySet",
    "ReadOnlyMap",
]
