"""Capability interfaces shared by the ordered containers and their views.

Both adapters (reversed view, read-only decorator) are written against these
interfaces only, so they compose with any container and with each other.
"""
from __future__ import annotations

from abc import abstractmethod
from collections.abc import (
    Collection,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    MutableMapping,
    MutableSet,
    Reversible,
    Set as AbstractSet,
    ValuesView,
)
from typing import Optional, TypeVar

from .errors import EmptyContainerError

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class SequencedCollection(Collection[T], Reversible[T]):
    """Collection with a defined encounter order and O(1) access at both ends."""

    __slots__ = ()

    @abstractmethod
    def add_first(self, item: T) -> None: ...

    @abstractmethod
    def add_last(self, item: T) -> None: ...

    @abstractmethod
    def remove_first(self) -> T: ...

    @abstractmethod
    def remove_last(self) -> T: ...

    @abstractmethod
    def reversed(self) -> SequencedCollection[T]:
        """Reverse-ordered view backed by this collection."""

    def add(self, item: T) -> None:
        self.add_last(item)

    def first(self) -> T:
        for item in self:
            return item
        raise EmptyContainerError(f"first() on empty {type(self).__name__}")

    def last(self) -> T:
        for item in reversed(self):
            return item
        raise EmptyContainerError(f"last() on empty {type(self).__name__}")

    def clear(self) -> None:
        while self:
            self.remove_last()

    def __bool__(self) -> bool:
        return len(self) > 0

    def __eq__(self, other: object) -> bool:
        # order-sensitive; sets compare as sets (see SequencedSet)
        if not isinstance(other, SequencedCollection) or isinstance(other, AbstractSet):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SequencedSet(SequencedCollection[T], MutableSet[T]):
    """Sequenced collection without duplicates; inserting a present element is a no-op."""

    __slots__ = ()

    @abstractmethod
    def discard(self, item: T) -> None: ...

    @abstractmethod
    def reversed(self) -> SequencedSet[T]: ...

    def pop(self) -> T:
        try:
            return self.remove_first()
        except EmptyContainerError:
            raise KeyError(f"pop from an empty {type(self).__name__}") from None

    # set equality, not sequence equality
    __eq__ = AbstractSet.__eq__
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def _from_iterable(cls, it: Iterable[T]) -> SequencedSet[T]:
        # results of |, &, -, ^ are always fresh mutable sets
        from .ordered_set import OrderedSet

        return OrderedSet(it)


class SequencedKeysView(KeysView[K], Reversible[K]):
    def __reversed__(self) -> Iterator[K]:
        yield from reversed(self._mapping)


class SequencedValuesView(ValuesView[V], Reversible[V]):
    def __reversed__(self) -> Iterator[V]:
        for key in reversed(self._mapping):
            yield self._mapping[key]


class SequencedItemsView(ItemsView[K, V], Reversible[tuple[K, V]]):
    def __reversed__(self) -> Iterator[tuple[K, V]]:
        for key in reversed(self._mapping):
            yield (key, self._mapping[key])


class SequencedMap(MutableMapping[K, V], Reversible[K]):
    """Mapping whose entries keep a defined order that can be manipulated at both ends.

    Entries are plain ``(key, value)`` tuples. Assigning to an existing key
    keeps its position; only ``put_first``/``put_last`` move a key.
    """

    __slots__ = ()

    @abstractmethod
    def put_first(self, key: K, value: V) -> Optional[V]: ...

    @abstractmethod
    def put_last(self, key: K, value: V) -> Optional[V]: ...

    @abstractmethod
    def reversed(self) -> SequencedMap[K, V]: ...

    def put(self, key: K, value: V) -> Optional[V]:
        previous = self.get(key)
        self[key] = value
        return previous

    def first_entry(self) -> tuple[K, V]:
        for key in self:
            return (key, self[key])
        raise EmptyContainerError(f"first_entry() on empty {type(self).__name__}")

    def last_entry(self) -> tuple[K, V]:
        for key in reversed(self):
            return (key, self[key])
        raise EmptyContainerError(f"last_entry() on empty {type(self).__name__}")

    def poll_first_entry(self) -> tuple[K, V]:
        entry = self.first_entry()
        del self[entry[0]]
        return entry

    def poll_last_entry(self) -> tuple[K, V]:
        entry = self.last_entry()
        del self[entry[0]]
        return entry

    def popitem(self, last: bool = True) -> tuple[K, V]:
        if not self:
            raise KeyError(f"popitem(): {type(self).__name__} is empty")
        return self.poll_last_entry() if last else self.poll_first_entry()

    def ordered_keys(self) -> SequencedKeysView[K]:
        return SequencedKeysView(self)

    def ordered_values(self) -> SequencedValuesView[V]:
        return SequencedValuesView(self)

    def ordered_items(self) -> SequencedItemsView[K, V]:
        return SequencedItemsView(self)

    def keys(self) -> SequencedKeysView[K]:
        return self.ordered_keys()

    def values(self) -> SequencedValuesView[V]:
        return self.ordered_values()

    def items(self) -> SequencedItemsView[K, V]:
        return self.ordered_items()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"

