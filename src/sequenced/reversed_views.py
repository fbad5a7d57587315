"""Reverse-ordered views over sequenced containers.

A view stores nothing but a reference to its backing container. Reading
through it reads the backing container back to front, and writing through it
writes to the backing container with the two ends swapped. The view and the
backing container therefore share one mutable state: whatever lock guards
one of them has to guard the other too.
"""
from __future__ import annotations

from typing import Iterator, Optional, TypeVar

from .interfaces import SequencedCollection, SequencedMap, SequencedSet

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class ReversedSequence(SequencedCollection[T]):
    def __init__(self, backing: SequencedCollection[T]):
        self._backing = backing

    def add_first(self, item: T) -> None:
        self._backing.add_last(item)

    def add_last(self, item: T) -> None:
        self._backing.add_first(item)

    def remove_first(self) -> T:
        return self._backing.remove_last()

    def remove_last(self) -> T:
        return self._backing.remove_first()

    def first(self) -> T:
        return self._backing.last()

    def last(self) -> T:
        return self._backing.first()

    def remove(self, item: T) -> None:
        self._backing.remove_last_occurrence(item)

    def remove_last_occurrence(self, item: T) -> None:
        self._backing.remove(item)

    def discard(self, item: T) -> None:
        try:
            self.remove(item)
        except ValueError:
            pass

    def clear(self) -> None:
        self._backing.clear()

    def reversed(self) -> SequencedCollection[T]:
        return self._backing

    def __contains__(self, item: object) -> bool:
        return item in self._backing

    def __iter__(self) -> Iterator[T]:
        return reversed(self._backing)

    def __reversed__(self) -> Iterator[T]:
        return iter(self._backing)

    def __len__(self) -> int:
        return len(self._backing)


class ReversedSet(ReversedSequence[T], SequencedSet[T]):
    _backing: SequencedSet[T]

    def remove(self, item: T) -> None:
        if item not in self._backing:
            raise KeyError(item)
        self._backing.discard(item)

    def discard(self, item: T) -> None:
        self._backing.discard(item)

    def reversed(self) -> SequencedSet[T]:
        return self._backing


class ReversedMap(SequencedMap[K, V]):
    def __init__(self, backing: SequencedMap[K, V]):
        self._backing = backing

    def put_first(self, key: K, value: V) -> Optional[V]:
        return self._backing.put_last(key, value)

    def put_last(self, key: K, value: V) -> Optional[V]:
        return self._backing.put_first(key, value)

    def first_entry(self) -> tuple[K, V]:
        return self._backing.last_entry()

    def last_entry(self) -> tuple[K, V]:
        return self._backing.first_entry()

    def poll_first_entry(self) -> tuple[K, V]:
        return self._backing.poll_last_entry()

    def poll_last_entry(self) -> tuple[K, V]:
        return self._backing.poll_first_entry()

    def popitem(self, last: bool = True) -> tuple[K, V]:
        return self._backing.popitem(last=not last)

    def clear(self) -> None:
        self._backing.clear()

    def reversed(self) -> SequencedMap[K, V]:
        return self._backing

    def __getitem__(self, key: K) -> V:
        return self._backing[key]

    def __setitem__(self, key: K, value: V) -> None:
        # new keys land at the end of the view, existing keys stay put
        if key in self._backing:
            self._backing[key] = value
        else:
            self._backing.put_first(key, value)

    def __delitem__(self, key: K) -> None:
        del self._backing[key]

    def __contains__(self, key: object) -> bool:
        return key in self._backing

    def __iter__(self) -> Iterator[K]:
        return reversed(self._backing)

    def __reversed__(self) -> Iterator[K]:
        return iter(self._backing)

    def __len__(self) -> int:
        return len(self._backing)
