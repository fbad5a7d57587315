from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, TypeVar

from .errors import EmptyContainerError
from .interfaces import SequencedCollection
from .reversed_views import ReversedSequence

T = TypeVar("T")


class OrderedSequence(SequencedCollection[T]):
    """Insertion-ordered sequence where duplicates are allowed.

    Backed by a ``deque``, so both ends are O(1). Iterating while the size
    changes raises ``RuntimeError``.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: deque[T] = deque(items)

    def add_first(self, item: T) -> None:
        self._items.appendleft(item)

    def add_last(self, item: T) -> None:
        self._items.append(item)

    def remove_first(self) -> T:
        if not self._items:
            raise EmptyContainerError("remove_first() on empty OrderedSequence")
        return self._items.popleft()

    def remove_last(self) -> T:
        if not self._items:
            raise EmptyContainerError("remove_last() on empty OrderedSequence")
        return self._items.pop()

    def first(self) -> T:
        if not self._items:
            raise EmptyContainerError("first() on empty OrderedSequence")
        return self._items[0]

    def last(self) -> T:
        if not self._items:
            raise EmptyContainerError("last() on empty OrderedSequence")
        return self._items[-1]

    def remove(self, item: T) -> None:
        try:
            self._items.remove(item)
        except ValueError:
            raise ValueError("item not found in ordered sequence") from None

    def remove_last_occurrence(self, item: T) -> None:
        for offset, existing in enumerate(reversed(self._items)):
            if existing == item:
                del self._items[len(self._items) - 1 - offset]
                return
        raise ValueError("item not found in ordered sequence")

    def discard(self, item: T) -> None:
        try:
            self.remove(item)
        except ValueError:
            pass

    def clear(self) -> None:
        self._items.clear()

    def reversed(self) -> ReversedSequence[T]:
        return ReversedSequence(self)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
