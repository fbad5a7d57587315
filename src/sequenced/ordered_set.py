from __future__ import annotations

import logging
from typing import Hashable, Iterable, Iterator, TypeVar

from .errors import EmptyContainerError
from .interfaces import SequencedSet
from .reversed_views import ReversedSet
from .sequence import OrderedSequence

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class OrderedSet(SequencedSet[T]):
    """Set that remembers insertion order and can be manipulated at both ends.

    The order lives in an ``OrderedSequence``; a plain ``set`` indexes
    membership. Every operation updates both or neither. When built from an
    iterable, the first occurrence of a duplicate decides its position.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._order: OrderedSequence[T] = OrderedSequence()
        self._members: set[T] = set()
        for item in items:
            self.add_last(item)

    def add_first(self, item: T) -> None:
        if item in self._members:
            logger.debug("ignoring duplicate %r", item)
            return
        self._order.add_first(item)
        self._members.add(item)

    def add_last(self, item: T) -> None:
        if item in self._members:
            logger.debug("ignoring duplicate %r", item)
            return
        self._order.add_last(item)
        self._members.add(item)

    def remove_first(self) -> T:
        self._check_not_empty("remove_first")
        item = self._order.remove_first()
        self._members.remove(item)
        return item

    def remove_last(self) -> T:
        self._check_not_empty("remove_last")
        item = self._order.remove_last()
        self._members.remove(item)
        return item

    def first(self) -> T:
        self._check_not_empty("first")
        return self._order.first()

    def last(self) -> T:
        self._check_not_empty("last")
        return self._order.last()

    def _check_not_empty(self, operation: str) -> None:
        if not self._members:
            raise EmptyContainerError(f"{operation}() on empty OrderedSet")

    def discard(self, item: T) -> None:
        if item in self._members:
            # O(n) scan of the order; ends are cheap
            self._order.remove(item)
            self._members.remove(item)

    def clear(self) -> None:
        self._order.clear()
        self._members.clear()

    def reversed(self) -> ReversedSet[T]:
        return ReversedSet(self)

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __iter__(self) -> Iterator[T]:
        return iter(self._order)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._order)

    def __len__(self) -> int:
        return len(self._members)
