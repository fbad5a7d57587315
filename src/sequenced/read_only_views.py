"""Read-only decorators over sequenced containers.

Reads go straight to the wrapped container, so a decorator always shows the
container's current state. Every mutator raises ``UnsupportedMutationError``
before touching anything, even when the call would have been a no-op.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterator, TypeVar

from .errors import UnsupportedMutationError
from .interfaces import SequencedCollection, SequencedMap, SequencedSet

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def _rejects(name: str) -> Callable[..., None]:
    def method(self, *args, **kwargs):
        logger.debug("rejected %s() on %s", name, type(self).__name__)
        raise UnsupportedMutationError(f"{type(self).__name__} does not support {name}()")

    method.__name__ = method.__qualname__ = name
    return method


class ReadOnlySequence(SequencedCollection[T]):
    def __init__(self, backing: SequencedCollection[T]):
        self._backing = backing

    add = _rejects("add")
    add_first = _rejects("add_first")
    add_last = _rejects("add_last")
    remove_first = _rejects("remove_first")
    remove_last = _rejects("remove_last")
    remove = _rejects("remove")
    remove_last_occurrence = _rejects("remove_last_occurrence")
    discard = _rejects("discard")
    clear = _rejects("clear")

    def first(self) -> T:
        return self._backing.first()

    def last(self) -> T:
        return self._backing.last()

    def reversed(self) -> ReadOnlySequence[T]:
        return ReadOnlySequence(self._backing.reversed())

    def __contains__(self, item: object) -> bool:
        return item in self._backing

    def __iter__(self) -> Iterator[T]:
        return iter(self._backing)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._backing)

    def __len__(self) -> int:
        return len(self._backing)


class ReadOnlySet(ReadOnlySequence[T], SequencedSet[T]):
    _backing: SequencedSet[T]

    pop = _rejects("pop")
    __ior__ = _rejects("__ior__")
    __iand__ = _rejects("__iand__")
    __ixor__ = _rejects("__ixor__")
    __isub__ = _rejects("__isub__")

    def reversed(self) -> ReadOnlySet[T]:
        return ReadOnlySet(self._backing.reversed())


class ReadOnlyMap(SequencedMap[K, V]):
    def __init__(self, backing: SequencedMap[K, V]):
        self._backing = backing

    __setitem__ = _rejects("__setitem__")
    __delitem__ = _rejects("__delitem__")
    put = _rejects("put")
    put_first = _rejects("put_first")
    put_last = _rejects("put_last")
    poll_first_entry = _rejects("poll_first_entry")
    poll_last_entry = _rejects("poll_last_entry")
    pop = _rejects("pop")
    popitem = _rejects("popitem")
    setdefault = _rejects("setdefault")
    update = _rejects("update")
    clear = _rejects("clear")

    def first_entry(self) -> tuple[K, V]:
        return self._backing.first_entry()

    def last_entry(self) -> tuple[K, V]:
        return self._backing.last_entry()

    def reversed(self) -> ReadOnlyMap[K, V]:
        return ReadOnlyMap(self._backing.reversed())

    def __getitem__(self, key: K) -> V:
        return self._backing[key]

    def __contains__(self, key: object) -> bool:
        return key in self._backing

    def __iter__(self) -> Iterator[K]:
        return iter(self._backing)

    def __reversed__(self) -> Iterator[K]:
        return reversed(self._backing)

    def __len__(self) -> int:
        return len(self._backing)
