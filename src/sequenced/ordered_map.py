from __future__ import annotations

from collections import OrderedDict
from typing import Any, Hashable, Iterator, Optional, TypeVar

from .errors import EmptyContainerError
from .interfaces import SequencedMap
from .reversed_views import ReversedMap

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class OrderedMap(SequencedMap[K, V]):
    """Insertion-ordered mapping with entry access and removal at both ends.

    ``m[k] = v`` and ``put`` append new keys and update existing keys in
    place. ``put_first``/``put_last`` move an existing key to that end.
    Entries are returned as ``(key, value)`` tuples.

    Accepts the same arguments as ``dict``: a mapping or an iterable of
    pairs, plus keyword arguments.
    """

    def __init__(self, other: Any = (), /, **kwargs: V):
        self._entries: OrderedDict[K, V] = OrderedDict()
        self.update(other, **kwargs)

    def put_first(self, key: K, value: V) -> Optional[V]:
        previous = self._entries.get(key)
        self._entries[key] = value
        self._entries.move_to_end(key, last=False)
        return previous

    def put_last(self, key: K, value: V) -> Optional[V]:
        previous = self._entries.get(key)
        self._entries[key] = value
        self._entries.move_to_end(key, last=True)
        return previous

    def poll_first_entry(self) -> tuple[K, V]:
        if not self._entries:
            raise EmptyContainerError("poll_first_entry() on empty OrderedMap")
        return self._entries.popitem(last=False)

    def poll_last_entry(self) -> tuple[K, V]:
        if not self._entries:
            raise EmptyContainerError("poll_last_entry() on empty OrderedMap")
        return self._entries.popitem(last=True)

    def popitem(self, last: bool = True) -> tuple[K, V]:
        if not self._entries:
            raise KeyError("popitem(): map is empty")
        return self._entries.popitem(last=last)

    def clear(self) -> None:
        self._entries.clear()

    def reversed(self) -> ReversedMap[K, V]:
        return ReversedMap(self)

    def __getitem__(self, key: K) -> V:
        return self._entries[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._entries[key] = value

    def __delitem__(self, key: K) -> None:
        del self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __reversed__(self) -> Iterator[K]:
        return reversed(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
