# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
"""Fixed-capacity LRU cache backed by a hash map and a doubly-linked list.

The map resolves a key to its entry in O(1); the list keeps entries ordered
by recency, most-recently-used at ``head`` and least-recently-used at
``tail``. ``set`` and a hitting ``get`` both move the entry to ``head``;
inserting a new key into a full cache evicts ``tail``.

The cache is not thread-safe. Callers sharing an instance between threads or
tasks must wrap every call (reads included, since a hit reorders the list) in
their own lock.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from typing import Callable, Generic, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

from .errors import InvalidCapacityError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

EvictionCallback = Callable[[K, V], None]


class Cache(Protocol[K, V]):
    """Minimal key-value cache interface implemented by :class:`LRUCache`."""

    def set(self, key: K, value: V) -> None: ...

    def get(self, key: K) -> tuple[V | None, bool]: ...

    def delete(self, key: K) -> None: ...

    def size(self) -> int: ...


class CacheStats(BaseModel):
    """Point-in-time counters for a cache."""

    model_config = ConfigDict(frozen=True)

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0
    capacity: int


class _Entry(Generic[K, V]):
    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.prev: _Entry[K, V] | None = None
        self.next: _Entry[K, V] | None = None


class LRUCache(Generic[K, V]):
    """Bounded LRU cache holding at most ``capacity`` entries.

    ``on_evict`` is called with ``(key, value)`` for every entry dropped to
    make room for a new key. Explicit deletes and ``clear`` do not call it.
    """

    def __init__(
        self,
        capacity: int,
        *,
        on_evict: EvictionCallback[K, V] | None = None,
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(
                f"Capacity must be an int, got {type(capacity).__name__}"
            )
        if capacity < 1:
            raise InvalidCapacityError(capacity)
        self._capacity = capacity
        self._on_evict = on_evict
        self._entries: dict[K, _Entry[K, V]] = {}
        self._head: _Entry[K, V] | None = None
        self._tail: _Entry[K, V] | None = None
        # bumped on every reorder so iterators can detect mutation
        self._version = 0
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        """Return the configured capacity. Use ``len()`` for occupancy."""
        return self._capacity

    def set(self, key: K, value: V) -> None:
        entry = self._entries.get(key)
        if entry is not None:
            entry.value = value
            self._move_to_head(entry)
            return

        entry = _Entry(key, value)
        self._insert_at_head(entry)
        self._entries[key] = entry
        if len(self._entries) > self._capacity:
            self._evict()

    def get(self, key: K) -> tuple[V | None, bool]:
        """Return ``(value, True)`` and mark ``key`` as used, or ``(None, False)``."""
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None, False
        self._hits += 1
        self._move_to_head(entry)
        return entry.value, True

    def peek(self, key: K) -> tuple[V | None, bool]:
        """Like :meth:`get` but leaves recency and stats untouched."""
        entry = self._entries.get(key)
        if entry is None:
            return None, False
        return entry.value, True

    def delete(self, key: K) -> None:
        entry = self._entries.pop(key, None)
        if entry is not None:
            self._detach(entry)

    def clear(self) -> None:
        logger.debug("Clearing LRU cache with %d entries", len(self._entries))
        self._entries.clear()
        self._head = None
        self._tail = None
        self._version += 1

    def keys(self) -> Iterator[K]:
        """Yield keys from most- to least-recently used."""
        for entry in self._walk():
            yield entry.key

    def items(self) -> Iterator[tuple[K, V]]:
        for entry in self._walk():
            yield entry.key, entry.value

    def stats(self) -> CacheStats:
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
            size=len(self._entries),
            capacity=self._capacity,
        )

    def reset_stats(self) -> None:
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def __getitem__(self, key: K) -> V:
        value, found = self.get(key)
        if not found:
            raise KeyError(key)
        return value  # type: ignore[return-value]

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        if key not in self._entries:
            raise KeyError(key)
        self.delete(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"size={len(self._entries)})"
        )

    # ------------------------------------------------------------------
    # Linked list maintenance
    # ------------------------------------------------------------------

    def _walk(self) -> Iterator[_Entry[K, V]]:
        version = self._version
        entry = self._head
        while entry is not None:
            yield entry
            if self._version != version:
                raise RuntimeError("LRUCache mutated during iteration")
            entry = entry.next

    def _move_to_head(self, entry: _Entry[K, V]) -> None:
        if entry is self._head:
            return
        self._detach(entry)
        self._insert_at_head(entry)

    def _detach(self, entry: _Entry[K, V]) -> None:
        if entry.prev is None:
            self._head = entry.next
        else:
            entry.prev.next = entry.next

        if entry.next is None:
            self._tail = entry.prev
        else:
            entry.next.prev = entry.prev

        entry.prev = None
        entry.next = None
        self._version += 1

    def _insert_at_head(self, entry: _Entry[K, V]) -> None:
        entry.next = self._head
        entry.prev = None
        if self._head is not None:
            self._head.prev = entry
        if self._tail is None:
            self._tail = entry
        self._head = entry
        self._version += 1

    def _evict(self) -> None:
        entry = self._tail
        assert entry is not None
        del self._entries[entry.key]
        self._detach(entry)
        self._evictions += 1
        logger.debug("Evicted least-recently-used key %r", entry.key)
        if self._on_evict is not None:
            self._on_evict(entry.key, entry.value)
