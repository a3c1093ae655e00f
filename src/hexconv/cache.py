"""Bounded FIFO cache for converted lines."""

from __future__ import annotations

from collections import OrderedDict
from threading import Lock
from typing import Generic, Hashable, Iterator, TypeVar


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class FifoCache(Generic[K, V]):
    """Bounded cache with first-in-first-out eviction.

    Lookups never change eviction order, and the first value stored for a key
    is kept until the key is evicted. A capacity of zero or less gives a cache
    that never stores anything.

    Each call holds the lock on its own; a `get` followed by a conditional
    `set` is not atomic.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._store: OrderedDict[K, V] = OrderedDict()
        self._lock = Lock()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def get(self, key: K) -> tuple[V | None, bool]:
        """Return `(value, True)` on a hit and `(None, False)` on a miss."""
        with self._lock:
            if key in self._store:
                self.hits += 1
                return self._store[key], True
            self.misses += 1
            return None, False

    def set(self, key: K, value: V) -> None:
        if self._capacity <= 0:
            return
        with self._lock:
            if key in self._store:
                return
            if len(self._store) >= self._capacity:
                self._store.popitem(last=False)
                self.evictions += 1
            self._store[key] = value

    def keys(self) -> Iterator[K]:
        """Keys from oldest to newest insertion."""
        with self._lock:
            return iter(list(self._store))

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "capacity": self._capacity,
                "size": len(self._store),
                "hits": self.hits,
                "misses": self.misses,
                "evictions": self.evictions,
            }
