"""A least-recently-used cache of fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

CACHE_SIZE = 100


class LRUCache(Generic[K, V]):
    """Cache that evicts the least recently used entry when full."""

    def __init__(self, cap: int = CACHE_SIZE) -> None:
        if cap < 1:
            raise ValueError("capacity must be at least 1")
        self.cap = cap
        self._entries: OrderedDict[K, V] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"LRUCache(cap={self.cap}, entries={list(self._entries.items())!r})"

    def insert(self, key: K, val: V) -> V | None:
        """Store ``val`` under ``key`` as most recent; return the replaced value or None."""
        if key in self._entries:
            self._entries.move_to_end(key)
            old = self._entries[key]
            self._entries[key] = val
            return old
        if len(self._entries) == self.cap:
            self._entries.popitem(last=False)
        self._entries[key] = val
        return None

    def get(self, key: K) -> V | None:
        """Return the value for ``key`` and mark it most recent, or None if absent."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]