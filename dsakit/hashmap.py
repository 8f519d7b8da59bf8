"""Fixed-size hash map with integer keys and linear probing."""

from __future__ import annotations

from typing import Generic, TypeVar

from dsakit.queue import CapacityError

T = TypeVar("T")

_EMPTY = 0


def _check_key(key: int) -> None:
    if key <= 0:
        raise ValueError("Error: key must > 0")


class HashMap(Generic[T]):
    """Open-addressing map from positive integers to values, with ``size`` slots."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._slot: list[int] = [_EMPTY] * size
        self._data: list[T | None] = [None] * size

    def hash(self, key: int) -> int:
        """Home slot of ``key``."""
        return key % self.size

    def rehash(self, pos: int) -> int:
        """Next slot to probe after ``pos``."""
        return (pos + 1) % self.size

    def _probe(self, key: int):
        pos = self.hash(key)
        curr = pos
        while True:
            yield curr
            curr = self.rehash(curr)
            if curr == pos:
                return

    def _find(self, key: int) -> int | None:
        for curr in self._probe(key):
            if self._slot[curr] == _EMPTY:
                return None
            if self._slot[curr] == key:
                return curr
        return None

    def insert(self, key: int, value: T) -> None:
        """Store ``value`` under ``key``; raise CapacityError when no slot is free."""
        _check_key(key)
        for curr in self._probe(key):
            if self._slot[curr] in (_EMPTY, key):
                self._slot[curr] = key
                self._data[curr] = value
                return
        raise CapacityError("slot is full")

    def remove(self, key: int) -> T | None:
        """Remove ``key`` and return its value, or None if absent."""
        _check_key(key)
        curr = self._find(key)
        if curr is None:
            return None
        value = self._data[curr]
        self._slot[curr] = _EMPTY
        self._data[curr] = None
        return value

    def get(self, key: int) -> T | None:
        """Return the value for ``key``, or None if absent."""
        _check_key(key)
        curr = self._find(key)
        return None if curr is None else self._data[curr]

    def __contains__(self, key: int) -> bool:
        _check_key(key)
        return key in self._slot

    def __len__(self) -> int:
        return sum(1 for s in self._slot if s != _EMPTY)