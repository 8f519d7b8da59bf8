"""A bounded double-ended queue and a palindrome checker built on it."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

from dsakit.queue import CapacityError

T = TypeVar("T")


class Deque(Generic[T]):
    """Double-ended queue holding at most ``cap`` items."""

    def __init__(self, cap: int) -> None:
        self.cap = cap
        # The right end is the front, the left end is the rear.
        self._data: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Deque(cap={self.cap}, data={list(self._data)!r})"

    def is_empty(self) -> bool:
        """Return True when the deque holds no items."""
        return not self._data

    def add_front(self, val: T) -> None:
        """Add ``val`` at the front; raise CapacityError when full."""
        if len(self._data) == self.cap:
            raise CapacityError()
        self._data.append(val)

    def add_rear(self, val: T) -> None:
        """Add ``val`` at the rear; raise CapacityError when full."""
        if len(self._data) == self.cap:
            raise CapacityError()
        self._data.appendleft(val)

    def remove_front(self) -> T | None:
        """Remove and return the front item, or None when empty."""
        return self._data.pop() if self._data else None

    def remove_rear(self) -> T | None:
        """Remove and return the rear item, or None when empty."""
        return self._data.popleft() if self._data else None

    def front(self) -> T | None:
        """Return the front item, or None when empty."""
        return self._data[-1] if self._data else None

    def rear(self) -> T | None:
        """Return the rear item, or None when empty."""
        return self._data[0] if self._data else None


def pal_checker(pal: str) -> bool:
    """Return True when ``pal`` reads the same forwards and backwards."""
    d: Deque[str] = Deque(len(pal))
    for c in pal:
        d.add_rear(c)

    while len(d) > 1:
        if d.remove_front() != d.remove_rear():
            return False
    return True