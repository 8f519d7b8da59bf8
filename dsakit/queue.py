"""A bounded first-in, first-out queue and the hot-potato game."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class CapacityError(Exception):
    """Raised when adding to a container that is already full."""

    def __init__(self, message: str = "No space available") -> None:
        super().__init__(message)


class Queue(Generic[T]):
    """Queue holding at most ``cap`` items."""

    def __init__(self, cap: int) -> None:
        self.cap = cap
        self._data: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Queue(cap={self.cap}, data={list(self._data)!r})"

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return not self._data

    def enqueue(self, val: T) -> None:
        """Add ``val`` at the back; raise CapacityError when full."""
        if len(self._data) == self.cap:
            raise CapacityError()
        self._data.append(val)

    def dequeue(self) -> T | None:
        """Remove and return the front item, or None when empty."""
        if not self._data:
            return None
        return self._data.popleft()


def hot_potato(names: Iterable[str], num: int) -> str:
    """Pass the potato ``num`` times per round, eliminating the holder; return the survivor."""
    names = list(names)
    if not names:
        raise ValueError("at least one name is required")
    q: Queue[str] = Queue(len(names))
    for name in names:
        q.enqueue(name)

    while len(q) > 1:
        for _ in range(num):
            q.enqueue(q.dequeue())
        q.dequeue()

    return q.dequeue()