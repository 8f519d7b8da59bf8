"""A last-in, first-out stack backed by a Python list."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Stack whose top is the end of an internal list."""

    def __init__(self) -> None:
        self._data: list[T] = []

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Stack({self._data!r})"

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._data

    def push(self, val: T) -> None:
        """Put ``val`` on top of the stack."""
        self._data.append(val)

    def pop(self) -> T | None:
        """Remove and return the top item, or None when the stack is empty."""
        if not self._data:
            return None
        return self._data.pop()

    def peek(self) -> T | None:
        """Return the top item without removing it, or None when empty."""
        if not self._data:
            return None
        return self._data[-1]