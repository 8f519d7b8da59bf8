"""A growable sequence stored as a chain of singly linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    elem: T
    next: Optional[_Node[T]] = None


class LVec(Generic[T]):
    """Vector-like container whose elements live in linked nodes."""

    def __init__(self) -> None:
        self._head: _Node[T] | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.elem
            node = node.next

    def __repr__(self) -> str:
        return f"LVec({list(self)!r})"

    def _node_at(self, index: int) -> _Node[T]:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def is_empty(self) -> bool:
        """Return True when the container holds no elements."""
        return self._size == 0

    def push(self, elem: T) -> None:
        """Add ``elem`` at the end."""
        self.insert(self._size, elem)

    def append(self, other: LVec[T]) -> None:
        """Move every element of ``other`` to the end of this one, emptying ``other``."""
        if other is self:
            raise ValueError("cannot append an LVec to itself")
        for elem in list(other):
            self.push(elem)
        other.clear()

    def insert(self, index: int, elem: T) -> None:
        """Insert ``elem`` before position ``index``; past the end means at the end."""
        if index < 0:
            raise IndexError("index must not be negative")
        index = min(index, self._size)
        if index == 0:
            self._head = _Node(elem, self._head)
        else:
            prev = self._node_at(index - 1)
            prev.next = _Node(elem, prev.next)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the last element; raise IndexError when empty."""
        if self._size == 0:
            raise IndexError("pop from empty LVec")
        return self.remove(self._size - 1)

    def remove(self, index: int) -> T | None:
        """Remove and return the element at ``index``, or None when out of range."""
        if index < 0 or index >= self._size:
            return None
        if index == 0:
            node = self._head
            self._head = node.next
        else:
            prev = self._node_at(index - 1)
            node = prev.next
            prev.next = node.next
        self._size -= 1
        return node.elem