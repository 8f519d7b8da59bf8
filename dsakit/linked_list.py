"""Singly linked list and a stack built on linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    elem: T
    next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """Singly linked list where new elements go to the head."""

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
        return f"LinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list has no elements."""
        return self._size == 0

    def push(self, elem: T) -> None:
        """Insert ``elem`` at the head."""
        self._head = _Node(elem, self._head)
        self._size += 1

    def pop(self) -> T | None:
        """Remove and return the head element, or None when empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        self._size -= 1
        return node.elem

    def peek(self) -> T | None:
        """Return the head element, or None when empty."""
        return None if self._head is None else self._head.elem

    def replace_head(self, value: T) -> T:
        """Replace the head element with ``value`` and return the old one.

        Raises IndexError when the list is empty.
        """
        if self._head is None:
            raise IndexError("replace_head on empty list")
        old, self._head.elem = self._head.elem, value
        return old

    def drain(self) -> Iterator[T]:
        """Yield elements from the head, removing each as it is yielded."""
        while self._head is not None:
            yield self.pop()


class ListStack(Generic[T]):
    """Stack whose top is the head of a chain of linked nodes."""

    def __init__(self) -> None:
        self._top: _Node[T] | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return self._size == 0

    def push(self, val: T) -> None:
        """Put ``val`` on top of the stack."""
        self._top = _Node(val, self._top)
        self._size += 1

    def pop(self) -> T | None:
        """Remove and return the top item, or None when empty."""
        node = self._top
        if node is None:
            return None
        self._top = node.next
        self._size -= 1
        return node.elem

    def peek(self) -> T | None:
        """Return the top item without removing it, or None when empty."""
        return None if self._top is None else self._top.elem