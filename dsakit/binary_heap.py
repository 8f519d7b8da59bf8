"""A binary min-heap of integers kept in a 1-based list."""

from __future__ import annotations

from typing import Iterable


def _parent(child: int) -> int:
    return child >> 1


def _left_child(parent: int) -> int:
    return parent << 1


def _right_child(parent: int) -> int:
    return (parent << 1) + 1


class BinaryHeap:
    """Min-heap; slot 0 of the backing list is an unused placeholder."""

    def __init__(self) -> None:
        self._data: list[int | None] = [None]

    def __len__(self) -> int:
        return len(self._data) - 1

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data[1:]!r})"

    def is_empty(self) -> bool:
        """Return True when the heap holds no values."""
        return len(self) == 0

    def min(self) -> int | None:
        """Return the smallest value, or None when empty."""
        return self._data[1] if len(self) else None

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _move_up(self, c: int) -> None:
        while (p := _parent(c)) > 0:
            if self._data[c] < self._data[p]:
                self._swap(c, p)
            c = p

    def _min_child(self, i: int) -> int:
        lc, rc = _left_child(i), _right_child(i)
        if rc > len(self) or self._data[lc] < self._data[rc]:
            return lc
        return rc

    def _move_down(self, c: int) -> None:
        while _left_child(c) <= len(self):
            mc = self._min_child(c)
            if self._data[c] > self._data[mc]:
                self._swap(c, mc)
            c = mc

    def push(self, val: int) -> None:
        """Add ``val`` to the heap."""
        self._data.append(val)
        self._move_up(len(self))

    def pop(self) -> int | None:
        """Remove and return the smallest value, or None when empty."""
        size = len(self)
        if size == 0:
            return None
        if size == 1:
            return self._data.pop()
        self._swap(1, size)
        val = self._data.pop()
        self._move_down(1)
        return val

    def build_new(self, arr: Iterable[int]) -> None:
        """Replace the contents with ``arr`` and restore the heap order."""
        self._data = [None, *arr]
        for p in range(_parent(len(self)), 0, -1):
            self._move_down(p)

    def build_add(self, arr: Iterable[int]) -> None:
        """Push every value of ``arr``."""
        for val in arr:
            self.push(val)