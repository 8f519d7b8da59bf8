"""A binary search tree mapping ordered keys to values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class _Node(Generic[K, V]):
    key: K
    val: V
    left: Optional[_Node[K, V]] = None
    right: Optional[_Node[K, V]] = None


def _pre(node: _Node | None) -> Iterator[_Node]:
    if node is not None:
        yield node
        yield from _pre(node.left)
        yield from _pre(node.right)


def _in(node: _Node | None) -> Iterator[_Node]:
    if node is not None:
        yield from _in(node.left)
        yield node
        yield from _in(node.right)


def _post(node: _Node | None) -> Iterator[_Node]:
    if node is not None:
        yield from _post(node.left)
        yield from _post(node.right)
        yield node


def _report(nodes: Iterator[_Node]) -> list[tuple]:
    pairs = []
    for node in nodes:
        print(f"key: {node.key!r}, val: {node.val!r}")
        pairs.append((node.key, node.val))
    return pairs


class BST(Generic[K, V]):
    """Unbalanced binary search tree; inserting an existing key replaces its value."""

    def __init__(self) -> None:
        self._root: _Node[K, V] | None = None

    def __len__(self) -> int:
        return sum(1 for _ in _pre(self._root))

    def __repr__(self) -> str:
        return f"BST({[(n.key, n.val) for n in _in(self._root)]!r})"

    def is_empty(self) -> bool:
        """Return True when the tree holds no keys."""
        return self._root is None

    def preorder(self) -> list[tuple[K, V]]:
        """Print and return (key, value) pairs in preorder."""
        return _report(_pre(self._root))

    def inorder(self) -> list[tuple[K, V]]:
        """Print and return (key, value) pairs in key order."""
        return _report(_in(self._root))

    def postorder(self) -> list[tuple[K, V]]:
        """Print and return (key, value) pairs in postorder."""
        return _report(_post(self._root))

    def insert(self, key: K, val: V) -> None:
        """Store ``val`` under ``key``."""
        if self._root is None:
            self._root = _Node(key, val)
            return
        node = self._root
        while True:
            if key == node.key:
                node.val = val
                return
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key, val)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(key, val)
                    return
                node = node.right

    def _find(self, key: K) -> _Node[K, V] | None:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def search(self, key: K) -> bool:
        """Return True when ``key`` is in the tree."""
        return self._find(key) is not None

    def get(self, key: K) -> V | None:
        """Return the value stored under ``key``, or None."""
        node = self._find(key)
        return None if node is None else node.val

    def min(self) -> tuple[K | None, V | None]:
        """Return the (key, value) with the smallest key, or (None, None) when empty."""
        node = self._root
        if node is None:
            return None, None
        while node.left is not None:
            node = node.left
        return node.key, node.val

    def max(self) -> tuple[K | None, V | None]:
        """Return the (key, value) with the largest key, or (None, None) when empty."""
        node = self._root
        if node is None:
            return None, None
        while node.right is not None:
            node = node.right
        return node.key, node.val