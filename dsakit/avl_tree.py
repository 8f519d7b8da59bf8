"""A self-balancing AVL search tree of ordered values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class AvlNode(Generic[T]):
    """Tree node; ``bfactor`` is the right subtree height minus the left one."""

    val: T
    left: Optional[AvlNode[T]] = None
    right: Optional[AvlNode[T]] = None
    bfactor: int = 0


def _rotate_left(node: AvlNode[T]) -> AvlNode[T]:
    right = node.right
    node.right = right.left
    right.left = node
    return right


def _rotate_right(node: AvlNode[T]) -> AvlNode[T]:
    left = node.left
    node.left = left.right
    left.right = node
    return left


def _rebalance(node: AvlNode[T]) -> AvlNode[T]:
    if node.bfactor == -2:
        lbf = node.left.bfactor
        if lbf in (-1, 0):
            a, b = (0, 0) if lbf == -1 else (-1, 1)
            node = _rotate_right(node)
            node.right.bfactor = a
            node.bfactor = b
        else:
            a, b = {-1: (1, 0), 0: (0, 0), 1: (0, -1)}[node.left.right.bfactor]
            node.left = _rotate_left(node.left)
            node = _rotate_right(node)
            node.right.bfactor = a
            node.left.bfactor = b
            node.bfactor = 0
    elif node.bfactor == 2:
        rbf = node.right.bfactor
        if rbf in (1, 0):
            a, b = (0, 0) if rbf == 1 else (1, -1)
            node = _rotate_left(node)
            node.left.bfactor = a
            node.bfactor = b
        else:
            a, b = {1: (-1, 0), 0: (0, 0), -1: (0, 1)}[node.right.left.bfactor]
            node.right = _rotate_right(node.right)
            node = _rotate_left(node)
            node.left.bfactor = a
            node.right.bfactor = b
            node.bfactor = 0
    return node


def _insert(node: AvlNode[T] | None, val: T) -> tuple[AvlNode[T], bool, bool]:
    """Insert into the subtree; return (new root, inserted, subtree got deeper)."""
    if node is None:
        return AvlNode(val), True, True
    if val == node.val:
        return node, False, False
    if node.val < val:
        node.right, inserted, deepened = _insert(node.right, val)
        if deepened:
            deepened = node.bfactor == 0
            node.bfactor += 1
    else:
        node.left, inserted, deepened = _insert(node.left, val)
        if deepened:
            deepened = node.bfactor == 0
            node.bfactor -= 1
    return _rebalance(node), inserted, deepened


def _count(node: AvlNode[T] | None) -> int:
    return 0 if node is None else 1 + _count(node.left) + _count(node.right)


def _depth(node: AvlNode[T] | None) -> int:
    return 0 if node is None else 1 + max(_depth(node.left), _depth(node.right))


def _walk(node: AvlNode[T] | None) -> Iterator[T]:
    if node is not None:
        yield from _walk(node.left)
        yield node.val
        yield from _walk(node.right)


class AvlTree(Generic[T]):
    """AVL tree holding distinct values; ``root`` is None when empty."""

    def __init__(self) -> None:
        self.root: AvlNode[T] | None = None

    def __len__(self) -> int:
        return _count(self.root)

    def __iter__(self) -> Iterator[T]:
        return _walk(self.root)

    def __repr__(self) -> str:
        return f"AvlTree({list(self)!r})"

    def insert(self, val: T) -> bool:
        """Add ``val``; return False when it was already present."""
        self.root, inserted, _ = _insert(self.root, val)
        return inserted

    def depth(self) -> int:
        """Return the number of levels in the tree."""
        return _depth(self.root)

    def is_empty(self) -> bool:
        """Return True when the tree holds no values."""
        return self.root is None

    def search(self, val: T) -> bool:
        """Return True when ``val`` is in the tree."""
        node = self.root
        while node is not None:
            if node.val == val:
                return True
            node = node.right if node.val < val else node.left
        return False