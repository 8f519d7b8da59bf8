"""A plain binary tree with pre-, in- and post-order traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class BinaryTree(Generic[T]):
    """A node holding ``key`` with optional left and right subtrees."""

    key: T
    left: Optional[BinaryTree[T]] = None
    right: Optional[BinaryTree[T]] = None

    def insert_left_tree(self, key: T) -> None:
        """Put a new node for ``key`` as the left child; the old left child hangs below it."""
        self.left = BinaryTree(key, left=self.left)

    def insert_right_tree(self, key: T) -> None:
        """Put a new node for ``key`` as the right child; the old right child hangs below it."""
        self.right = BinaryTree(key, right=self.right)

    def preorder(self) -> list[T]:
        """Print and return the keys root first, then left, then right."""
        return preorder(self)

    def inorder(self) -> list[T]:
        """Print and return the keys left first, then root, then right."""
        return inorder(self)

    def postorder(self) -> list[T]:
        """Print and return the keys left first, then right, then root."""
        return postorder(self)


def _preorder_keys(bt: BinaryTree[T] | None) -> Iterator[T]:
    if bt is not None:
        yield bt.key
        yield from _preorder_keys(bt.left)
        yield from _preorder_keys(bt.right)


def _inorder_keys(bt: BinaryTree[T] | None) -> Iterator[T]:
    if bt is not None:
        yield from _inorder_keys(bt.left)
        yield bt.key
        yield from _inorder_keys(bt.right)


def _postorder_keys(bt: BinaryTree[T] | None) -> Iterator[T]:
    if bt is not None:
        yield from _postorder_keys(bt.left)
        yield from _postorder_keys(bt.right)
        yield bt.key


def _report(keys: Iterator[T]) -> list[T]:
    result = []
    for key in keys:
        print(f"key is {key!r}")
        result.append(key)
    return result


def preorder(bt: BinaryTree[T] | None) -> list[T]:
    """Print and return the keys of ``bt`` in preorder; an absent tree gives []."""
    return _report(_preorder_keys(bt))


def inorder(bt: BinaryTree[T] | None) -> list[T]:
    """Print and return the keys of ``bt`` in inorder; an absent tree gives []."""
    return _report(_inorder_keys(bt))


def postorder(bt: BinaryTree[T] | None) -> list[T]:
    """Print and return the keys of ``bt`` in postorder; an absent tree gives []."""
    return _report(_postorder_keys(bt))