"""Command-line demonstration of sorting and binary-tree traversal."""

from __future__ import annotations

import argparse
from typing import Sequence

from dsakit.binary_tree import BinaryTree
from dsakit.sort import bubble_sort1


def print_rust() -> None:
    """Print the greeting line."""
    print("Welcome to Rust")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Show a sort and a binary-tree traversal."
    )
    parser.parse_args(argv)

    print_rust()

    nums = [1, 3, 8, 6, 4, 2, 7, 5, 9, 0]
    bubble_sort1(nums)
    print("".join(f"{n}, " for n in nums))

    tree = BinaryTree(1)
    tree.insert_left_tree(0)
    tree.insert_right_tree(2)
    print(f"root_value: {tree.key}")
    print(f"left_value: {tree.left.key}")
    print(f"right_value: {tree.right.key}")

    tree.key = 3
    print(f"value_parent_new: {tree.key}")

    for _ in range(2):
        for title, walk in (
            ("pretorder", tree.preorder),
            ("inorder", tree.inorder),
            ("postorder", tree.postorder),
        ):
            print(f"------{title}------")
            walk()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())