"""Recursive sums, number-to-string conversion and the Tower of Hanoi."""

from __future__ import annotations

from typing import Iterable, Sequence

from dsakit.stack import Stack

_DIGITS = "0123456789ABCDEF"


def _check_nonempty(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("nums must not be empty")


def _check_base(base: int) -> None:
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}")


def nums_sum1(nums: Iterable[int]) -> int:
    """Sum the numbers with a loop."""
    total = 0
    for num in nums:
        total += num
    return total


def nums_sum2(nums: Sequence[int]) -> int:
    """Sum recursively, taking the first number off each time."""
    _check_nonempty(nums)
    if len(nums) == 1:
        return nums[0]
    return nums[0] + nums_sum2(nums[1:])


def nums_sum3(nums: Sequence[int]) -> int:
    """Sum recursively, taking the last number off each time."""
    _check_nonempty(nums)
    if len(nums) == 1:
        return nums[0]
    return nums[-1] + nums_sum3(nums[:-1])


def nums_sum4(total: int, nums: Sequence[int]) -> int:
    """Tail-recursive sum from the front, accumulating into ``total``."""
    _check_nonempty(nums)
    if len(nums) == 1:
        return total + nums[0]
    return nums_sum4(total + nums[0], nums[1:])


def nums_sum5(total: int, nums: Sequence[int]) -> int:
    """Tail-recursive sum from the back, accumulating into ``total``."""
    _check_nonempty(nums)
    if len(nums) == 1:
        return total + nums[0]
    return nums_sum5(total + nums[-1], nums[:-1])


def num2str_rec(num: int, base: int) -> str:
    """Write a non-negative integer in ``base`` (2 to 16) recursively."""
    _check_base(base)
    if num < 0:
        raise ValueError("num must not be negative")
    if num < base:
        return _DIGITS[num]
    return num2str_rec(num // base, base) + _DIGITS[num % base]


def num2str_stk(num: int, base: int) -> str:
    """Write a positive integer in ``base`` (2 to 16) using a stack; zero gives ''."""
    _check_base(base)
    rem_stack: Stack[int] = Stack()
    while num > 0:
        rem_stack.push(num % base)
        num //= base

    parts = []
    while not rem_stack.is_empty():
        parts.append(_DIGITS[rem_stack.pop()])
    return "".join(parts)


def move2tower(height: int, src_p: str, des_p: str, mid_p: str) -> list[tuple[str, str]]:
    """Move a tower of ``height`` disks from ``src_p`` to ``des_p``.

    Each move is printed and the moves are returned as (from, to) pairs.
    """
    moves: list[tuple[str, str]] = []

    def _move(h: int, src: str, des: str, mid: str) -> None:
        if h >= 1:
            _move(h - 1, src, mid, des)
            print(f"moving disk from {src} to {des}")
            moves.append((src, des))
            _move(h - 1, mid, des, src)

    _move(height, src_p, des_p, mid_p)
    return moves