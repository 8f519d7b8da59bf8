"""Sequential, binary, interpolation and exponential search."""

from __future__ import annotations

from typing import Sequence


def sequential_search(nums: Sequence[int], num: int) -> bool:
    """Return True when ``num`` occurs in ``nums``, scanning from the start."""
    return any(x == num for x in nums)


def sequential_search_ordered(nums: Sequence[int], num: int) -> bool:
    """Scan sorted ``nums`` for ``num``, stopping once a larger value is seen."""
    for x in nums:
        if x == num:
            return True
        if num < x:
            return False
    return False


def sequential_search_pos(nums: Sequence[int], num: int) -> int | None:
    """Return the index of the first ``num`` in ``nums``, or None."""
    return next((pos for pos, x in enumerate(nums) if x == num), None)


def binary_search1(nums: Sequence[int], num: int) -> bool:
    """Iterative binary search over sorted ``nums``."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) >> 1
        if num == nums[mid]:
            return True
        if num < nums[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return False


def binary_search2(nums: Sequence[int], num: int) -> bool:
    """Recursive binary search over sorted ``nums``."""
    if not nums:
        return False
    mid = len(nums) >> 1
    if num == nums[mid]:
        return True
    if num < nums[mid]:
        return binary_search2(nums[:mid], num)
    return binary_search2(nums[mid + 1:], num)


def interpolation_search(nums: Sequence[int], target: int) -> bool:
    """Search sorted ``nums`` by estimating the target's position from its value."""
    if not nums:
        return False

    low, high = 0, len(nums) - 1
    while low <= high and nums[low] <= target <= nums[high]:
        if nums[low] == nums[high]:
            return nums[low] == target
        offset = (target - nums[low]) * (high - low) // (nums[high] - nums[low])
        interpolant = low + offset
        if nums[interpolant] == target:
            return True
        if nums[interpolant] > target:
            high = interpolant - 1
        else:
            low = interpolant + 1
    return False


def exponential_search(nums: Sequence[int], target: int) -> bool:
    """Find a doubling upper bound for ``target`` then binary-search that range."""
    size = len(nums)
    if size == 0:
        return False

    high = 1
    while high < size and nums[high] < target:
        high <<= 1

    low = high >> 1
    return binary_search1(nums[low:min(size, high + 1)], target)