"""In-place sorting algorithms over mutable sequences of integers."""

from __future__ import annotations

from bisect import bisect_right
from collections import defaultdict
from itertools import accumulate
from typing import Callable, Hashable, MutableSequence, TypeVar

T = TypeVar("T")


def bubble_sort1(nums: MutableSequence[int]) -> None:
    """Bubble sort: each pass carries the largest remaining value to the end."""
    n = len(nums)
    if n < 2:
        return
    for i in range(n):
        for j in range(n - i - 1):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]


def bubble_sort2(nums: MutableSequence[int]) -> None:
    """Bubble sort driven by a shrinking unsorted length."""
    end = len(nums) - 1
    while end > 0:
        for i in range(end):
            if nums[i] > nums[i + 1]:
                nums[i], nums[i + 1] = nums[i + 1], nums[i]
        end -= 1


def bubble_sort3(nums: MutableSequence[int]) -> None:
    """Bubble sort that stops as soon as a pass makes no swap."""
    end = len(nums) - 1
    swapped = True
    while end > 0 and swapped:
        swapped = False
        for i in range(end):
            if nums[i] > nums[i + 1]:
                nums[i], nums[i + 1] = nums[i + 1], nums[i]
                swapped = True
        end -= 1


def cocktail_sort(nums: MutableSequence[int]) -> None:
    """Bubble sort that alternates left-to-right and right-to-left passes."""
    n = len(nums)
    if n <= 1:
        return
    bubble = True
    for i in range(n >> 1):
        if not bubble:
            break
        bubble = False
        for j in range(i, n - i - 1):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]
                bubble = True
        for j in range(n - i - 1, i, -1):
            if nums[j] < nums[j - 1]:
                nums[j - 1], nums[j] = nums[j], nums[j - 1]
                bubble = True


def comb_sort(nums: MutableSequence[int]) -> None:
    """Comb sort: compare-and-swap across a gap shrinking by a factor of 0.8.

    Ends after a single pass at gap 1, so the result is only nearly sorted
    for some inputs.
    """
    n = len(nums)
    if n <= 1:
        return
    gap = n
    while gap > 0:
        gap = gap * 4 // 5
        for i in range(gap, n):
            if nums[i - gap] > nums[i]:
                nums[i - gap], nums[i] = nums[i], nums[i - gap]


def cbic_sort1(nums: MutableSequence[int]) -> None:
    """The "can't believe it can sort" double loop over all index pairs."""
    n = len(nums)
    for i in range(n):
        for j in range(n):
            if nums[i] < nums[j]:
                nums[i], nums[j] = nums[j], nums[i]


def cbic_sort2(nums: MutableSequence[int]) -> None:
    """Variant of cbic_sort1 that only compares with earlier positions."""
    n = len(nums)
    if n < 2:
        return
    for i in range(n):
        for j in range(i):
            if nums[i] < nums[j]:
                nums[i], nums[j] = nums[j], nums[i]


def _partition(nums: MutableSequence[int], low: int, high: int) -> int:
    lm, rm = low, high
    pivot = nums[low]
    while True:
        while lm <= rm and nums[lm] <= pivot:
            lm += 1
        while lm <= rm and nums[rm] >= pivot:
            rm -= 1
        if lm > rm:
            break
        nums[lm], nums[rm] = nums[rm], nums[lm]
    nums[low], nums[rm] = nums[rm], nums[low]
    return rm


def quick_sort(nums: MutableSequence[int], low: int, high: int) -> None:
    """Quick sort of ``nums[low:high + 1]`` with the first element as pivot."""
    if low < high:
        split = _partition(nums, low, high)
        quick_sort(nums, low, split - 1)
        quick_sort(nums, split + 1, high)


def insertion_sort(nums: MutableSequence[int]) -> None:
    """Insertion sort shifting larger values right."""
    for i in range(1, len(nums)):
        curr = nums[i]
        pos = i
        while pos > 0 and curr < nums[pos - 1]:
            nums[pos] = nums[pos - 1]
            pos -= 1
        nums[pos] = curr


def bin_insertion_sort(nums: MutableSequence[int]) -> None:
    """Insertion sort that finds each position with a binary search."""
    for i in range(1, len(nums)):
        tmp = nums[i]
        pos = bisect_right(nums, tmp, 0, i)
        if pos != i:
            nums[pos + 1:i + 1] = nums[pos:i]
            nums[pos] = tmp


def shell_sort(nums: MutableSequence[int]) -> None:
    """Shell sort with gaps halving down to 1."""
    n = len(nums)
    gap = n // 2
    while gap > 0:
        for start in range(gap):
            for i in range(start + gap, n, gap):
                curr = nums[i]
                pos = i
                while pos >= gap and curr < nums[pos - gap]:
                    nums[pos] = nums[pos - gap]
                    pos -= gap
                nums[pos] = curr
        gap //= 2


def merge_sort(nums: MutableSequence[int]) -> None:
    """Top-down merge sort."""
    if len(nums) <= 1:
        return
    mid = len(nums) >> 1
    left = list(nums[:mid])
    right = list(nums[mid:])
    merge_sort(left)
    merge_sort(right)

    merged: list[int] = []
    i = k = 0
    while i < len(left) and k < len(right):
        if left[i] < right[k]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[k])
            k += 1
    merged.extend(left[i:])
    merged.extend(right[k:])
    nums[:] = merged


def select_sort(nums: MutableSequence[int]) -> None:
    """Selection sort moving the largest remaining value to the end."""
    for left in range(len(nums) - 1, 0, -1):
        pos_max = max(range(left + 1), key=nums.__getitem__)
        nums[left], nums[pos_max] = nums[pos_max], nums[left]


def _move_down(nums: MutableSequence[int], parent: int, end: int) -> None:
    last = end - 1
    while True:
        left = (parent << 1) + 1
        right = (parent + 1) << 1
        if left > last:
            break
        child = right if right <= last and nums[left] < nums[right] else left
        if nums[child] > nums[parent]:
            nums[child], nums[parent] = nums[parent], nums[child]
        parent = child


def heap_sort(nums: MutableSequence[int]) -> None:
    """Heap sort using a max-heap built in place."""
    n = len(nums)
    if n <= 1:
        return
    for i in range(n >> 1, -1, -1):
        _move_down(nums, i, n)
    for end in range(n - 1, 0, -1):
        nums[0], nums[end] = nums[end], nums[0]
        _move_down(nums, 0, end)


def bucket_sort(nums: MutableSequence[T], hasher: Callable[[T], Hashable]) -> None:
    """Bucket sort: group by ``hasher``, order buckets by key and sort each one.

    The keys ``hasher`` returns must be orderable, and ordered consistently
    with the values.
    """
    buckets: defaultdict = defaultdict(list)
    for val in nums:
        buckets[hasher(val)].append(val)
    nums[:] = [val for key in sorted(buckets) for val in sorted(buckets[key])]


def _check_non_negative(nums: MutableSequence[int]) -> None:
    if any(v < 0 for v in nums):
        raise ValueError("values must not be negative")


def counting_sort(nums: MutableSequence[int]) -> None:
    """Counting sort for non-negative integers."""
    if len(nums) <= 1:
        return
    _check_non_negative(nums)
    counter = [0] * (max(nums) + 1)
    for v in nums:
        counter[v] += 1
    nums[:] = [value for value, count in enumerate(counter) for _ in range(count)]


def radix_sort(nums: MutableSequence[int]) -> None:
    """LSD radix sort for non-negative integers.

    The radix is the smallest power of two not below the number of values.
    """
    n = len(nums)
    if n <= 1:
        return
    _check_non_negative(nums)
    max_num = max(nums)
    radix = 1 << (n - 1).bit_length()

    digit = 1
    while digit <= max_num:
        counter = [0] * radix
        for x in nums:
            counter[x // digit % radix] += 1
        counter = list(accumulate(counter))
        for x in reversed(list(nums)):
            idx = x // digit % radix
            counter[idx] -= 1
            nums[counter[idx]] = x
        digit *= radix