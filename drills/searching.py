"""Exercises on binary search and sorted sequences."""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Optional, Sequence


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> Optional[int]:
    """Return the first of versions 1..n that ``is_bad_version`` accepts, or None."""
    low, high = 1, n
    while low <= high:
        mid = low + (high - low) // 2
        if is_bad_version(mid):
            if mid == 1 or not is_bad_version(mid - 1):
                return mid
            high = mid
        else:
            low = mid + 1
    return None


def search_rotated(nums: Sequence[int], target: int) -> Optional[int]:
    """Return the index of ``target`` in a rotated sorted sequence of distinct values."""
    if not nums:
        return None
    low, high = 0, len(nums) - 1
    while low != high:
        mid = low + (high - low) // 2
        if nums[mid] < nums[high]:
            high = mid
        else:
            low = mid + 1
    pivot = low
    if target == nums[pivot]:
        return pivot
    if target > nums[-1]:
        lo, hi = 0, pivot
    else:
        lo, hi = pivot, len(nums)
    index = bisect_left(nums, target, lo, hi)
    if index < hi and nums[index] == target:
        return index
    return None


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence."""
    ordered = sorted(nums)
    index = bisect_left(ordered, target)
    return index < len(ordered) and ordered[index] == target


def peak_index_in_mountain_array(arr: Sequence[int]) -> Optional[int]:
    """Return the index of the peak of a mountain array, or None if none is found."""
    low, high = 1, len(arr) - 2
    while low <= high:
        mid = low + (high - low) // 2
        left, here, right = arr[mid - 1], arr[mid], arr[mid + 1]
        if left < here < right:
            low = mid + 1
        elif left > here > right:
            high = mid - 1
        else:
            return mid
    return None


def target_indices(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices ``target`` would take once ``nums`` is sorted."""
    smaller = sum(1 for value in nums if value < target)
    equal = sum(1 for value in nums if value == target)
    return list(range(smaller, smaller + equal))