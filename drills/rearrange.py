"""Exercises that reorder, compact or greedily consume sequences."""

from __future__ import annotations

import heapq
from itertools import accumulate, groupby
from typing import Iterable, MutableSequence, Optional, Sequence


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smash the two heaviest stones together until one is left; return its weight."""
    heap = [-stone for stone in stones]
    if not heap:
        raise ValueError("at least one stone is needed")
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        heapq.heappush(heap, -(heaviest - second))
    return -heap[0]


def maximum_units(box_types: Iterable[Sequence[int]], truck_size: int) -> int:
    """Load ``(count, units_per_box)`` boxes richest first; return the units carried."""
    units = 0
    remaining = truck_size
    for count, per_box in sorted(box_types, key=lambda box: box[1], reverse=True):
        if remaining <= 0:
            break
        taken = min(count, remaining)
        units += taken * per_box
        remaining -= taken
    return units


def apply_operations(nums: Sequence[int]) -> list[int]:
    """Double each equal neighbour pair left to right, then shift zeros to the end."""
    result: list[int] = []
    skip = False
    for current, following in zip(nums, [*nums[1:], None]):
        if skip:
            skip = False
            continue
        if current == 0:
            continue
        if current == following:
            result.append(2 * current)
            skip = True
        else:
            result.append(current)
    return result + [0] * (len(nums) - len(result))


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact runs of equal values to the front in place; return how many remain."""
    kept = [value for value, _ in groupby(nums)]
    nums[: len(kept)] = kept
    return len(kept)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move the values other than ``val`` to the front in place; return their number."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def _filled_sum(nums: Iterable[int]) -> tuple[int, int]:
    total = 0
    zeros = 0
    for value in nums:
        if value == 0:
            zeros += 1
            total += 1
        else:
            total += value
    return total, zeros


def min_sum(nums1: Iterable[int], nums2: Iterable[int]) -> Optional[int]:
    """Return the smallest equal sum reachable by replacing zeros with positive values.

    Returns None when the two sums can never be made equal.
    """
    sum1, zeros1 = _filled_sum(nums1)
    sum2, zeros2 = _filled_sum(nums2)
    if sum1 == sum2:
        return sum1
    if sum1 > sum2 and not zeros2:
        return None
    if sum1 < sum2 and not zeros1:
        return None
    return max(sum1, sum2)


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit without any two being adjacent."""
    planted = 0
    previous = 0
    for current, following in zip(flowerbed, [*flowerbed[1:], 0]):
        if previous == 0 and current == 0 and following == 0:
            planted += 1
            previous = 1
        else:
            previous = current
    return planted >= n


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the largest average over a window of ``k`` consecutive values."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    prefix = [0, *accumulate(nums)]
    best = max(end - start for end, start in zip(prefix[k:], prefix))
    return best / k


def merge(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if len(nums1) < m + n:
        raise ValueError(f"nums1 needs room for {m + n} values, has {len(nums1)}")
    nums1[: m + n] = list(heapq.merge(nums2[:n], nums1[:m]))