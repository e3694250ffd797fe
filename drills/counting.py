"""Exercises on counting, pairing and finding values in sequences."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import combinations, permutations
from operator import xor
from typing import Hashable, Iterable, Optional, Sequence


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return the first index pair ``(i, j)``, ``i < j``, whose values add up to ``target``."""
    values = list(nums)
    for i, value in enumerate(values):
        try:
            return i, values.index(target - value, i + 1)
        except ValueError:
            continue
    return None


def num_equiv_domino_pairs(dominoes: Iterable[Sequence[int]]) -> int:
    """Count pairs of dominoes that match, either as given or turned round."""
    seen: Counter[tuple[int, int]] = Counter()
    pairs = 0
    for first, second in dominoes:
        key = (min(first, second), max(first, second))
        pairs += seen[key]
        seen[key] += 1
    return pairs


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def num_identical_pairs(nums: Iterable[Hashable]) -> int:
    """Count index pairs ``i < j`` holding equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def count_good_triplets(arr: Sequence[int], a: int, b: int, c: int) -> int:
    """Count ordered triplets whose pairwise differences stay within ``a``, ``b`` and ``c``."""
    return sum(
        1
        for x, y, z in combinations(arr, 3)
        if abs(x - y) <= a and abs(y - z) <= b and abs(x - z) <= c
    )


def three_consecutive_odds(arr: Sequence[int]) -> bool:
    """Tell whether three odd values stand next to each other."""
    return any(
        x % 2 and y % 2 and z % 2 for x, y, z in zip(arr, arr[1:], arr[2:])
    )


def contains_duplicate(nums: Iterable[Hashable]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[Hashable] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Sequence[Hashable], k: int) -> bool:
    """Tell whether two equal values stand at most ``k`` places apart."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    values = list(nums)
    window: set[Hashable] = set()
    for index, value in enumerate(values):
        if value in window:
            return True
        window.add(value)
        if len(window) > k:
            window.discard(values[index - k])
    return False


def find_duplicate(nums: Iterable[int]) -> Optional[int]:
    """Return the smallest positive value that occurs twice or more, or None.

    Every value must lie between 0 and one less than the number of values.
    """
    values = list(nums)
    size = len(values)
    for value in values:
        if not 0 <= value < size:
            raise ValueError(f"value {value} outside 0..{size - 1}")
    counts = Counter(values)
    return next((value for value in range(1, size) if counts[value] >= 2), None)


def first_missing_positive(nums: Iterable[int]) -> int:
    """Return the smallest positive integer that does not occur."""
    present = set(nums)
    candidate = 1
    while candidate in present:
        candidate += 1
    return candidate


def find_disappeared_numbers(nums: Iterable[int]) -> list[int]:
    """Return the values of 1..n missing from ``nums``, n being its length."""
    values = list(nums)
    size = len(values)
    for value in values:
        if not 0 <= value <= size:
            raise ValueError(f"value {value} outside 0..{size}")
    present = set(values)
    return [value for value in range(1, size + 1) if value not in present]


def distribute_candies(candy_type: Iterable[Hashable]) -> int:
    """Return the most kinds of candy obtainable when eating half of them."""
    candies = list(candy_type)
    return min(len(set(candies)), len(candies) // 2)


def find_error_nums(nums: Iterable[int]) -> tuple[int, int]:
    """Return ``(duplicated, missing)`` for a list meant to hold 1..n once each."""
    values = list(nums)
    size = len(values)
    for value in values:
        if not 0 <= value <= size:
            raise ValueError(f"value {value} outside 0..{size}")
    counts = Counter(values)
    doubled = [value for value in sorted(counts) if counts[value] == 2]
    if not doubled:
        raise ValueError("no value occurs exactly twice")
    duplicated = doubled[-1]
    shortfall = size * (size + 1) // 2 - sum(values)
    return duplicated, shortfall + duplicated


def num_rabbits(answers: Iterable[int]) -> int:
    """Return the fewest rabbits consistent with the answers given."""
    total = 0
    for answer, count in Counter(answers).items():
        if answer < 0:
            raise ValueError(f"answers must not be negative, got {answer}")
        group = answer + 1
        total += -(-count // group) * group
    return total


def find_even_numbers(digits: Sequence[int]) -> list[int]:
    """Return, sorted, every even three-digit number made of distinct positions of ``digits``."""
    numbers = {
        100 * first + 10 * middle + last
        for first, middle, last in permutations(digits, 3)
        if first != 0 and last % 2 == 0
    }
    return sorted(numbers)


def num_of_unplaced_fruits(fruits: Iterable[int], baskets: Iterable[int]) -> int:
    """Place each fruit in the leftmost free basket big enough; count those left over."""
    capacities = list(baskets)
    used = [False] * len(capacities)
    unplaced = 0
    for fruit in fruits:
        for index, capacity in enumerate(capacities):
            if not used[index] and capacity >= fruit:
                used[index] = True
                break
        else:
            unplaced += 1
    return unplaced