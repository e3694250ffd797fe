from collections import Counter
from math import comb

import pytest

from drills.counting import (
    contains_duplicate,
    contains_nearby_duplicate,
    count_good_triplets,
    distribute_candies,
    find_disappeared_numbers,
    find_duplicate,
    find_error_nums,
    find_even_numbers,
    first_missing_positive,
    num_equiv_domino_pairs,
    num_identical_pairs,
    num_of_unplaced_fruits,
    num_rabbits,
    single_number,
    three_consecutive_odds,
    two_sum,
)


def test_two_sum_indices_add_up():
    nums = [2, 7, 11, 15]
    i, j = two_sum(nums, 9)
    assert i < j
    assert nums[i] + nums[j] == 9


def test_two_sum_takes_earliest_first_index():
    nums = [1, 5, 3, 5, 1]
    assert two_sum(nums, 6) == (nums.index(1), nums.index(5))


def test_two_sum_without_answer():
    assert two_sum([1, 2, 3], 100) is None


def test_domino_pairs_match_identical_pairs_of_normalised_dominoes():
    dominoes = [[1, 2], [2, 1], [3, 4], [5, 6], [4, 3], [1, 2]]
    normalised = [tuple(sorted(d)) for d in dominoes]
    assert num_equiv_domino_pairs(dominoes) == num_identical_pairs(normalised)


def test_domino_pairs_ignore_orientation():
    dominoes = [[1, 2], [3, 4], [1, 2]]
    flipped = [[b, a] for a, b in dominoes]
    assert num_equiv_domino_pairs(flipped) == num_equiv_domino_pairs(dominoes)
    assert not num_equiv_domino_pairs([[1, 2], [3, 4], [5, 6]])


@pytest.mark.parametrize("nums, expected", [([4, 1, 2, 1, 2], 4), ([7], 7), ([2, 2, 1], 1)])
def test_single_number(nums, expected):
    assert single_number(nums) == expected


def test_identical_pairs_of_equal_values():
    for size in range(6):
        assert num_identical_pairs([9] * size) == comb(size, 2)
    assert not num_identical_pairs([1, 2, 3])


def test_good_triplets_example():
    assert count_good_triplets([3, 0, 1, 1, 9, 7], 7, 2, 3) == 4


def test_good_triplets_with_loose_limits_count_all():
    arr = [1, 1, 2, 2, 3]
    assert count_good_triplets(arr, 100, 100, 100) == comb(len(arr), 3)
    assert not count_good_triplets([1, 5, 9], 0, 0, 0)


def test_three_consecutive_odds():
    assert three_consecutive_odds([1, 2, 34, 3, 4, 5, 7, 23, 12])
    assert three_consecutive_odds([-1, -3, -5])
    assert not three_consecutive_odds([2, 6, 4, 1])
    assert not three_consecutive_odds([1, 3])


def test_contains_duplicate():
    assert contains_duplicate([1, 2, 3, 1])
    assert not contains_duplicate([1, 2, 3, 4])
    assert contains_duplicate(x % 3 for x in range(5))


def test_contains_nearby_duplicate():
    assert contains_nearby_duplicate([1, 2, 3, 1], 3)
    assert contains_nearby_duplicate([1, 0, 1, 1], 1)
    assert not contains_nearby_duplicate([1, 2, 3, 1, 2, 3], 2)
    assert not contains_nearby_duplicate([1, 1], 0)


def test_contains_nearby_duplicate_rejects_negative_k():
    with pytest.raises(ValueError):
        contains_nearby_duplicate([1, 2], -1)


@pytest.mark.parametrize("nums, expected", [([1, 3, 4, 2, 2], 2), ([3, 1, 3, 4, 2], 3)])
def test_find_duplicate(nums, expected):
    assert find_duplicate(nums) == expected


def test_find_duplicate_none_and_out_of_range():
    assert find_duplicate([0, 1, 2]) is None
    with pytest.raises(ValueError):
        find_duplicate([1, 5, 2])


@pytest.mark.parametrize("nums", [[1, 2, 0], [3, 4, -1, 1], [7, 8, 9, 11, 12], [], [1, 1, 2, 2]])
def test_first_missing_positive_invariant(nums):
    result = first_missing_positive(nums)
    assert result >= 1
    assert result not in nums
    assert all(value in nums for value in range(1, result))


def test_find_disappeared_numbers():
    nums = [4, 3, 2, 7, 8, 2, 3, 1]
    missing = find_disappeared_numbers(nums)
    assert missing == [5, 6]
    assert set(missing) | set(nums) == set(range(1, len(nums) + 1))


def test_find_disappeared_numbers_rejects_large_values():
    with pytest.raises(ValueError):
        find_disappeared_numbers([1, 9])


def test_distribute_candies():
    assert distribute_candies([1, 1, 2, 2, 3, 3]) == 3
    assert distribute_candies([1, 1, 2, 3]) == 2
    candies = [6, 6, 6, 6]
    result = distribute_candies(candies)
    assert result <= len(set(candies))
    assert result <= len(candies) // 2


@pytest.mark.parametrize("nums", [[1, 2, 2, 4], [1, 1], [3, 2, 3, 4, 6, 5]])
def test_find_error_nums_repairs_permutation(nums):
    duplicated, missing = find_error_nums(nums)
    assert Counter(nums)[duplicated] == 2
    repaired = list(nums)
    repaired[repaired.index(duplicated)] = missing
    assert sorted(repaired) == list(range(1, len(nums) + 1))


def test_find_error_nums_without_duplicate():
    with pytest.raises(ValueError):
        find_error_nums([1, 2, 3])


def test_num_rabbits():
    assert num_rabbits([1, 1, 2]) == 5
    assert num_rabbits([0, 0, 0]) == 3
    answers = [10, 10, 10]
    assert num_rabbits(answers) >= len(answers)


def test_num_rabbits_rejects_negative_answer():
    with pytest.raises(ValueError):
        num_rabbits([-1])


def test_find_even_numbers_invariants():
    digits = [2, 1, 3, 0]
    result = find_even_numbers(digits)
    assert result == sorted(set(result))
    for number in result:
        assert 100 <= number <= 999
        assert number % 2 == 0
        assert Counter(int(d) for d in str(number)) <= Counter(digits)
    assert 102 in result
    assert 123 not in result


def test_find_even_numbers_without_even_digit():
    assert find_even_numbers([3, 7, 5]) == []
    assert find_even_numbers([0, 0, 0]) == []
    assert find_even_numbers([2, 2, 2]) == [222]


def test_unplaced_fruits():
    fruits = [4, 2, 5]
    assert not num_of_unplaced_fruits([3, 6, 1], [6, 4, 7])
    assert num_of_unplaced_fruits(fruits, [1, 1, 1]) == len(fruits)
    assert not num_of_unplaced_fruits(fruits, [9, 9, 9])