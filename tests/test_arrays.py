import random
from collections import Counter
from itertools import permutations

import pytest

from algolab.arrays import (
    frequency_sort,
    leaders,
    longest_consecutive,
    longest_consecutive_sorted,
    majority_element,
    majority_elements,
    majority_elements_voting,
    max_consecutive_ones,
    max_profit,
    max_subarray,
    missing_number,
    missing_number_counting,
    missing_number_scan,
    move_zeroes,
    next_permutation,
    rearrange_alternating,
    remove_duplicates,
    rotate,
    rotate_by_copy,
    single_number,
    sort_colors,
)


def test_leaders_are_non_increasing_and_bounded():
    values = [16, 17, 4, 3, 5, 2]
    result = leaders(values)
    assert result[0] == max(values)
    assert result[-1] == values[-1]
    assert all(a >= b for a, b in zip(result, result[1:]))


def test_leaders_of_ascending_list_is_last_only():
    assert leaders([1, 2, 3, 4]) == [4]
    assert leaders([]) == []


def test_max_profit():
    ascending = [2, 4, 9, 11]
    assert max_profit(ascending) == ascending[-1] - ascending[0]
    assert max_profit([9, 7, 4, 1]) == 0
    assert max_profit([]) == 0


def test_longest_consecutive_versions_agree():
    run = list(range(10, 20))
    values = run + [3, 5, 12, 15, 40]
    random.Random(7).shuffle(values)
    assert longest_consecutive(values) == len(run)
    assert longest_consecutive_sorted(values) == len(run)


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0
    assert longest_consecutive_sorted([]) == 0


def test_single_number():
    assert single_number([4, 1, 2, 1, 2]) == 4
    assert single_number([1, 1, 2, 2]) == -1


def test_frequency_sort_order():
    nums = [2, 3, 1, 3, 2, 5, 5, 5, 9]
    result = frequency_sort(nums)
    counts = Counter(nums)
    assert sorted(result) == sorted(nums)
    for a, b in zip(result, result[1:]):
        assert counts[a] < counts[b] or (counts[a] == counts[b] and a >= b)


def test_majority_element():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2
    assert majority_element([1, 2, 3]) == -1


@pytest.mark.parametrize(
    "nums",
    [[3, 2, 3], [1, 1, 1, 3, 3, 2, 2, 2], [1, 2, 3, 4], [], [5]],
)
def test_majority_elements_versions_agree(nums):
    counted = majority_elements(nums)
    voted = majority_elements_voting(nums)
    assert sorted(counted) == sorted(voted)
    assert all(nums.count(v) > len(nums) // 3 for v in voted)


def test_majority_elements_single_winner():
    assert majority_elements([3, 2, 3]) == [3]


@pytest.mark.parametrize("k", [0, 1, 3, 7, 10])
def test_rotate_versions_agree(k):
    first = list(range(7))
    second = list(range(7))
    rotate(first, k)
    rotate_by_copy(second, k)
    assert first == second
    assert sorted(first) == list(range(7))


def test_rotate_example():
    nums = [1, 2, 3, 4, 5, 6, 7]
    rotate(nums, 3)
    assert nums == [5, 6, 7, 1, 2, 3, 4]


def test_rotate_round_trip():
    original = [9, 8, 7, 6, 5]
    nums = original[:]
    rotate(nums, 2)
    rotate(nums, len(original) - 2)
    assert nums == original


def test_rearrange_alternating():
    nums = [3, 1, -2, -5, 2, -4]
    result = rearrange_alternating(nums)
    assert all(v >= 0 for v in result[0::2])
    assert all(v < 0 for v in result[1::2])
    assert result[0::2] == [v for v in nums if v >= 0]
    assert result[1::2] == [v for v in nums if v < 0]


def test_rearrange_alternating_unbalanced():
    with pytest.raises(ValueError):
        rearrange_alternating([1, 2, -3])


def test_move_zeroes():
    nums = [0, 1, 0, 3, 12]
    move_zeroes(nums)
    assert nums[:3] == [1, 3, 12]
    assert nums[3:] == [0, 0]


@pytest.mark.parametrize("removed", [0, 4, 9])
def test_missing_number_versions(removed):
    nums = [v for v in range(10) if v != removed]
    random.Random(removed).shuffle(nums)
    assert missing_number(nums) == removed
    assert missing_number_scan(nums) == removed
    assert missing_number_counting(nums) == removed


def test_missing_number_counting_rejects_out_of_range():
    with pytest.raises(ValueError):
        missing_number_counting([0, 5])


def test_next_permutation_walks_lexicographic_order():
    seq = [1, 2, 3]
    seen = [tuple(seq)]
    for _ in range(5):
        next_permutation(seq)
        seen.append(tuple(seq))
    assert seen == list(permutations([1, 2, 3]))
    next_permutation(seq)
    assert seq == [1, 2, 3]


def test_max_consecutive_ones():
    assert max_consecutive_ones([1] * 5) == 5
    assert max_consecutive_ones([0, 0]) == 0
    assert max_consecutive_ones([1, 1, 0, 1]) == 2


def test_max_subarray():
    negatives = [-8, -3, -6, -2, -5]
    assert max_subarray(negatives) == max(negatives)
    positives = [1, 2, 3, 4]
    assert max_subarray(positives) == sum(positives)
    with pytest.raises(ValueError):
        max_subarray([])


def test_remove_duplicates():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    distinct = sorted(set(nums))
    count = remove_duplicates(nums)
    assert count == len(distinct)
    assert nums[:count] == distinct
    assert remove_duplicates([]) == 0


def test_sort_colors():
    nums = [2, 0, 2, 1, 1, 0, 2, 0]
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected