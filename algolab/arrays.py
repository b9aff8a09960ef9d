"""Array problems: leaders, profits, majorities, rotations and in-place rearrangements."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def leaders(values: Sequence[int]) -> list[int]:
    """Return, in order, the elements not smaller than anything to their right."""
    result: list[int] = []
    best: int | None = None
    for value in reversed(values):
        if best is None or value >= best:
            best = value
            result.append(value)
    result.reverse()
    return result


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sale, or 0."""
    profit = 0
    lowest: int | None = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers, using a set."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def longest_consecutive_sorted(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers, by sorting."""
    if not nums:
        return 0
    longest = 1
    count = 0
    last: int | None = None
    for value in sorted(nums):
        if last is not None and value - 1 == last:
            count += 1
            last = value
        elif value != last:
            count = 1
            last = value
        longest = max(longest, count)
    return longest


def single_number(nums: Sequence[int]) -> int:
    """Return the smallest value occurring exactly once, or -1 if there is none."""
    counts = Counter(nums)
    return min((value for value, count in counts.items() if count == 1), default=-1)


def frequency_sort(nums: Sequence[int]) -> list[int]:
    """Return the values ordered by rising frequency, ties by falling value."""
    counts = Counter(nums)
    return sorted(nums, key=lambda value: (counts[value], -value))


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than n/2 times, found by voting, or -1."""
    candidate: int | None = None
    votes = 0
    for value in nums:
        if votes == 0:
            candidate, votes = value, 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    if candidate is not None and list(nums).count(candidate) > len(nums) // 2:
        return candidate
    return -1


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return the values occurring more than n/3 times, by counting."""
    limit = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > limit]


def majority_elements_voting(nums: Sequence[int]) -> list[int]:
    """Return the values occurring more than n/3 times, by two-candidate voting."""
    values = list(nums)
    first: int | None = None
    second: int | None = None
    first_votes = second_votes = 0
    for value in values:
        if first_votes == 0 and value != second:
            first, first_votes = value, 1
        elif second_votes == 0 and value != first:
            second, second_votes = value, 1
        elif value == first:
            first_votes += 1
        elif value == second:
            second_votes += 1
        else:
            first_votes -= 1
            second_votes -= 1
    limit = len(values) // 3
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and values.count(candidate) > limit
    ]


def _reverse(nums: list[int], start: int, stop: int) -> None:
    nums[start:stop] = nums[start:stop][::-1]


def rotate(nums: list[int], k: int) -> None:
    """Rotate nums right by k places in place, using three reversals."""
    n = len(nums)
    if n == 0:
        return
    k %= n
    _reverse(nums, 0, n - k)
    _reverse(nums, n - k, n)
    _reverse(nums, 0, n)


def rotate_by_copy(nums: list[int], k: int) -> None:
    """Rotate nums right by k places in place, copying the tail aside first."""
    n = len(nums)
    if n == 0:
        return
    k %= n
    tail = nums[n - k :]
    nums[k:] = nums[: n - k]
    nums[:k] = tail


def rearrange_alternating(nums: Sequence[int]) -> list[int]:
    """Return the values alternating non-negative and negative, each keeping its order."""
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != len(negatives):
        raise ValueError("need as many negative values as non-negative ones")
    return [value for pair in zip(positives, negatives) for value in pair]


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    write = 0
    for read, value in enumerate(nums):
        if value != 0:
            nums[write], nums[read] = nums[read], nums[write]
            write += 1


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of 0..n absent from nums, from the expected sum."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def missing_number_scan(nums: Sequence[int]) -> int:
    """Return the smallest number of 0..n absent from nums by searching for each, or -1."""
    return next((candidate for candidate in range(len(nums) + 1) if candidate not in nums), -1)


def missing_number_counting(nums: Sequence[int]) -> int:
    """Return the smallest number of 0..n absent from nums by marking those seen, or -1."""
    n = len(nums)
    seen = [False] * (n + 1)
    for value in nums:
        if not 0 <= value <= n:
            raise ValueError(f"value {value} lies outside 0..{n}")
        seen[value] = True
    return next((value for value, present in enumerate(seen) if not present), -1)


def next_permutation(nums: list[int]) -> None:
    """Rearrange nums in place into the next lexicographic permutation, wrapping round."""
    pivot = next((i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), -1)
    if pivot == -1:
        nums.reverse()
        return
    swap = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    _reverse(nums, pivot + 1, len(nums))


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    best = run = 0
    for value in nums:
        run = run + 1 if value == 1 else 0
        best = max(best, run)
    return best


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous slice (Kadane's method)."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def remove_duplicates(nums: list[int]) -> int:
    """Compact the distinct values of a sorted list to its front; return how many."""
    if not nums:
        return 0
    last = 0
    for value in nums[1:]:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in one pass (Dutch national flag)."""
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif nums[mid] == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            mid += 1