"""Pair, triple and quadruple sums, medians and interval merging."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return (later index, earlier index) of two values adding to target, or (-1, -1)."""
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        other = seen.get(target - num)
        if other is not None:
            return index, other
        seen[num] = index
    return -1, -1


def two_sum_sorted(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the indices of two values of a sorted array adding to target, or (-1, -1)."""
    left, right = 0, len(nums) - 1
    while left < right:
        total = nums[left] + nums[right]
        if total == target:
            return left, right
        if total < target:
            left += 1
        else:
            right -= 1
    return -1, -1


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct triple, in ascending order, whose values add to zero."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i and first == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
                while j < k and values[k] == values[k + 1]:
                    k -= 1
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct quadruple whose values add to target.

    Each quadruple lists the two smallest values, then the largest, then the third.
    """
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n):
        if i and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            low, high = j + 1, n - 1
            while low < high:
                total = values[i] + values[j] + values[low] + values[high]
                if total < target:
                    low += 1
                elif total > target:
                    high -= 1
                else:
                    result.append([values[i], values[j], values[high], values[low]])
                    low += 1
                    high -= 1
                    while low < high and values[low] == values[low - 1]:
                        low += 1
                    while low < high and values[high] == values[high + 1]:
                        high -= 1
    return result


def median_of_two(first: Iterable[int], second: Iterable[int]) -> float:
    """Return the median of the values of both arrays taken together."""
    merged = sorted([*first, *second])
    if not merged:
        raise ValueError("at least one value is required")
    half = len(merged) // 2
    if len(merged) % 2 == 0:
        return (merged[half - 1] + merged[half]) / 2
    return float(merged[half])


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the sorted union of closed intervals; touching intervals are merged."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def max_distance(arrays: Sequence[Sequence[int]]) -> int:
    """Return the largest |a - b| with a and b taken from two different sorted arrays."""
    if not arrays or any(not array for array in arrays):
        raise ValueError("arrays must be non-empty and hold non-empty arrays")
    low, high = arrays[0][0], arrays[0][-1]
    best = 0
    for array in arrays[1:]:
        best = max(best, abs(array[-1] - low), abs(array[0] - high))
        low = min(low, array[0])
        high = max(high, array[-1])
    return best


def merge_sorted_into(first: list[int], m: int, second: Sequence[int], n: int) -> None:
    """Merge the first n values of second into the first m values of first, in place."""
    if m < 0 or n < 0 or len(first) < m + n or len(second) < n:
        raise ValueError("first must have room for m + n values and second hold n")
    a, b = m - 1, n - 1
    for slot in range(m + n - 1, -1, -1):
        if b < 0:
            break
        if a >= 0 and first[a] > second[b]:
            first[slot] = first[a]
            a -= 1
        else:
            first[slot] = second[b]
            b -= 1