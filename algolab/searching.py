"""Binary-search problems over sorted, rotated and monotone answer spaces."""

from __future__ import annotations

from collections.abc import Sequence


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _require_values(values: Sequence[int], what: str) -> None:
    if not values:
        raise ValueError(f"{what} must not be empty")


def _days_needed(weights: Sequence[int], capacity: int) -> int:
    days, load = 1, 0
    for weight in weights:
        if load + weight > capacity:
            days += 1
            load = weight
        else:
            load += weight
    return days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries all weights, in order, within days."""
    _require_values(weights, "weights")
    low, high = max(weights), sum(weights)
    while low <= high:
        mid = (low + high) // 2
        if _days_needed(weights, mid) <= days:
            high = mid - 1
        else:
            low = mid + 1
    return low


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Return the least divisor whose rounded-up quotients sum to at most threshold."""
    _require_values(nums, "nums")
    low, high = 1, max(nums)
    while low <= high:
        mid = (low + high) // 2
        if sum(_ceil_div(num, mid) for num in nums) <= threshold:
            high = mid - 1
        else:
            low = mid + 1
    return low


def _bouquets_possible(bloom_days: Sequence[int], day: int, m: int, k: int) -> bool:
    run = bouquets = 0
    for bloom in bloom_days:
        if bloom <= day:
            run += 1
        else:
            bouquets += run // k
            run = 0
    bouquets += run // k
    return bouquets >= m


def min_bouquet_days(bloom_days: Sequence[int], m: int, k: int) -> int:
    """Return the first day on which m bouquets of k adjacent flowers can be made, or -1."""
    if k <= 0:
        raise ValueError("k must be positive")
    if len(bloom_days) < m * k:
        return -1
    _require_values(bloom_days, "bloom_days")
    low, high = min(bloom_days), max(bloom_days)
    while low <= high:
        mid = low + (high - low) // 2
        if _bouquets_possible(bloom_days, mid, m, k):
            high = mid - 1
        else:
            low = mid + 1
    return low


def kth_missing_positive(arr: Sequence[int], k: int) -> int:
    """Return the k-th positive integer absent from a strictly increasing array."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] - mid - 1 < k:
            low = mid + 1
        else:
            high = mid - 1
    return k + high + 1


def kth_missing_positive_linear(arr: Sequence[int], k: int) -> int:
    """Return the k-th missing positive integer by scanning up to the last element."""
    _require_values(arr, "arr")
    missing = 0
    position = 0
    for candidate in range(1, arr[-1]):
        if candidate != arr[position]:
            missing += 1
            if missing == k:
                return candidate
        else:
            position += 1
    return arr[-1] + (k - missing)


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest element of a rotated sorted array of distinct values."""
    _require_values(nums, "nums")
    smallest = nums[0]
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[low] <= nums[mid]:
            smallest = min(smallest, nums[low])
            low = mid + 1
        else:
            smallest = min(smallest, nums[mid])
            high = mid - 1
    return smallest


def find_peak(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours, or -1 if none is found."""
    _require_values(nums, "nums")
    n = len(nums)
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] > nums[mid - 1] and nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] > nums[mid - 1]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of target in a rotated sorted array of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Return True when target occurs in a rotated sorted array that may hold duplicates."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
            continue
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def _bound(nums: Sequence[int], target: int, *, last: bool) -> int:
    found = -1
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            found = mid
            if last:
                low = mid + 1
            else:
                high = mid - 1
        elif nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return found


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of target in a sorted array, or (-1, -1)."""
    return _bound(nums, target, last=False), _bound(nums, target, last=True)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of target, or where it would be inserted to keep order."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return low


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of target in a sorted array, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def binary_search_recursive(nums: Sequence[int], target: int) -> int:
    """Return an index of target in a sorted array, or -1, searching recursively."""

    def search(low: int, high: int) -> int:
        if low > high:
            return -1
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(nums) - 1)


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one element that appears once in a sorted array of pairs, or -1."""
    _require_values(nums, "nums")
    n = len(nums)
    if n == 1:
        return nums[0]
    if nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] != nums[mid + 1] and nums[mid] != nums[mid - 1]:
            return nums[mid]
        on_left = (mid % 2 == 0 and nums[mid] == nums[mid - 1]) or (
            mid % 2 == 1 and nums[mid] == nums[mid + 1]
        )
        if on_left:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Return the least eating speed that finishes every pile within hours."""
    _require_values(piles, "piles")
    low, high = 1, max(piles)
    while low <= high:
        mid = (low + high) // 2
        if sum(_ceil_div(pile, mid) for pile in piles) <= hours:
            high = mid - 1
        else:
            low = mid + 1
    return low