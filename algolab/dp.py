"""Dynamic-programming counting and optimisation problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

MOD = 1_000_000_007


def _positive_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    if any(coin <= 0 for coin in values):
        raise ValueError("coin values must be positive")
    return values


def coin_combinations(coins: Iterable[int], target: int) -> int:
    """Return the number of ordered coin sequences summing to target, modulo 1e9+7."""
    values = _positive_coins(coins)
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - coin] for coin in values if coin <= total) % MOD
    return ways[target]


def dice_combinations(n: int) -> int:
    """Return the number of ordered die-roll sequences summing to n, modulo 1e9+7."""
    return coin_combinations(range(1, 7), n)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned as they are."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a top-left to bottom-right path moving down or right."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must have at least one cell")
    cols = len(rows[0])
    if any(len(row) != cols for row in rows):
        raise ValueError("grid rows must all have the same length")

    below: list[float] = [math.inf] * cols
    for row in reversed(rows):
        current: list[float] = [math.inf] * cols
        for c in reversed(range(cols)):
            right = current[c + 1] if c + 1 < cols else math.inf
            step = min(right, below[c])
            current[c] = row[c] + (0 if step == math.inf else step)
        below = current
    return int(below[0])


def max_non_adjacent_sum(values: Iterable[int]) -> int:
    """Return the largest sum of elements of which no two are neighbours."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    if len(items) == 1:
        return items[0]
    two_back, one_back = items[0], max(items[0], items[1])
    for value in items[2:]:
        two_back, one_back = one_back, max(value + two_back, one_back)
    return one_back


def min_coins(coins: Iterable[int], target: int) -> int:
    """Return the fewest coins summing to target, or -1 when no combination does."""
    values = _positive_coins(coins)
    if target < 0:
        return -1
    best: list[float] = [0.0] + [math.inf] * target
    for total in range(1, target + 1):
        best[total] = min(
            (best[total - coin] + 1 for coin in values if coin <= total),
            default=math.inf,
        )
    return -1 if best[target] == math.inf else int(best[target])


def ninja_training(points: Iterable[Sequence[int]]) -> int:
    """Return the most points over all days, never repeating a task on consecutive days.

    Each row holds the points of the three tasks for one day.
    """
    days = [tuple(row) for row in points]
    if not days:
        raise ValueError("at least one day is required")
    if any(len(row) != 3 for row in days):
        raise ValueError("every day must offer exactly three tasks")

    # best[last] is the most points so far when the following day picks task `last`;
    # index 3 means no restriction.
    best = [
        max(value for task, value in enumerate(days[0]) if task != last)
        for last in range(4)
    ]
    for row in days[1:]:
        best = [
            max(row[task] + best[task] for task in range(3) if task != last)
            for last in range(4)
        ]
    return best[3]