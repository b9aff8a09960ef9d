"""Classic comparison sorts and a small command that runs all of them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable


def selection_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy, built by repeatedly selecting the minimum."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy; stops early once a pass makes no swap."""
    result = list(items)
    for done in range(len(result) - 1):
        swapped = False
        for j in range(len(result) - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy, sinking each element into the sorted prefix."""
    result = list(items)
    for i in range(len(result)):
        j = i
        while j > 0 and result[j] < result[j - 1]:
            result[j], result[j - 1] = result[j - 1], result[j]
            j -= 1
    return result


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy using a stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list[int], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low, high
    while i < j:
        while values[i] <= pivot and i <= high - 1:
            i += 1
        while values[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy using quicksort with the first element as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(result, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return result


_SECTIONS = (
    ("Selection Sort ", selection_sort),
    ("Bubble Sort ", bubble_sort),
    ("Insertion  Sort ", insertion_sort),
    ("Merge Sort", merge_sort),
    ("Quick Sort", quick_sort),
)


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many integers from stdin and print every sort."""
    parser = argparse.ArgumentParser(
        prog="algolab-sort",
        description="Sort integers read from standard input with several algorithms.",
    )
    parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    if not tokens:
        parser.error("expected a count followed by that many integers")
    try:
        count = int(tokens[0])
        values = [int(token) for token in tokens[1 : 1 + count]]
    except ValueError:
        parser.error("input must consist of integers")
    if count < 0 or len(values) < count:
        parser.error("expected a count followed by that many integers")

    blocks = (
        f"{title}\n" + "".join(f"{value} " for value in sort(values))
        for title, sort in _SECTIONS
    )
    sys.stdout.write("\n \n".join(blocks))
    return 0