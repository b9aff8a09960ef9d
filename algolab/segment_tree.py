"""Segment tree over integer sums with point updates."""

from __future__ import annotations

from collections.abc import Iterable


class SegmentTree:
    """Range-sum queries and point assignments in logarithmic time."""

    def __init__(self, values: Iterable[int]) -> None:
        data = list(values)
        if not data:
            raise ValueError("segment tree needs at least one value")
        self._size = len(data)
        self._tree = [0] * (4 * self._size)
        self._build(data, 1, 0, self._size - 1)

    def __len__(self) -> int:
        return self._size

    def _build(self, data: list[int], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = data[lo]
            return
        mid = (lo + hi) // 2
        self._build(data, 2 * node, lo, mid)
        self._build(data, 2 * node + 1, mid + 1, hi)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _update(self, node: int, lo: int, hi: int, pos: int, value: int) -> None:
        if lo == hi:
            self._tree[node] = value
            return
        mid = (lo + hi) // 2
        if pos <= mid:
            self._update(2 * node, lo, mid, pos, value)
        else:
            self._update(2 * node + 1, mid + 1, hi, pos, value)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if left > right:
            return 0
        if left == lo and right == hi:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, left, min(right, mid)) + self._query(
            2 * node + 1, mid + 1, hi, max(left, mid + 1), right
        )

    def update(self, pos: int, value: int) -> None:
        """Set the element at pos to value."""
        if not 0 <= pos < self._size:
            raise IndexError("position out of range")
        self._update(1, 0, self._size - 1, pos, value)

    def query(self, left: int, right: int) -> int:
        """Return the sum over the inclusive range [left, right]; 0 when left > right."""
        if left > right:
            return 0
        if left < 0 or right >= self._size:
            raise IndexError("range out of bounds")
        return self._query(1, 0, self._size - 1, left, right)