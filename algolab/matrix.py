"""Matrix problems: Pascal's triangle, rotation, spiral order and zeroing."""

from __future__ import annotations

from collections.abc import Sequence


def _pascal_row(n: int) -> list[int]:
    row = [1]
    value = 1
    for i in range(1, n):
        value = value * (n - i) // i
        row.append(value)
    return row


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first num_rows rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("num_rows must be non-negative")
    return [_pascal_row(n) for n in range(1, num_rows + 1)]


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    for i in range(n):
        for j in range(i):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a matrix read clockwise from the outside in."""
    if not matrix or not matrix[0]:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")

    top, bottom = 0, len(matrix) - 1
    left, right = 0, width - 1
    order: list[int] = []
    while top <= bottom and left <= right:
        order.extend(matrix[top][k] for k in range(left, right + 1))
        top += 1
        order.extend(matrix[k][right] for k in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(matrix[bottom][k] for k in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(matrix[k][left] for k in range(bottom, top - 1, -1))
            left += 1
    return order


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0