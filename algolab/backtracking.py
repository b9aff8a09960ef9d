"""Backtracking searches: arrangements, queens, partitions, brackets, sudoku, word search."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import permutations

_DIGITS = "123456789"
_EMPTY = "."
_VISITED = "#"
_STEPS = ((-1, 0), (0, 1), (0, -1), (1, 0))


def arrangements(letters: Sequence[str], length: int) -> list[str]:
    """Return every ordered selection of distinct positions from letters, as strings."""
    if length < 0:
        raise ValueError("length must be non-negative")
    return ["".join(chosen) for chosen in permutations(letters, length)]


def n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens, one board per solution."""
    if n < 0:
        raise ValueError("board size must be non-negative")
    solutions: list[list[str]] = []
    grid = [[_EMPTY] * n for _ in range(n)]
    used_rows: set[int] = set()
    used_up: set[int] = set()
    used_down: set[int] = set()

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in grid])
            return
        for row in range(n):
            if row in used_rows or col - row in used_up or row + col in used_down:
                continue
            grid[row][col] = "Q"
            used_rows.add(row)
            used_up.add(col - row)
            used_down.add(row + col)
            place(col + 1)
            grid[row][col] = _EMPTY
            used_rows.discard(row)
            used_up.discard(col - row)
            used_down.discard(row + col)

    place(0)
    return solutions


def palindrome_partitions(text: str) -> list[list[str]]:
    """Return every way to cut text into pieces that are all palindromes."""
    result: list[list[str]] = []
    current: list[str] = []

    def extend(start: int) -> None:
        if start == len(text):
            result.append(list(current))
            return
        for end in range(start + 1, len(text) + 1):
            piece = text[start:end]
            if piece == piece[::-1]:
                current.append(piece)
                extend(end)
                current.pop()

    extend(0)
    return result


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of n pairs of parentheses."""
    if n < 0:
        raise ValueError("n must be non-negative")
    result: list[str] = []

    def build(opened: int, closed: int, current: str) -> None:
        if opened == n and closed == n:
            result.append(current)
            return
        if opened < n:
            build(opened + 1, closed, current + "(")
        if closed < opened:
            build(opened, closed + 1, current + ")")

    build(0, 0, "")
    return result


def _fits(board: list[list[str]], row: int, col: int, digit: str) -> bool:
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(9):
        if board[i][col] == digit or board[row][i] == digit:
            return False
        if board[box_row + i // 3][box_col + i % 3] == digit:
            return False
    return True


def _first_empty(board: list[list[str]]) -> tuple[int, int] | None:
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == _EMPTY:
                return r, c
    return None


def _solve(board: list[list[str]]) -> bool:
    position = _first_empty(board)
    if position is None:
        return True
    row, col = position
    for digit in _DIGITS:
        if _fits(board, row, col, digit):
            board[row][col] = digit
            if _solve(board):
                return True
            board[row][col] = _EMPTY
    return False


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the '.' cells of a 9x9 board in place; return False, board unchanged, if stuck."""
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("sudoku board must be 9 rows of 9 cells")
    return _solve(board)


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return True when word can be traced through adjacent cells, each used once."""
    grid = [list(row) for row in board]
    if not word or not grid or not grid[0]:
        return False
    rows, cols = len(grid), len(grid[0])

    def search(r: int, c: int, idx: int) -> bool:
        if idx == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols):
            return False
        cell = grid[r][c]
        if cell == _VISITED or cell != word[idx]:
            return False
        grid[r][c] = _VISITED
        found = any(search(r + dr, c + dc, idx + 1) for dr, dc in _STEPS)
        grid[r][c] = cell
        return found

    return any(
        search(r, c, 0)
        for r in range(rows)
        for c in range(cols)
        if grid[r][c] == word[0]
    )