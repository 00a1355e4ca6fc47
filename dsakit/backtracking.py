"""Backtracking searches: braces, combination sums, queens, mazes and sudoku."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "combination_sum",
    "generate_braces",
    "search_maze",
    "solve_n_queens",
    "solve_sudoku",
]

_MAZE_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))
_SUDOKU_DIGITS = "123456789"
_SUDOKU_EMPTY = "."


def generate_braces(n: int) -> list[str]:
    """Build brace strings of ``n`` pairs by wrapping and extending those of ``n - 1``.

    Each shorter string ``s`` yields ``{s}``, ``s{}`` and ``{}s``; the very last
    string produced for a level is dropped, as it repeats ``s{}`` for ``{}...{}``.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return ["{}"]
    level = ["{{}}", "{}{}"]
    for _ in range(n - 2):
        following: list[str] = []
        for braces in level:
            following.extend(("{" + braces + "}", braces + "{}", "{}" + braces))
        following.pop()
        level = following
    return level


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every multiset of ``candidates`` (reuse allowed) summing to ``target``.

    Combinations are listed with those using more of the earlier candidates first.
    """
    pool = list(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []
    chosen: list[int] = []

    def explore(index: int, remaining: int) -> None:
        if index == len(pool):
            if remaining == 0:
                results.append(list(chosen))
            return
        value = pool[index]
        if value <= remaining:
            chosen.append(value)
            explore(index, remaining - value)
            chosen.pop()
        explore(index + 1, remaining)

    explore(0, target)
    return results


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens as rows of ``Q`` and ``.``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    board = [["."] * n for _ in range(n)]
    rows: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in rows or row + col in rising or col - row in falling:
                continue
            board[row][col] = "Q"
            rows.add(row)
            rising.add(row + col)
            falling.add(col - row)
            place(col + 1)
            board[row][col] = "."
            rows.discard(row)
            rising.discard(row + col)
            falling.discard(col - row)

    place(0)
    return solutions


def search_maze(maze: Iterable[Iterable[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell of a square maze.

    Cells holding 0 are walls. Paths are strings of D, L, R and U moves, listed in
    lexicographic order; no path visits a cell twice.
    """
    grid = [list(row) for row in maze]
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("maze must be square")
    visited: set[tuple[int, int]] = set()
    steps: list[str] = []
    paths: list[str] = []

    def is_open(y: int, x: int) -> bool:
        return 0 <= y < size and 0 <= x < size and (y, x) not in visited and grid[y][x] != 0

    def walk(y: int, x: int) -> None:
        if y == size - 1 and x == size - 1:
            paths.append("".join(steps))
            return
        visited.add((y, x))
        for move, dy, dx in _MAZE_MOVES:
            if is_open(y + dy, x + dx):
                steps.append(move)
                walk(y + dy, x + dx)
                steps.pop()
        visited.discard((y, x))

    if is_open(0, 0):
        walk(0, 0)
    return paths


def _fits(grid: list[list[str]], row: int, col: int, digit: str) -> bool:
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(9):
        if grid[i][col] == digit or grid[row][i] == digit:
            return False
        if grid[box_row + i // 3][box_col + i % 3] == digit:
            return False
    return True


def solve_sudoku(board: Sequence[Iterable[str]]) -> list[list[str]] | None:
    """Fill the empty cells (``.``) of a 9x9 sudoku.

    Returns the completed grid as a new list of rows of characters, or None when the
    puzzle has no solution. The given board is left untouched.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("board must be 9x9")
    allowed = set(_SUDOKU_DIGITS + _SUDOKU_EMPTY)
    for row in grid:
        for cell in row:
            if cell not in allowed:
                raise ValueError(f"invalid cell {cell!r}")
    blanks = [
        (r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == _SUDOKU_EMPTY
    ]

    def fill(k: int) -> bool:
        if k == len(blanks):
            return True
        row, col = blanks[k]
        for digit in _SUDOKU_DIGITS:
            if _fits(grid, row, col, digit):
                grid[row][col] = digit
                if fill(k + 1):
                    return True
                grid[row][col] = _SUDOKU_EMPTY
        return False

    return grid if fill(0) else None