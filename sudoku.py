# sudoku.py
# 9x9 Sudoku as exact cover; the clues are preselected items

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from problem import Item, Problem, add_condition
from solver import run

SIZE = 9
BOX = 3

CELL_START = 0
ROW_START = 81
COL_START = 162
BOX_START = 243

# Demo puzzle; "." or "0" marks an empty cell.
DEMO_PUZZLE: tuple[str, ...] = (
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
)


def item_for(row: int, col: int, digit: int) -> Item:
    return row * 81 + col * 9 + (digit - 1)


def build_problem() -> Problem:
    """
    Every item is one digit in one cell. It fills the cell, and puts the
    digit once in its row, its column and its 3x3 box.
    """
    problem: Problem = {}
    for r in range(SIZE):
        for c in range(SIZE):
            box = (r // BOX) * BOX + c // BOX
            for n in range(SIZE):
                item = item_for(r, c, n + 1)
                add_condition(problem, item, CELL_START + SIZE * r + c)
                add_condition(problem, item, ROW_START + SIZE * r + n)
                add_condition(problem, item, COL_START + SIZE * c + n)
                add_condition(problem, item, BOX_START + SIZE * box + n)
    return problem


def clues(puzzle: Sequence[str]) -> list[Item]:
    if len(puzzle) != SIZE or any(len(line) != SIZE for line in puzzle):
        raise ValueError("puzzle must be 9 lines of 9 characters")

    items: list[Item] = []
    for r, line in enumerate(puzzle):
        for c, ch in enumerate(line):
            if ch in ".0":
                continue
            if not ch.isdigit():
                raise ValueError(f"unexpected character {ch!r} at row {r}, column {c}")
            items.append(item_for(r, c, int(ch)))
    return items


def to_grid(solution: list[Item]) -> list[list[int]]:
    grid = [[0] * SIZE for _ in range(SIZE)]
    for item in solution:
        r, rest = divmod(item, 81)
        c, n = divmod(rest, 9)
        grid[r][c] = n + 1
    return grid


def solutions(puzzle: Sequence[str] = DEMO_PUZZLE) -> Iterator[list[list[int]]]:
    with run(build_problem(), preselected=clues(puzzle)) as stream:
        for solution in stream:
            yield to_grid(solution)


def solve_puzzle(puzzle: Sequence[str] = DEMO_PUZZLE) -> Optional[list[list[int]]]:
    for grid in solutions(puzzle):
        return grid
    return None
