# queens.py
# N-Queens as exact cover with optional diagonal conditions

from __future__ import annotations

from typing import Iterator

from problem import Condition, Problem, add_condition
from solver import run


def build_problem(n: int) -> tuple[Problem, set[Condition]]:
    """
    Item row * n + col puts a queen on that square. Every row and column
    needs exactly one queen; each of the 2n - 1 diagonals and anti-diagonals
    takes at most one, so those conditions are optional.
    """
    rows, cols, diagonals, anti_diagonals = 0, n, 2 * n, 4 * n

    problem: Problem = {}
    for row in range(n):
        for col in range(n):
            item = row * n + col
            add_condition(problem, item, rows + row)
            add_condition(problem, item, cols + col)
            add_condition(problem, item, diagonals + row + col)
            add_condition(problem, item, anti_diagonals + row - col + n - 1)

    optional = set(range(diagonals, diagonals + 2 * n - 1))
    optional |= set(range(anti_diagonals, anti_diagonals + 2 * n - 1))
    return problem, optional


def columns_by_row(solution: list[int], n: int) -> list[int]:
    placed = [0] * n
    for item in solution:
        placed[item // n] = item % n
    return placed


def render(solution: list[int], n: int) -> list[str]:
    return [
        "".join("X" if c == col else "." for c in range(n))
        for col in columns_by_row(solution, n)
    ]


def placements(n: int) -> Iterator[list[int]]:
    """Queen column for each row, for every solution."""
    problem, optional = build_problem(n)
    with run(problem, optional=optional) as stream:
        for solution in stream:
            yield columns_by_row(solution, n)
