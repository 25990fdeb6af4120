# pentomino.py
# Pentomino tiling as an exact cover problem

from __future__ import annotations

from typing import Iterator, Optional

from pieces import PENTOMINOES, Cell, all_orientations
from placements import Placement, generate_placements, rectangle
from problem import Problem, add_condition
from solver import run, solve_one


def build_problem(
    region: set[Cell],
    shapes: dict[str, frozenset[Cell]] = PENTOMINOES,
) -> tuple[Problem, list[Placement]]:
    """
    Item i is placements[i]. Conditions: first one per piece (each piece is
    used exactly once), then one per cell of the region.
    """
    placements = generate_placements(region, all_orientations(shapes))

    piece_names = sorted(shapes)
    piece_index = {name: idx for idx, name in enumerate(piece_names)}
    cell_index = {
        cell: len(piece_names) + i for i, cell in enumerate(sorted(region))
    }

    problem: Problem = {}
    for item, placement in enumerate(placements):
        add_condition(problem, item, piece_index[placement.piece])
        for cell in placement.cells:
            add_condition(problem, item, cell_index[cell])
    return problem, placements


def render(tiling: list[Placement], rows: int, cols: int) -> list[str]:
    grid = [[" "] * cols for _ in range(rows)]
    for placement in tiling:
        for r, c in placement.cells:
            grid[r][c] = placement.piece
    return ["".join(line) for line in grid]


def tilings(rows: int = 6, cols: int = 10) -> Iterator[list[Placement]]:
    """All tilings of a rows x cols rectangle, searched on a worker thread."""
    problem, placements = build_problem(rectangle(rows, cols))
    with run(problem) as stream:
        for solution in stream:
            yield [placements[item] for item in solution]


def first_tiling(rows: int = 6, cols: int = 10) -> Optional[list[Placement]]:
    problem, placements = build_problem(rectangle(rows, cols))
    solution = solve_one(problem)
    if solution is None:
        return None
    return [placements[item] for item in solution]
