# pieces.py
# Pentomino shapes + rotations/flips

from __future__ import annotations

from typing import Iterable

Cell = tuple[int, int]

# The twelve pentominoes as sets of (row, col), named by the letter they resemble.
PENTOMINOES: dict[str, frozenset[Cell]] = {
    "F": frozenset({(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)}),
    "I": frozenset({(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)}),
    "L": frozenset({(0, 0), (1, 0), (2, 0), (3, 0), (3, 1)}),
    "N": frozenset({(0, 0), (0, 1), (1, 1), (1, 2), (1, 3)}),
    "P": frozenset({(0, 0), (0, 1), (1, 0), (1, 1), (2, 0)}),
    "T": frozenset({(0, 0), (0, 1), (0, 2), (1, 1), (2, 1)}),
    "U": frozenset({(0, 0), (0, 2), (1, 0), (1, 1), (1, 2)}),
    "V": frozenset({(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)}),
    "W": frozenset({(0, 0), (1, 0), (1, 1), (2, 1), (2, 2)}),
    "X": frozenset({(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)}),
    "Y": frozenset({(0, 2), (1, 0), (1, 1), (1, 2), (1, 3)}),
    "Z": frozenset({(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)}),
}


def normalize(shape: Iterable[Cell]) -> frozenset[Cell]:
    """Shift a shape so its top-most row and left-most column are 0."""
    cells = list(shape)
    top = min(r for r, _ in cells)
    left = min(c for _, c in cells)
    return frozenset((r - top, c - left) for r, c in cells)


def _rotate(shape: Iterable[Cell]) -> frozenset[Cell]:
    # quarter turn: (r, c) -> (c, -r)
    return frozenset((c, -r) for r, c in shape)


def _mirror(shape: Iterable[Cell]) -> frozenset[Cell]:
    return frozenset((r, -c) for r, c in shape)


def orientations(shape: Iterable[Cell]) -> list[frozenset[Cell]]:
    """Distinct normalized orientations: four rotations of the shape and of its mirror."""
    result: list[frozenset[Cell]] = []
    for start in (frozenset(shape), _mirror(shape)):
        current = start
        for _ in range(4):
            norm = normalize(current)
            if norm not in result:
                result.append(norm)
            current = _rotate(current)
    return result


def all_orientations(
    shapes: dict[str, frozenset[Cell]] = PENTOMINOES,
) -> dict[str, list[frozenset[Cell]]]:
    return {name: orientations(shape) for name, shape in shapes.items()}
