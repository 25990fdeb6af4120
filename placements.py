# placements.py
# Every position a piece orientation can take inside a region of cells

from __future__ import annotations

from dataclasses import dataclass

from pieces import Cell


@dataclass(frozen=True)
class Placement:
    piece: str
    cells: tuple[Cell, ...]  # board coordinates covered by this placement


def rectangle(rows: int, cols: int) -> set[Cell]:
    return {(r, c) for r in range(rows) for c in range(cols)}


def generate_placements(
    region: set[Cell],
    piece_orientations: dict[str, list[frozenset[Cell]]],
) -> list[Placement]:
    """All placements of all pieces lying fully inside region, in a stable order."""
    placements: list[Placement] = []
    if not region:
        return placements

    max_row = max(r for r, _ in region)
    max_col = max(c for _, c in region)

    for piece in sorted(piece_orientations):
        for shape in piece_orientations[piece]:
            height = max(r for r, _ in shape)
            width = max(c for _, c in shape)
            # Slide the shape across the bounding box of the region
            for dr in range(max_row - height + 1):
                for dc in range(max_col - width + 1):
                    placed = {(r + dr, c + dc) for r, c in shape}
                    if placed <= region:
                        placements.append(Placement(piece=piece, cells=tuple(sorted(placed))))

    return placements
