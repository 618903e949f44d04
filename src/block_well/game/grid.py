from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np


Cell = Optional[Tuple[int, str]]
WellGrid = List[List[Cell]]
ColorGrid = List[List[Optional[str]]]
PieceGrid = Sequence[Sequence[Any]]


def generate_empty_grid(rows: int, cols: int) -> WellGrid:
    """Return a new ``rows x cols`` grid with every cell empty."""
    return [[None for _ in range(cols)] for _ in range(rows)]


def rotate(grid: Sequence[Sequence[Any]]) -> List[List[Any]]:
    """Rotate a rectangular grid 90 degrees clockwise.

    For an R x C input the result is C x R with
    ``result[row][col] == grid[R - 1 - col][row]``. Piece shapes are square,
    where this reads ``grid[cols - 1 - col][row]``; indexing by the row count
    keeps wide rectangles in range.
    """
    rows = len(grid)
    cols = len(grid[0])
    return [[grid[rows - 1 - col][row] for col in range(rows)] for row in range(cols)]


def create_empty_line(cols: int) -> List[Cell]:
    return [None] * cols


def is_line(row: Sequence[Cell]) -> bool:
    """True when no cell of the row is empty."""
    return not any(cell is None for cell in row)


def _get_max_id_from_line(line: Sequence[Cell]) -> int:
    return max((cell[0] if cell else 0 for cell in line), default=0)


def get_max_id_from_grid(grid: Sequence[Sequence[Cell]]) -> int:
    """Largest identifier held by an occupied cell, 0 for an empty grid."""
    return max((_get_max_id_from_line(line) for line in grid), default=0)


def to_occupancy_array(grid: Sequence[Sequence[Any]]) -> np.ndarray:
    """Binary int8 view of a well or piece grid (1 = occupied)."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    occupancy = np.zeros((rows, cols), dtype=np.int8)
    for row in range(rows):
        for col in range(cols):
            if grid[row][col]:
                occupancy[row, col] = 1
    return occupancy


def format_grid(grid: Sequence[Sequence[Any]]) -> str:
    return "\n".join("".join("█" if cell else "·" for cell in row) for row in grid)
