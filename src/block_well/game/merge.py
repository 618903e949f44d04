from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .grid import (
    ColorGrid,
    PieceGrid,
    WellGrid,
    create_empty_line,
    get_max_id_from_grid,
    is_line,
)
from .position import Position, get_exact_position


logger = logging.getLogger(__name__)


@dataclass
class ClearResult:
    cleared_grid: WellGrid
    rows_cleared: List[int] = field(default_factory=list)


def transfer_tetromino_to_grid(
    grid: WellGrid, piece: PieceGrid, position: Position, color: str
) -> WellGrid:
    """Return a copy of the well with the piece's cells written in.

    Each written cell gets a fresh identifier, counting up from the grid's
    current maximum in row-major order of the piece. Cells that fall outside
    the well are dropped: when the well is full a piece can land before it
    enters the top.
    """
    rows = len(grid)
    cols = len(grid[0])
    exact = get_exact_position(position)
    new_grid = [list(line) for line in grid]
    cell_id = get_max_id_from_grid(new_grid)

    for row in range(len(piece)):
        for col in range(len(piece[0])):
            if not piece[row][col]:
                continue
            well_row = exact.y + row
            well_col = exact.x + col
            if 0 <= well_row < rows and 0 <= well_col < cols:
                cell_id += 1
                new_grid[well_row][well_col] = (cell_id, color)

    return new_grid


def clear_lines(grid: WellGrid) -> ClearResult:
    """Clear every complete row and let the rows above fall.

    Rows are scanned bottom to top. After a clear the same index is checked
    again, since the row that fell into it may be complete too. Reported
    indices are relative to the grid as it was before the clear, ordered top
    to bottom.
    """
    rows = len(grid)
    cols = len(grid[0])
    cleared_grid = list(grid)
    rows_cleared: List[int] = []

    row = rows - 1
    while row >= 0:
        if is_line(cleared_grid[row]):
            for above in range(row, -1, -1):
                cleared_grid[above] = cleared_grid[above - 1] if above > 0 else create_empty_line(cols)
            # Every clear in this pass drops the rows above by one
            rows_cleared.insert(0, row - len(rows_cleared))
        else:
            row -= 1

    if rows_cleared:
        logger.debug("Cleared rows %s", rows_cleared)
    return ClearResult(cleared_grid=cleared_grid, rows_cleared=rows_cleared)


def get_line_blocks_from_grid(grid: WellGrid, lines: Sequence[int]) -> ColorGrid:
    """Colors of the given rows, identifiers stripped."""
    cols = len(grid[0])
    sub_grid: ColorGrid = []
    for row in lines:
        sub_grid.append([grid[row][col][1] if grid[row][col] else None for col in range(cols)])
    return sub_grid


def append_blocks_to_grid(grid: WellGrid, blocks: Sequence[Sequence[Optional[str]]]) -> WellGrid:
    """Push the well up and add ``blocks`` as new rows at the bottom.

    The top ``len(blocks)`` rows are dropped so the height is unchanged. Each
    colored block gets a new identifier continuing from the grid maximum.
    """
    rows = len(grid)
    cols = len(grid[0])
    cell_id = get_max_id_from_grid(grid)
    new_grid: WellGrid = [list(grid[row + len(blocks)]) for row in range(rows - len(blocks))]

    for block_row in blocks:
        line = create_empty_line(cols)
        for col in range(cols):
            if block_row[col]:
                cell_id += 1
                line[col] = (cell_id, block_row[col])
        new_grid.append(line)

    return new_grid
