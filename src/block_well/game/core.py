"""Composite moves built on the grid engine.

Everything here is a pure function of its arguments: a game loop keeps the
well grid, the falling piece and its position, and replaces them with the
values returned on every tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .grid import ColorGrid, PieceGrid, WellGrid, format_grid, rotate
from .merge import append_blocks_to_grid, clear_lines, get_line_blocks_from_grid, transfer_tetromino_to_grid
from .placement import fit_tetromino_position_in_well_bounds, get_bottom_most_position, is_position_available
from .position import Position, get_exact_position


logger = logging.getLogger(__name__)


@dataclass
class DropResult:
    grid: WellGrid
    rows_cleared: List[int] = field(default_factory=list)
    cleared_blocks: ColorGrid = field(default_factory=list)
    game_over: bool = False


def get_initial_position(grid: WellGrid, piece: PieceGrid) -> Position:
    """Center the piece horizontally, just above the top of the well."""
    cols = len(grid[0])
    return Position(x=(cols - len(piece[0])) // 2, y=-len(piece))


def attempt_move(grid: WellGrid, piece: PieceGrid, position: Position, dx: int) -> Position:
    """Shift the piece ``dx`` columns, or keep ``position`` if the target is taken."""
    target = Position(position.x + dx, position.y)
    if is_position_available(grid, piece, target):
        return target
    return position


def attempt_rotation(
    grid: WellGrid, piece: PieceGrid, position: Position
) -> Tuple[PieceGrid, Position]:
    """Rotate clockwise, kicking off the walls when needed.

    Returns the original piece and position when the rotated piece collides
    with the stack even after the kick.
    """
    rotated = rotate(piece)
    fitted = fit_tetromino_position_in_well_bounds(grid, rotated, position)
    if is_position_available(grid, rotated, fitted):
        return rotated, fitted
    return piece, position


def get_drop_position(grid: WellGrid, piece: PieceGrid, position: Position) -> Position:
    """Lowest row reached by moving straight down from ``position``.

    The piece must have at least one filled cell, otherwise the floor never
    stops it.
    """
    y = get_exact_position(position).y
    while is_position_available(grid, piece, Position(position.x, y + 1)):
        y += 1
    return Position(position.x, y)


def _is_above_well(piece: PieceGrid, position: Position) -> bool:
    top = get_exact_position(position).y
    for row in range(len(piece)):
        if any(piece[row]):
            return top + row < 0
    return False


def commit_piece(grid: WellGrid, piece: PieceGrid, position: Position, color: str) -> DropResult:
    """Settle the piece, merge it into the well and clear completed lines.

    Blocks of the cleared rows are captured before the clear so they can be
    sent elsewhere as garbage lines.
    """
    settled = get_bottom_most_position(grid, piece, position)
    merged = transfer_tetromino_to_grid(grid, piece, settled, color)
    result = clear_lines(merged)
    game_over = _is_above_well(piece, settled)
    if game_over:
        logger.debug("Piece settled above the well at %s\n%s", settled, format_grid(merged))
    return DropResult(
        grid=result.cleared_grid,
        rows_cleared=result.rows_cleared,
        cleared_blocks=get_line_blocks_from_grid(merged, result.rows_cleared),
        game_over=game_over,
    )


def insert_garbage(grid: WellGrid, blocks: Sequence[Sequence[Optional[str]]]) -> WellGrid:
    """Add garbage rows at the bottom; raises ValueError on a width mismatch."""
    cols = len(grid[0])
    for block_row in blocks:
        if len(block_row) != cols:
            raise ValueError(f"garbage row has {len(block_row)} cells, well has {cols} columns")
    logger.debug("Inserting %d garbage rows", len(blocks))
    return append_blocks_to_grid(grid, blocks)
