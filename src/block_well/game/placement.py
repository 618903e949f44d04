from __future__ import annotations

from .grid import PieceGrid, WellGrid
from .position import Position, get_exact_position


class PlacementError(ValueError):
    """No legal row exists for a piece at the requested column."""


def is_position_available(grid: WellGrid, piece: PieceGrid, position: Position) -> bool:
    """Check whether ``piece`` fits in the well at ``position``.

    Every filled piece cell must stay between the side walls and above the
    floor, and must not overlap an occupied well cell. Cells above the top of
    the well are accepted, that is how pieces enter.
    """
    rows = len(grid)
    cols = len(grid[0])
    piece_rows = len(piece)
    piece_cols = len(piece[0])
    exact = get_exact_position(position)

    for row in range(piece_rows):
        for col in range(piece_cols):
            if not piece[row][col]:
                continue
            well_row = exact.y + row
            well_col = exact.x + col

            if well_col < 0 or well_col >= cols:
                return False
            if well_row >= rows:
                return False
            if well_row >= 0 and grid[well_row][well_col]:
                return False

    return True


def get_bottom_most_position(grid: WellGrid, piece: PieceGrid, position: Position) -> Position:
    """Snap ``position`` to a row and walk up until the piece fits.

    The search starts at the given row and moves one row at a time toward
    the top of the well; it does not look for the lowest resting row.

    Raises:
        PlacementError: the piece is out of the side walls, so no row fits.
    """
    y = get_exact_position(position).y
    # From this row up every piece cell is above the well; only columns matter.
    floor_y = -len(piece)

    while not is_position_available(grid, piece, Position(position.x, y)):
        if y <= floor_y:
            raise PlacementError(f"no legal row for piece at x={position.x}")
        y -= 1

    return Position(position.x, y)


def fit_tetromino_position_in_well_bounds(
    grid: WellGrid, piece: PieceGrid, position: Position
) -> Position:
    """Wall kick: shift a piece horizontally back inside the well.

    Cells are scanned row by row against the running offset, so a later
    overhanging cell can undo part of an earlier correction.
    """
    cols = len(grid[0])
    piece_rows = len(piece)
    piece_cols = len(piece[0])
    new_x = position.x

    for row in range(piece_rows):
        for col in range(piece_cols):
            if not piece[row][col]:
                continue
            well_col = new_x + col
            if well_col < 0:
                new_x -= well_col
            elif well_col >= cols:
                new_x -= well_col - cols + 1

    return Position(new_x, position.y)
