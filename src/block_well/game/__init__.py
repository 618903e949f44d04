"""Grid engine for a falling-block puzzle.

Exports pure functions over well and piece grids:
- Grid primitives: empty grids, rotation, identifier scan
- Position normalization and placement checks with wall kicks
- Merging pieces into the well, line clearing and garbage lines
- Tetromino catalog and composite moves for a game loop
"""

from .grid import (
    Cell,
    ColorGrid,
    PieceGrid,
    WellGrid,
    format_grid,
    generate_empty_grid,
    get_max_id_from_grid,
    rotate,
    to_occupancy_array,
)
from .position import Position, get_exact_position
from .placement import (
    PlacementError,
    fit_tetromino_position_in_well_bounds,
    get_bottom_most_position,
    is_position_available,
)
from .merge import (
    ClearResult,
    append_blocks_to_grid,
    clear_lines,
    get_line_blocks_from_grid,
    transfer_tetromino_to_grid,
)
from .pieces import BASE_SHAPES, COLORS, Tetromino, TetrominoType, get_shape
from .core import (
    DropResult,
    attempt_move,
    attempt_rotation,
    commit_piece,
    get_drop_position,
    get_initial_position,
    insert_garbage,
)

__all__ = [
    "Cell",
    "ColorGrid",
    "PieceGrid",
    "WellGrid",
    "format_grid",
    "generate_empty_grid",
    "get_max_id_from_grid",
    "rotate",
    "to_occupancy_array",
    "Position",
    "get_exact_position",
    "PlacementError",
    "fit_tetromino_position_in_well_bounds",
    "get_bottom_most_position",
    "is_position_available",
    "ClearResult",
    "append_blocks_to_grid",
    "clear_lines",
    "get_line_blocks_from_grid",
    "transfer_tetromino_to_grid",
    "BASE_SHAPES",
    "COLORS",
    "Tetromino",
    "TetrominoType",
    "get_shape",
    "DropResult",
    "attempt_move",
    "attempt_rotation",
    "commit_piece",
    "get_drop_position",
    "get_initial_position",
    "insert_garbage",
]
