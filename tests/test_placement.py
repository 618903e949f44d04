import pytest

from block_well.game.grid import generate_empty_grid
from block_well.game.placement import (
    PlacementError,
    fit_tetromino_position_in_well_bounds,
    get_bottom_most_position,
    is_position_available,
)
from block_well.game.position import Position


def _full_grid(rows, cols):
    return [[(row * cols + col + 1, "gray") for col in range(cols)] for row in range(rows)]


@pytest.mark.parametrize("grid", [generate_empty_grid(4, 3), _full_grid(4, 3)])
@pytest.mark.parametrize(
    "position",
    [Position(-1, 0), Position(3, 0), Position(0, 4), Position(-1, -3), Position(5, 10)],
)
def test_out_of_bounds_is_never_available(grid, position):
    assert not is_position_available(grid, [[1]], position)


def test_inside_empty_well_is_available():
    grid = generate_empty_grid(4, 3)
    assert is_position_available(grid, [[1]], Position(0, 3))
    assert is_position_available(grid, [[1]], Position(2.9, 3.99))


def test_above_the_well_is_available():
    grid = _full_grid(4, 3)
    assert is_position_available(grid, [[1], [1]], Position(0, -2))
    assert not is_position_available(grid, [[1], [1]], Position(0, -1))


def test_occupied_cell_blocks():
    grid = generate_empty_grid(4, 3)
    grid[3][1] = (1, "red")
    assert not is_position_available(grid, [[1]], Position(1, 3))
    assert is_position_available(grid, [[1]], Position(1, 2))


def test_empty_piece_cells_are_ignored():
    grid = generate_empty_grid(4, 3)
    piece = [[0, 1], [0, 0]]
    assert is_position_available(grid, piece, Position(-1, 0))
    assert not is_position_available(grid, piece, Position(2, 0))


def test_availability_is_repeatable():
    grid = generate_empty_grid(4, 3)
    grid[2][0] = (1, "red")
    piece = [[1, 1], [1, 0]]
    results = {is_position_available(grid, piece, Position(0, 1)) for _ in range(5)}
    assert results == {False}


def test_bottom_most_position_moves_up_off_the_stack():
    grid = generate_empty_grid(4, 3)
    grid[3] = [(1, "red"), (2, "red"), (3, "red")]
    assert get_bottom_most_position(grid, [[1]], Position(0, 3.5)) == Position(0, 2)


def test_bottom_most_position_keeps_available_row():
    grid = generate_empty_grid(4, 3)
    assert get_bottom_most_position(grid, [[1]], Position(1.5, 1.2)) == Position(1.5, 1)


def test_bottom_most_position_walks_several_rows():
    grid = generate_empty_grid(4, 3)
    for row in range(1, 4):
        grid[row][0] = (row, "red")
    assert get_bottom_most_position(grid, [[1]], Position(0, 3)) == Position(0, 0)


def test_bottom_most_position_above_full_column():
    grid = generate_empty_grid(4, 3)
    for row in range(4):
        grid[row][0] = (row + 1, "red")
    assert get_bottom_most_position(grid, [[1], [1]], Position(0, 3)) == Position(0, -2)


def test_bottom_most_position_outside_walls_raises():
    grid = generate_empty_grid(4, 3)
    with pytest.raises(PlacementError):
        get_bottom_most_position(grid, [[1]], Position(-1, 0))


def test_fit_kicks_off_left_wall():
    grid = generate_empty_grid(1, 10)
    assert fit_tetromino_position_in_well_bounds(grid, [[True]], Position(-1, 0)) == Position(0, 0)


def test_fit_kicks_off_right_wall():
    grid = generate_empty_grid(1, 10)
    assert fit_tetromino_position_in_well_bounds(grid, [[True]], Position(10, 0)) == Position(9, 0)


def test_fit_keeps_vertical_coordinate():
    grid = generate_empty_grid(4, 10)
    assert fit_tetromino_position_in_well_bounds(grid, [[1]], Position(-2, 3.5)) == Position(0, 3.5)


def test_fit_leaves_inside_position_alone():
    grid = generate_empty_grid(4, 10)
    assert fit_tetromino_position_in_well_bounds(grid, [[1, 1]], Position(4, 1)) == Position(4, 1)


def test_fit_ignores_empty_piece_columns():
    grid = generate_empty_grid(4, 10)
    piece = [[0, 1, 0], [1, 1, 0], [0, 1, 0]]
    assert fit_tetromino_position_in_well_bounds(grid, piece, Position(-1, 0)) == Position(0, 0)
    assert fit_tetromino_position_in_well_bounds(grid, piece, Position(8, 0)) == Position(8, 0)


def test_fit_last_violating_cell_wins():
    # The piece is wider than the well, so the corrections compete and the
    # cell scanned last decides.
    grid = generate_empty_grid(1, 2)
    assert fit_tetromino_position_in_well_bounds(grid, [[1, 1, 1]], Position(0, 0)) == Position(-1, 0)
    assert fit_tetromino_position_in_well_bounds(grid, [[1, 1, 1]], Position(-1, 0)) == Position(-1, 0)
