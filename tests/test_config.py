import pytest

from block_well import WellConfig


def test_default_well_dimensions():
    config = WellConfig()
    grid = config.new_grid()
    assert len(grid) == 20
    assert all(len(row) == 10 for row in grid)
    assert all(cell is None for row in grid for cell in row)


@pytest.mark.parametrize("rows, cols", [(0, 10), (20, 0), (-1, 4)])
def test_rejects_empty_well(rows, cols):
    with pytest.raises(ValueError):
        WellConfig(rows=rows, cols=cols)
