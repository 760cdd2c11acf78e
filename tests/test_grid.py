import pytest

from alifesim.grid import Grid


def test_dimensions_match_constructor():
    grid = Grid(4, 5, 3)
    assert (grid.rows, grid.cols, grid.channels) == (4, 5, 3)
    assert len(grid) == 4 * 5 * 3
    assert grid.data.shape == (4, 5, 3)


def test_default_single_channel():
    grid = Grid(2, 3)
    assert grid.channels == 1
    assert len(grid) == 2 * 3


def test_new_grid_is_zero():
    grid = Grid(3, 3, 2)
    assert all(grid[r, c, ch] == 0.0 for r in range(3) for c in range(3) for ch in range(2))


def test_set_and_get_channels():
    grid = Grid(2, 2, 2)
    grid[1, 0] = 0.75
    grid[1, 0, 1] = 0.25
    assert grid[1, 0] == 0.75
    assert grid[1, 0, 0] == 0.75
    assert grid[1, 0, 1] == 0.25
    assert grid[0, 0, 1] == 0.0


def test_layout_is_row_major_with_interleaved_channels():
    grid = Grid(2, 3, 2)
    grid[1, 2, 1] = 5.0
    flat = grid.data.ravel()
    assert flat[11] == 5.0
    assert flat.sum() == 5.0


def test_data_is_live():
    grid = Grid(2, 2)
    grid.data[0, 1, 0] = 9.0
    assert grid[0, 1] == 9.0


@pytest.mark.parametrize("key", [(2, 0), (0, 2), (0, 0, 1), (-1, 0), (0, -1)])
def test_out_of_range_index(key):
    grid = Grid(2, 2)
    grid[1, 1] = 4.0
    with pytest.raises(IndexError):
        grid[key]
    assert grid[1, 1] == 4.0


def test_bad_key_shape():
    grid = Grid(2, 2)
    with pytest.raises(TypeError):
        grid[0]
    with pytest.raises(TypeError):
        grid[0, 0, 0, 0] = 1.0
    assert grid.data.sum() == 0.0


def test_negative_dimension():
    with pytest.raises(ValueError):
        Grid(-1, 2)