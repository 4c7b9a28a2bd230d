import numpy as np

from falling_blocks.game import GameGrid
from tests.helpers import fill_rows


def test_new_grid_is_empty_with_fixed_shape():
    grid = GameGrid(10, 20)
    assert grid.grid.shape == (20, 10)
    assert not grid.grid.any()


def test_row_full_and_remove_row_keeps_height():
    grid = GameGrid(10, 20)
    fill_rows(grid, [19])
    grid.set_cell(3, 18, 5)
    assert grid.is_row_full(19)
    assert not grid.is_row_full(18)

    grid.remove_row(19)
    assert grid.grid.shape == (20, 10)
    assert grid.get_cell(3, 19) == 5
    assert not grid.grid[0].any()


def test_lock_drops_cells_above_the_board():
    grid = GameGrid(10, 20)
    cleared = grid.lock([(0, -2), (0, -1), (0, 0), (1, 0)], 3)
    assert cleared == 0
    assert grid.get_cell(0, 0) == 3
    assert grid.get_cell(1, 0) == 3
    assert int(np.count_nonzero(grid.grid)) == 2


def test_lock_clears_completed_row():
    grid = GameGrid(10, 20)
    fill_rows(grid, [19], gaps=[3, 4, 5, 6])
    cleared = grid.lock([(3, 19), (4, 19), (5, 19), (6, 19)], 1)
    assert cleared == 1
    assert not grid.grid.any()


def test_clear_compacts_survivors_in_order():
    grid = GameGrid(10, 20)
    fill_rows(grid, [15, 18])
    grid.set_cell(0, 16, 2)
    grid.set_cell(1, 17, 3)
    grid.set_cell(2, 19, 4)

    assert grid.clear_full_rows() == 2
    assert grid.grid.shape == (20, 10)
    assert grid.get_cell(0, 17) == 2
    assert grid.get_cell(1, 18) == 3
    assert grid.get_cell(2, 19) == 4
    assert int(np.count_nonzero(grid.grid)) == 3


def test_clear_is_idempotent():
    grid = GameGrid(10, 20)
    fill_rows(grid, [16, 17, 18, 19], gaps=[0])
    fill_rows(grid, [17, 19])
    assert grid.clear_full_rows() == 2
    before = grid.clone_state()
    assert grid.clear_full_rows() == 0
    assert np.array_equal(before, grid.grid)


def test_max_height_counts_from_floor():
    grid = GameGrid(10, 20)
    assert grid.get_max_height() == 0
    grid.set_cell(4, 15, 1)
    assert grid.get_max_height() == 5
