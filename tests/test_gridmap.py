import pytest

from gridbot.gridmap import CELL_SIZE, GRID_COLS, GRID_ROWS, Cell, GridMap, Point


def test_new_map_is_all_unknown():
    grid = GridMap()
    states = {grid.get_cell(r, c) for r in range(GRID_ROWS) for c in range(GRID_COLS)}
    assert states == {Cell.UNKNOWN}


def test_cell_values_returned_by_map():
    grid = GridMap()
    grid.mark_free(5.0, 5.0)
    grid.mark_occupied(15.0, 5.0)
    values = (
        int(grid.get_cell(1, 0)),
        int(grid.get_cell(0, 0)),
        int(grid.get_cell(0, 1)),
    )
    assert values == (-1, 0, 1)


def test_world_to_grid_origin():
    assert GridMap().world_to_grid(0.0, 0.0) == Point(0, 0)


def test_world_to_grid_x_is_column_y_is_row():
    grid = GridMap()
    p = grid.world_to_grid(2 * CELL_SIZE + 1, 3 * CELL_SIZE + 1)
    assert p == Point(3, 2)


def test_world_to_grid_clamps_low_and_high():
    grid = GridMap()
    assert grid.world_to_grid(-50.0, -50.0) == Point(0, 0)
    assert grid.world_to_grid(10_000.0, 10_000.0) == Point(GRID_ROWS - 1, GRID_COLS - 1)


def test_mark_free_and_occupied():
    grid = GridMap()
    grid.mark_free(5.0, 5.0)
    grid.mark_occupied(15.0, 5.0)
    assert grid.get_cell(0, 0) is Cell.FREE
    assert grid.get_cell(0, 1) is Cell.OCCUPIED
    assert grid.get_cell(1, 0) is Cell.UNKNOWN


def test_mark_overwrites():
    grid = GridMap()
    grid.mark_free(5.0, 5.0)
    grid.mark_occupied(5.0, 5.0)
    assert grid.get_cell(0, 0) is Cell.OCCUPIED


def test_reset_clears_marks():
    grid = GridMap()
    grid.mark_free(5.0, 5.0)
    grid.reset()
    assert grid.get_cell(0, 0) is Cell.UNKNOWN


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (GRID_ROWS, 0), (0, GRID_COLS)])
def test_get_cell_out_of_range(row, col):
    with pytest.raises(IndexError):
        GridMap().get_cell(row, col)