"""Occupancy grid over a fixed rectangular workspace."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

GRID_ROWS = 9
GRID_COLS = 19
CELL_SIZE = 10.0  # centimetres per cell


class Cell(IntEnum):
    """Occupancy state of a single grid cell."""

    UNKNOWN = -1
    FREE = 0
    OCCUPIED = 1


@dataclass(frozen=True)
class Point:
    """A cell address in the grid."""

    row: int
    col: int


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class GridMap:
    """A GRID_ROWS x GRID_COLS occupancy map addressed by world coordinates."""

    rows = GRID_ROWS
    cols = GRID_COLS

    def __init__(self) -> None:
        self._grid: list[list[Cell]] = []
        self.reset()

    def reset(self) -> None:
        """Mark every cell as unknown."""
        self._grid = [[Cell.UNKNOWN] * self.cols for _ in range(self.rows)]

    def world_to_grid(self, x: float, y: float) -> Point:
        """Convert world coordinates (cm) to a cell, clamped to the grid."""
        col = _clamp(int(x / CELL_SIZE), 0, self.cols - 1)
        row = _clamp(int(y / CELL_SIZE), 0, self.rows - 1)
        return Point(row, col)

    def mark_free(self, x: float, y: float) -> None:
        """Mark the cell containing the world point as free."""
        p = self.world_to_grid(x, y)
        self._grid[p.row][p.col] = Cell.FREE

    def mark_occupied(self, x: float, y: float) -> None:
        """Mark the cell containing the world point as occupied."""
        p = self.world_to_grid(x, y)
        self._grid[p.row][p.col] = Cell.OCCUPIED

    def get_cell(self, row: int, col: int) -> Cell:
        """Return the state of the cell at (row, col)."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        return self._grid[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether (row, col) addresses a cell of the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols