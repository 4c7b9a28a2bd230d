from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np


Coordinate = Tuple[int, int]

EMPTY = 0


class GameGrid:
    """Discrete 2D grid of locked cells.

    The grid uses 0 for empty cells and positive integers for filled cells.
    Integer values are the color token (tetromino index) of the locked piece.
    Row 0 is the top of the board.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> int:
        return int(self.grid[y, x])

    def set_cell(self, x: int, y: int, value: int) -> None:
        self.grid[y, x] = value

    def is_row_full(self, y: int) -> bool:
        return bool(np.all(self.grid[y] != EMPTY))

    def remove_row(self, y: int) -> None:
        """Drop row ``y`` and push an empty row in at the top."""
        remaining = np.delete(self.grid, y, axis=0)
        self.grid = np.vstack((np.zeros((1, self.width), dtype=np.int8), remaining))

    def lock(self, cells: Iterable[Coordinate], value: int) -> int:
        """Write ``value`` into ``cells``, clear full rows, return rows cleared.

        Cells above the board (y < 0) have no row to land in and are dropped.
        """
        for x, y in cells:
            if self.is_inside(x, y):
                self.grid[y, x] = value
        return self.clear_full_rows()

    def clear_full_rows(self) -> int:
        full = np.all(self.grid != EMPTY, axis=1)
        num = int(np.count_nonzero(full))
        if num == 0:
            return 0
        # Survivors keep their relative order beneath the fresh empty rows
        remaining = self.grid[~full]
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, remaining))
        return num

    def get_max_height(self) -> int:
        # y=0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != EMPTY, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.height - int(non_empty_rows[0])

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
