from __future__ import annotations

import numpy as np

from .grid import EMPTY, GameGrid
from .pieces import Shape


def collides(grid: GameGrid, shape: Shape, x: int, y: int) -> bool:
    """Return True if ``shape`` with its top-left at (x, y) is illegal.

    Walls and floor always count. Board contents only count for rows that
    exist, so a piece may sit partly above row 0.
    """
    rows, cols = np.nonzero(shape)
    for dy, dx in zip(rows.tolist(), cols.tolist()):
        bx, by = x + dx, y + dy
        if bx < 0 or bx >= grid.width or by >= grid.height:
            return True
        if by >= 0 and grid.grid[by, bx] != EMPTY:
            return True
    return False


def drop_distance(grid: GameGrid, shape: Shape, x: int, y: int) -> int:
    """Rows the shape can fall from (x, y) before it would collide."""
    dy = 0
    while not collides(grid, shape, x, y + dy + 1):
        dy += 1
    return dy
