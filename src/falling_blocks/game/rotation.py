from __future__ import annotations

from typing import Optional, Tuple

from .collision import collides
from .grid import GameGrid
from .pieces import Piece


# Tried in order; the first free placement wins
KICK_OFFSETS: Tuple[int, ...] = (0, -1, 1)


def rotate_with_kicks(grid: GameGrid, piece: Piece, x: int, y: int) -> Optional[Tuple[Piece, int, int]]:
    rotated = piece.rotated(1)
    shape = rotated.shape()
    for dx in KICK_OFFSETS:
        if not collides(grid, shape, x + dx, y):
            return rotated, x + dx, y
    return None
