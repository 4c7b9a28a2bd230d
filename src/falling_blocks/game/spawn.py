from __future__ import annotations

import random
from typing import Any, Optional, Tuple

from .pieces import Piece, Shape, TetrominoType


def spawn_position(width: int, shape: Shape, spawn_y: int = 0) -> Tuple[int, int]:
    _, w = shape.shape
    return width // 2 - w // 2, spawn_y


class PieceQueue:
    """Uniform piece source over the seven tetromino types.

    ``rng`` may be any object with a ``choice`` method, which lets tests
    script an exact piece sequence. When ``rng`` is given it is used as is
    and ``seed`` is ignored; ``seed`` only seeds the default ``random.Random``.
    """

    def __init__(self, rng: Optional[Any] = None, seed: Optional[int] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def draw(self) -> Piece:
        kind = self.rng.choice(list(TetrominoType))
        return Piece(kind=TetrominoType(kind), rotation=0)
