from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Mapping, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


# Canonical spawn orientation, each in its square bounding box
BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: np.array([[0, 0, 0, 0],
                               [1, 1, 1, 1],
                               [0, 0, 0, 0],
                               [0, 0, 0, 0]], dtype=np.int8),
    TetrominoType.J: np.array([[1, 0, 0],
                               [1, 1, 1],
                               [0, 0, 0]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 1],
                               [1, 1, 1],
                               [0, 0, 0]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1],
                               [1, 1]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 1, 1],
                               [1, 1, 0],
                               [0, 0, 0]], dtype=np.int8),
    TetrominoType.T: np.array([[0, 1, 0],
                               [1, 1, 1],
                               [0, 0, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[1, 1, 0],
                               [0, 1, 1],
                               [0, 0, 0]], dtype=np.int8),
}

# Renderer-facing colors; the board itself only stores int(TetrominoType)
COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "#FF6B6B",
    TetrominoType.J: "#4ECDC4",
    TetrominoType.L: "#45B7D1",
    TetrominoType.O: "#FFA07A",
    TetrominoType.S: "#98D8C8",
    TetrominoType.T: "#F7DC6F",
    TetrominoType.Z: "#BB8FCE",
}


def validate_catalogue(shapes: Mapping[TetrominoType, Shape]) -> None:
    """Fail fast on a catalogue no session could be built from."""
    if not shapes:
        raise ValueError("Shape catalogue is empty")
    missing = [t.name for t in TetrominoType if t not in shapes]
    if missing:
        raise ValueError(f"Shape catalogue is missing types: {', '.join(missing)}")
    for kind, shape in shapes.items():
        arr = np.asarray(shape)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"Shape for {TetrominoType(kind).name} must be a square matrix, got {arr.shape}")
        if not arr.any():
            raise ValueError(f"Shape for {TetrominoType(kind).name} has no occupied cells")


validate_catalogue(BASE_SHAPES)


def rotate_cw(shape: Shape) -> Shape:
    # Transpose, then reverse each row
    return np.ascontiguousarray(shape.T[:, ::-1])


def _rot90(shape: Shape, k: int) -> Shape:
    k = k % 4
    for _ in range(k):
        shape = rotate_cw(shape)
    return shape


@dataclass(frozen=True)
class Piece:
    kind: TetrominoType
    rotation: int = 0  # 0..3, clockwise quarter turns from spawn

    def shape(self) -> Shape:
        return _rot90(BASE_SHAPES[self.kind], self.rotation)

    def rotated(self, delta: int = 1) -> "Piece":
        return Piece(self.kind, (self.rotation + delta) % 4)

    @property
    def color(self) -> int:
        return int(self.kind)

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        s = self.shape()
        h, w = s.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if s[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells
