"""Game module for Falling Blocks.

Exports the core simulation and supporting classes:
- GameConfig: Board dimensions, seed and gravity tuning
- GameGrid: Board representation, locking and row clearing
- Piece: Tetromino piece with rotation mechanics
- TetrominoType: Enum of available piece types
- ScoringRules: Line-clear scoring and level progression
- GameClock: Manually advanced gravity scheduler
- Session: Top-level state machine driven by commands and clock ticks
"""

from .clock import GameClock, gravity_interval_ms
from .collision import collides, drop_distance
from .config import GameConfig
from .core import GHOST_CELL, Action, PiecePreview, Session, SessionStats, Status
from .grid import GameGrid
from .pieces import COLORS, Piece, TetrominoType, rotate_cw
from .rotation import rotate_with_kicks
from .rules import ScoringRules
from .spawn import PieceQueue, spawn_position

__all__ = [
    "GameConfig",
    "GameGrid",
    "Piece",
    "TetrominoType",
    "COLORS",
    "rotate_cw",
    "collides",
    "drop_distance",
    "rotate_with_kicks",
    "ScoringRules",
    "PieceQueue",
    "spawn_position",
    "GameClock",
    "gravity_interval_ms",
    "Session",
    "SessionStats",
    "PiecePreview",
    "Status",
    "Action",
    "GHOST_CELL",
]
