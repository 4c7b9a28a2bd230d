from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional, Tuple

import numpy as np

from .clock import GameClock, gravity_interval_ms
from .collision import collides, drop_distance
from .config import GameConfig
from .grid import EMPTY, GameGrid
from .pieces import Piece, TetrominoType
from .rotation import rotate_with_kicks
from .rules import ScoringRules
from .spawn import PieceQueue, spawn_position


logger = logging.getLogger(__name__)

# Paint value for ghost cells in display_grid(); locked and falling cells are positive
GHOST_CELL = -1


class Status(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


@dataclass(frozen=True)
class SessionStats:
    score: int
    lines: int
    level: int
    status: Status


@dataclass(frozen=True)
class PiecePreview:
    kind: TetrominoType
    shape: np.ndarray
    color: int


class Session:
    """Owns one game: board, falling piece, queue, counters and gravity clock.

    Every command runs to completion before returning and reports whether it
    changed anything. Illegal moves are rejected, never raised.

    Pieces come from ``rng`` when one is passed, otherwise from a
    ``random.Random`` seeded with ``config.random_seed``. An injected ``rng``
    takes precedence over the configured seed.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[Any] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules(lines_per_level=self.config.lines_per_level)
        self.queue = PieceQueue(rng, seed=self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.clock = GameClock(self.tick)
        self.score = 0
        self.lines = 0
        self.level = 1
        self.status = Status.READY
        self.current_piece: Optional[Piece] = None
        self.current_x = 0
        self.current_y = 0
        self.next_piece: Optional[Piece] = None
        self._initialize()

    def _initialize(self) -> None:
        self.clock.stop()
        self.grid.reset()
        self.score = 0
        self.lines = 0
        self.level = 1
        self.status = Status.READY
        self.current_piece = None
        self.next_piece = self.queue.draw()
        self._spawn_next()

    @property
    def gravity_interval_ms(self) -> int:
        return gravity_interval_ms(self.level, self.config)

    @property
    def is_running(self) -> bool:
        return self.status is Status.RUNNING and self.current_piece is not None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start(self) -> bool:
        if self.status is not Status.READY:
            return False
        self.status = Status.RUNNING
        self.clock.start(self.gravity_interval_ms)
        logger.info("Session started")
        return True

    def reset(self) -> bool:
        self._initialize()
        logger.info("Session reset")
        return self.start()

    def toggle_pause(self) -> bool:
        if self.status is Status.RUNNING:
            self.status = Status.PAUSED
            self.clock.stop()
            logger.info("Session paused")
            return True
        if self.status is Status.PAUSED:
            self.status = Status.RUNNING
            self.clock.start(self.gravity_interval_ms)
            logger.info("Session resumed")
            return True
        return False

    def move(self, dx: int, dy: int) -> bool:
        """Shift the piece one cell at a time, stopping at the first blocked cell.

        Pieces never move up. Returns True if the piece moved at all.
        """
        if not self.is_running or (dx == 0 and dy == 0) or dy < 0:
            return False
        shape = self.current_piece.shape()
        x, y = self.current_x, self.current_y
        step_x = 1 if dx > 0 else -1
        for _ in range(abs(dx)):
            if collides(self.grid, shape, x + step_x, y):
                break
            x += step_x
        for _ in range(dy):
            if collides(self.grid, shape, x, y + 1):
                break
            y += 1
        moved = (x, y) != (self.current_x, self.current_y)
        self.current_x = x
        self.current_y = y
        return moved

    def rotate(self) -> bool:
        if not self.is_running:
            return False
        result = rotate_with_kicks(self.grid, self.current_piece, self.current_x, self.current_y)
        if result is None:
            return False
        self.current_piece, self.current_x, self.current_y = result
        return True

    def soft_drop(self) -> bool:
        if not self.is_running:
            return False
        self.score += self.rules.soft_drop_score
        self._gravity_step()
        return True

    def hard_drop(self) -> bool:
        if not self.is_running:
            return False
        self.current_y += drop_distance(self.grid, self.current_piece.shape(), self.current_x, self.current_y)
        self._lock_piece()
        return True

    def tick(self) -> bool:
        """Automatic gravity: one row down, or lock when blocked."""
        if not self.is_running:
            return False
        self._gravity_step()
        return True

    def advance(self, elapsed_ms: float) -> int:
        return self.clock.advance(elapsed_ms)

    def apply(self, action: Action) -> bool:
        if action == Action.LEFT:
            return self.move(-1, 0)
        if action == Action.RIGHT:
            return self.move(1, 0)
        if action == Action.ROTATE:
            return self.rotate()
        if action == Action.SOFT_DROP:
            return self.soft_drop()
        if action == Action.HARD_DROP:
            return self.hard_drop()
        return False

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _gravity_step(self) -> None:
        shape = self.current_piece.shape()
        if not collides(self.grid, shape, self.current_x, self.current_y + 1):
            self.current_y += 1
        else:
            self._lock_piece()

    def _lock_piece(self) -> None:
        piece = self.current_piece
        cleared = self.grid.lock(piece.cells_at(self.current_x, self.current_y), piece.color)
        self.current_piece = None
        logger.debug("Locked %s at (%d, %d), cleared %d", piece.kind.name, self.current_x, self.current_y, cleared)

        self.score += self.rules.score_for_lines(cleared, self.level)
        self.lines += cleared
        new_level = self.rules.level_for_lines(self.lines)
        if new_level != self.level:
            self.level = new_level
            self.clock.reconfigure(self.gravity_interval_ms)
            logger.info("Level %d, gravity every %d ms", self.level, self.gravity_interval_ms)

        self._spawn_next()

    def _spawn_next(self) -> None:
        piece = self.next_piece
        x, y = spawn_position(self.grid.width, piece.shape(), self.config.spawn_y)
        if collides(self.grid, piece.shape(), x, y):
            self.status = Status.GAME_OVER
            self.clock.stop()
            logger.info("Game over: score=%d lines=%d level=%d", self.score, self.lines, self.level)
            return
        self.current_piece = piece
        self.current_x = x
        self.current_y = y
        self.next_piece = self.queue.draw()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def ghost_position(self) -> Optional[Tuple[int, int]]:
        if self.current_piece is None:
            return None
        dy = drop_distance(self.grid, self.current_piece.shape(), self.current_x, self.current_y)
        return self.current_x, self.current_y + dy

    def display_grid(self) -> np.ndarray:
        state = self.grid.clone_state()
        if self.current_piece is None:
            return state
        ghost = self.ghost_position()
        if ghost is not None:
            for x, y in self.current_piece.cells_at(*ghost):
                if self.grid.is_inside(x, y) and state[y, x] == EMPTY:
                    state[y, x] = GHOST_CELL
        for x, y in self.current_piece.cells_at(self.current_x, self.current_y):
            if self.grid.is_inside(x, y):
                state[y, x] = self.current_piece.color
        return state

    def preview(self) -> PiecePreview:
        piece = self.next_piece
        return PiecePreview(kind=piece.kind, shape=piece.shape().copy(), color=piece.color)

    def stats(self) -> SessionStats:
        return SessionStats(score=self.score, lines=self.lines, level=self.level, status=self.status)
