from __future__ import annotations

import logging
from typing import Callable, Optional

from .config import GameConfig


logger = logging.getLogger(__name__)


def gravity_interval_ms(level: int, config: Optional[GameConfig] = None) -> int:
    """Milliseconds between gravity ticks at ``level`` (1-based)."""
    config = config or GameConfig()
    if config.speed_curve == "linear":
        interval = 500 - 30 * level
    else:
        interval = config.base_interval_ms * config.interval_decay ** (level - 1)
    return int(round(max(config.min_interval_ms, interval)))


class GameClock:
    """Manually advanced gravity scheduler.

    Holds at most one schedule. ``start`` and ``reconfigure`` retire the
    current schedule, including any time accumulated towards its next tick,
    before the new one begins. Time is fed in through ``advance``.
    """

    def __init__(self, on_tick: Callable[[], None]) -> None:
        self._on_tick = on_tick
        self._interval_ms = 0
        self._elapsed_ms = 0
        self._running = False
        # Bumped on every schedule change so an in-flight advance() can tell
        # that the schedule it was draining has been retired.
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"Clock interval must be positive, got {interval_ms}")
        self._generation += 1
        self._interval_ms = int(interval_ms)
        self._elapsed_ms = 0
        self._running = True
        logger.debug("Clock started at %d ms", self._interval_ms)

    def stop(self) -> None:
        self._generation += 1
        self._elapsed_ms = 0
        self._running = False
        logger.debug("Clock stopped")

    def reconfigure(self, interval_ms: int) -> None:
        if self._running:
            self.start(interval_ms)
        else:
            self._interval_ms = int(interval_ms)

    def advance(self, elapsed_ms: float) -> int:
        """Feed wall-clock time in and deliver any ticks that fell due."""
        if not self._running:
            return 0
        self._elapsed_ms += elapsed_ms
        generation = self._generation
        delivered = 0
        while self._elapsed_ms >= self._interval_ms:
            self._elapsed_ms -= self._interval_ms
            delivered += 1
            self._on_tick()
            if generation != self._generation:
                break
        return delivered
