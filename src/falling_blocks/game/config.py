from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


SPEED_CURVES = ("exponential", "linear")


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_y: int = 0
    lines_per_level: int = 10
    # Gravity cadence: max(min, base * decay ** (level - 1)) for "exponential",
    # max(min, 500 - 30 * level) for "linear".
    speed_curve: str = "exponential"
    base_interval_ms: int = 800
    interval_decay: float = 0.9
    min_interval_ms: int = 100
    max_episode_steps: int = 10000

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        if self.width < 4:
            raise ValueError(f"Board width must fit a 4-wide piece, got {self.width}")
        if self.spawn_y < 0:
            raise ValueError(f"spawn_y must not be negative, got {self.spawn_y}")
        if self.height < self.spawn_y + 4:
            raise ValueError(f"Board height {self.height} cannot hold a 4-row piece box spawned at row {self.spawn_y}")
        if self.max_episode_steps <= 0:
            raise ValueError("max_episode_steps must be positive")
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")
        if self.speed_curve not in SPEED_CURVES:
            raise ValueError(f"Unknown speed curve {self.speed_curve!r}; expected one of {SPEED_CURVES}")
        if self.base_interval_ms <= 0 or self.min_interval_ms <= 0:
            raise ValueError("Gravity intervals must be positive")
        if not 0.0 < self.interval_decay <= 1.0:
            raise ValueError(f"interval_decay must be in (0, 1], got {self.interval_decay}")
