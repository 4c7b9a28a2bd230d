from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import GHOST_CELL, Action, GameConfig, Session, Status, TetrominoType
from falling_blocks.visualization.palette import color_for_value


class FallingBlocksEnv(gym.Env):
    """One session per episode; every step is a command followed by a gravity tick."""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.session = Session(self.config)
        self.render_mode = render_mode

        h, w = self.config.height, self.config.width
        self.observation_space = spaces.Box(
            low=GHOST_CELL, high=len(TetrominoType), shape=(h, w), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))

        self._last_obs: Optional[np.ndarray] = None
        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.session.display_grid()

    def _get_info(self) -> Dict[str, Any]:
        stats = self.session.stats()
        return {
            "score": stats.score,
            "lines": stats.lines,
            "level": stats.level,
            "stack_height": self.session.grid.get_max_height(),
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        # Draw pieces from the env's seeded generator so episodes replay exactly
        self.session = Session(self.config, rng=_NumpyChoice(self.np_random))
        self.session.start()
        self._steps = 0
        obs = self._get_obs()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: int):
        score_before = self.session.score

        self.session.apply(Action(int(action)))
        if self.session.status is Status.RUNNING:
            self.session.tick()

        self._steps += 1
        terminated = self.session.status is Status.GAME_OVER
        truncated = not terminated and self._steps >= self.config.max_episode_steps
        reward = float(self.session.score - score_before)

        obs = self._get_obs()
        self._last_obs = obs
        return obs, reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self._last_obs if self._last_obs is not None else self._get_obs()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    color = color_for_value(grid[y, x])
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        # human rendering delegated to external UI; noop
        return None

    def close(self) -> None:
        pass


class _NumpyChoice:
    """Adapts a numpy Generator to the ``choice`` interface PieceQueue draws from."""

    def __init__(self, generator: np.random.Generator) -> None:
        self.generator = generator

    def choice(self, seq):
        return seq[int(self.generator.integers(len(seq)))]
