from __future__ import annotations

import numpy as np
import pygame

from falling_blocks.game import PiecePreview, SessionStats, Status
from .palette import color_for_value


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_width: int = 180) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font = None

    def window_size(self, state: np.ndarray) -> tuple[int, int]:
        h, w = state.shape
        return (
            w * self.cell_size + self.panel_width + self.margin * 3,
            h * self.cell_size + self.margin * 2,
        )

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        width = w * self.cell_size
        height = h * self.cell_size
        surf = pygame.Surface((width, height))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                color = color_for_value(int(state[y, x]))
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color, rect)
        return surf

    def _text(self, screen: pygame.Surface, text: str, pos: tuple[int, int]) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        screen.blit(self._font.render(text, True, (230, 230, 240)), pos)

    def _draw_panel(self, screen: pygame.Surface, x: int, preview: PiecePreview, stats: SessionStats) -> None:
        y = self.margin
        for label, value in (("SCORE", stats.score), ("LEVEL", stats.level), ("LINES", stats.lines)):
            self._text(screen, f"{label}: {value}", (x, y))
            y += 32
        self._text(screen, "NEXT", (x, y))
        y += 28
        cell = self.cell_size // 2
        for dy, row in enumerate(preview.shape):
            for dx, filled in enumerate(row):
                if filled:
                    rect = pygame.Rect(x + dx * cell, y + dy * cell, cell - 1, cell - 1)
                    pygame.draw.rect(screen, color_for_value(preview.color), rect)
        y += cell * len(preview.shape) + 16
        if stats.status is Status.PAUSED:
            self._text(screen, "PAUSED", (x, y))
        elif stats.status is Status.GAME_OVER:
            self._text(screen, "GAME OVER - R", (x, y))
        elif stats.status is Status.READY:
            self._text(screen, "ENTER to start", (x, y))

    def draw(self, screen: pygame.Surface, state: np.ndarray, preview: PiecePreview, stats: SessionStats) -> None:
        grid_surf = self._grid_surface(state)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))
        self._draw_panel(screen, self.margin * 2 + grid_surf.get_width(), preview, stats)
        pygame.display.flip()
