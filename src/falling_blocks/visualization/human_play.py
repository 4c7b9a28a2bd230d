from __future__ import annotations

import logging
from typing import Callable, Dict

import pygame

from falling_blocks.game import Session
from .renderer import Renderer


KEY_TO_COMMAND: Dict[int, Callable[[Session], bool]] = {
    pygame.K_LEFT: lambda s: s.move(-1, 0),
    pygame.K_RIGHT: lambda s: s.move(1, 0),
    pygame.K_UP: lambda s: s.rotate(),
    pygame.K_DOWN: lambda s: s.soft_drop(),
    pygame.K_SPACE: lambda s: s.hard_drop(),
    pygame.K_p: lambda s: s.toggle_pause(),
    pygame.K_r: lambda s: s.reset(),
    pygame.K_RETURN: lambda s: s.start(),
}


def dispatch_key(session: Session, key: int) -> bool:
    command = KEY_TO_COMMAND.get(key)
    if command is None:
        return False
    return command(session)


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    try:
        clock = pygame.time.Clock()
        session = Session()
        renderer = Renderer(cell_size=28)

        screen = pygame.display.set_mode(renderer.window_size(session.display_grid()))
        pygame.display.set_caption("Falling Blocks")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        dispatch_key(session, event.key)

            # Gravity: the session's clock only ticks while running
            session.advance(clock.tick(60))

            renderer.draw(screen, session.display_grid(), session.preview(), session.stats())
    finally:
        pygame.quit()
    stats = session.stats()
    print(f"Final score: {stats.score} (lines {stats.lines}, level {stats.level})")


if __name__ == "__main__":  # pragma: no cover
    run()
