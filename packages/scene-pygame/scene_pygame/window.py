"""Resizable pygame window that drives an Engine once per displayed frame."""
from __future__ import annotations

import logging
from typing import Callable

import pygame

from scene import Engine

from scene_pygame.surface import PygameSurface

logger = logging.getLogger(__name__)

KeyHandler = Callable[[int], "Engine | None"]


def run_window(
    engine: Engine,
    title: str = "scene",
    fps: int | None = None,
    on_key: KeyHandler | None = None,
) -> None:
    """Run until the window closes, Escape is pressed, or a system requests stop.

    ``on_key`` may return a replacement engine (e.g. to switch effects); the
    old one is stopped and the new one started at the current window size.
    """
    pygame.init()
    vp = engine.viewport
    screen = pygame.display.set_mode((vp.width, vp.height), pygame.RESIZABLE)
    pygame.display.set_caption(title)
    host = PygameSurface(screen)
    pg_clock = pygame.time.Clock()
    rate = fps if fps is not None else engine.clock.fps

    engine.start()
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif on_key is not None:
                        replacement = on_key(event.key)
                        if replacement is not None:
                            engine.stop()
                            w, h = screen.get_size()
                            replacement.resize(w, h)
                            engine = replacement
                            engine.start()
                elif event.type == pygame.VIDEORESIZE:
                    w, h = max(event.w, 1), max(event.h, 1)
                    screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                    host = PygameSurface(screen)
                    logger.info("window resized to %dx%d", w, h)
                    engine.resize(w, h)

            frame = engine.step()
            skipped = host.present(frame)
            if skipped:
                logger.debug("frame %d: %d primitives skipped",
                             engine.clock.frame_number, skipped)
            pygame.display.flip()
            if engine.stop_requested:
                running = False
            pg_clock.tick(rate)
    finally:
        engine.stop()
        pygame.quit()
