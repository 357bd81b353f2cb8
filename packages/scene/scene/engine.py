"""Engine - frame loop, pacing, and lifecycle hooks."""

import logging
import os
import random
import time
from typing import Callable

from scene.clock import Clock
from scene.draw import Clear, Color, Primitive
from scene.types import FrameContext, Hook, Renderer, System, Viewport
from scene.world import World

logger = logging.getLogger(__name__)

Present = Callable[[list[Primitive]], None]


class Engine:
    def __init__(
        self,
        fps: int = 60,
        seed: int | None = None,
        viewport: Viewport | None = None,
        time_source: Callable[[], float] | None = None,
        background: Color = (0, 0, 0),
    ) -> None:
        self._clock = Clock(fps, time_source)
        self._world = World()
        self._viewport = viewport if viewport is not None else Viewport(640, 480)
        self._background = background
        self._systems: list[System] = []
        self._renderers: list[Renderer] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._resize_hooks: list[Hook] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def add_renderer(self, renderer: Renderer) -> None:
        self._renderers.append(renderer)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def on_resize(self, hook: Hook) -> None:
        self._resize_hooks.append(hook)

    def context(self) -> FrameContext:
        return self._clock.context(self._viewport, self.request_stop, self._rng)

    def resize(self, width: int, height: int) -> None:
        viewport = Viewport(width, height)
        if viewport == self._viewport:
            return
        logger.debug("viewport %dx%d -> %dx%d", self._viewport.width,
                     self._viewport.height, width, height)
        self._viewport = viewport
        ctx = self.context()
        for hook in self._resize_hooks:
            hook(self._world, ctx)

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> list[Primitive]:
        self._clock.advance()
        ctx = self.context()
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

        frame: list[Primitive] = [Clear(self._background)]
        for renderer in self._renderers:
            frame.extend(renderer(self._world, ctx))
        return frame

    def step(self) -> list[Primitive]:
        self._stop_requested = False
        return self._tick()

    def start(self) -> None:
        """Run start hooks. Called by run(), run_forever() and window hosts."""
        self._stop_requested = False
        logger.debug("engine start (fps=%d, seed=%d)", self._clock.fps, self._seed)
        ctx = self.context()
        for hook in self._start_hooks:
            hook(self._world, ctx)

    def stop(self) -> None:
        ctx = self.context()
        for hook in self._stop_hooks:
            hook(self._world, ctx)
        logger.debug("engine stop at frame %d", self._clock.frame_number)

    def run(self, n: int, present: Present | None = None) -> None:
        self.start()
        for _ in range(n):
            frame = self._tick()
            if present is not None:
                present(frame)
            if self._stop_requested:
                break
        self.stop()

    def run_forever(self, present: Present | None = None) -> None:
        self.start()
        dt = 1.0 / self._clock.fps
        while not self._stop_requested:
            start = time.monotonic()
            frame = self._tick()
            if present is not None:
                present(frame)
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
        self.stop()
