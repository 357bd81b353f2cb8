"""Frame clock: fixed-step or wall-clock driven."""

import logging
import random
from typing import Callable

from scene.types import FrameContext, Viewport

logger = logging.getLogger(__name__)


class Clock:
    def __init__(self, fps: int, time_source: Callable[[], float] | None = None) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._nominal_dt = 1.0 / fps
        self._dt = self._nominal_dt
        self._frame_number = 0
        self._elapsed = 0.0
        self._time_source = time_source
        self._last_reading: float | None = None

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self) -> int:
        self._frame_number += 1
        if self._time_source is None:
            self._elapsed = self._frame_number * self._nominal_dt
            return self._frame_number

        now = self._time_source()
        if self._last_reading is None:
            dt = self._nominal_dt
        else:
            dt = now - self._last_reading
            if dt < 0.0:
                logger.warning(
                    "time source ran backward by %.6fs at frame %d",
                    -dt,
                    self._frame_number,
                )
                dt = 0.0
        if self._last_reading is None or now > self._last_reading:
            self._last_reading = now
        self._dt = dt
        self._elapsed += dt
        return self._frame_number

    def context(
        self,
        viewport: Viewport,
        stop_fn: Callable[[], None],
        rng: random.Random,
    ) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self._elapsed,
            viewport=viewport,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number
        self._elapsed = frame_number * self._nominal_dt
        self._dt = self._nominal_dt
        self._last_reading = None
