"""Lookup-table trigonometry, as used by fixed-point demo code.

Angles are radians; the table quantises them to ``size`` steps per turn.
"""
from __future__ import annotations

import functools
import math
from typing import Callable

from scene_math.angles import TAU


class SineTable:
    def __init__(self, size: int = 256) -> None:
        if size < 4 or size % 4:
            raise ValueError("table size must be a positive multiple of 4")
        self._size = size
        self._values = tuple(math.sin(TAU * i / size) for i in range(size))

    @property
    def size(self) -> int:
        return self._size

    def index(self, angle: float) -> int:
        return round(angle / TAU * self._size) % self._size

    def sin(self, angle: float) -> float:
        return self._values[self.index(angle)]

    def cos(self, angle: float) -> float:
        return self._values[(self.index(angle) + self._size // 4) % self._size]


@functools.lru_cache(maxsize=None)
def _shared_table(size: int) -> SineTable:
    return SineTable(size)


def trig_functions(
    lookup_table: bool, size: int = 256
) -> tuple[Callable[[float], float], Callable[[float], float]]:
    """Return a ``(sin, cos)`` pair, native or table-driven."""
    if not lookup_table:
        return math.sin, math.cos
    table = _shared_table(size)
    return table.sin, table.cos
