"""Wrapping helpers that keep angles, hues and depths bounded."""
from __future__ import annotations

import math

TAU = 2.0 * math.pi


def wrap(value: float, period: float) -> float:
    """Wrap ``value`` into ``[0, period)``."""
    if period <= 0.0:
        raise ValueError("period must be positive")
    result = math.fmod(value, period)
    if result < 0.0:
        result += period
    # fmod of a tiny negative can round back up to the period itself.
    if result >= period:
        result = 0.0
    return result


def wrap_depth(z: float) -> float:
    """Wrap a normalised depth into ``(0, 1]``."""
    while z <= 0.0:
        z += 1.0
    while z > 1.0:
        z -= 1.0
    return z
