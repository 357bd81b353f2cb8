"""Ball component and derived shadow value."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Ball:
    """Ball centre, vertical velocity (positive is down) and spin in degrees."""

    x: float
    y: float
    radius: float
    vy: float = 0.0
    rotation: float = 0.0


@dataclass(frozen=True)
class Shadow:
    """Derived each frame from the ball. Not a component."""

    x: float
    y: float
    rx: float
    ry: float
    alpha: float
