"""Copper bar component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Bar:
    """A horizontal bar. ``hue`` accumulates; ``y`` is recomputed from time."""

    layer: int
    speed: float
    phase: float
    hue: float
    y: float = 0.0
