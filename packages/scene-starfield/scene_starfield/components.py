"""Star component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Star:
    """A point drifting right. ``speed`` is fixed by its layer at creation."""

    layer: int
    x: float
    y: float
    speed: float
    brightness: float
