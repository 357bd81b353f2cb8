"""Tunnel ring component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Ring:
    """Depth in (0, 1] (small is near) and rotation in [0, 2π)."""

    z: float
    angle: float = 0.0
