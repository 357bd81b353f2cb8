"""Cube component and geometry tables."""
from __future__ import annotations

from dataclasses import dataclass

CUBE_VERTICES: tuple[tuple[float, float, float], ...] = (
    (-1.0, -1.0, -1.0),
    (1.0, -1.0, -1.0),
    (1.0, 1.0, -1.0),
    (-1.0, 1.0, -1.0),
    (-1.0, -1.0, 1.0),
    (1.0, -1.0, 1.0),
    (1.0, 1.0, 1.0),
    (-1.0, 1.0, 1.0),
)

# Front face, back face, then the four connecting edges.
CUBE_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)


@dataclass
class Cube:
    """One wireframe cube. Angles are radians in [0, 2π); phase is constant."""

    size: float
    phase: float
    color: tuple[int, int, int]
    angle_x: float = 0.0
    angle_y: float = 0.0
    angle_z: float = 0.0
