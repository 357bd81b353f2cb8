"""Cube effect configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CubeConfig:
    """Immutable constants for the rotating wireframe cubes.

    Attributes:
        speed_x: X-axis angular speed in radians per second.
        speed_y: Y-axis angular speed in radians per second.
        speed_z: Z-axis angular speed in radians per second.
        focal_distance: Eye distance used by the perspective divide.
        scale_ratio: Global scale as a fraction of the shorter viewport side.
        line_width: Edge stroke width in pixels.
    """

    speed_x: float = 0.8
    speed_y: float = 1.2
    speed_z: float = 0.4
    focal_distance: float = 4.0
    scale_ratio: float = 0.3
    line_width: int = 1

    def __post_init__(self) -> None:
        if self.focal_distance <= 0:
            raise ValueError("focal_distance must be positive")
        if self.scale_ratio <= 0:
            raise ValueError("scale_ratio must be positive")
