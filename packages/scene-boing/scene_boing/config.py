"""Boing ball configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoingConfig:
    """Immutable constants for the bouncing checkered ball.

    Physics values are per frame: ``gravity`` is added to the velocity and the
    velocity to the position once per tick.

    Attributes:
        gravity: Downward acceleration in pixels per frame squared.
        damping: Velocity multiplier applied on every bounce, in (0, 1).
        max_velocity: Terminal downward speed, or None for no limit.
        spin: Visual rotation in degrees per frame.
        bands: Checker columns around the sphere.
        rings: Checker rows from pole to pole.
        tilt: Axis tilt in degrees.
        radius_ratio: Ball radius as a fraction of the shorter viewport side.
        shadow_min_scale: Smallest shadow scale, reached when the ball is high.
        grid_spacing: Backdrop grid cell size in pixels; 0 disables the grid.
    """

    gravity: float = 0.2
    damping: float = 0.95
    max_velocity: float | None = None
    spin: float = 2.0
    bands: int = 16
    rings: int = 8
    tilt: float = 17.0
    radius_ratio: float = 0.12
    shadow_min_scale: float = 0.2
    grid_spacing: int = 40
    color_a: tuple[int, int, int] = (220, 30, 30)
    color_b: tuple[int, int, int] = (240, 240, 240)
    shadow_color: tuple[int, int, int] = (0, 0, 0)
    grid_color: tuple[int, int, int] = (150, 60, 190)

    def __post_init__(self) -> None:
        if not 0.0 < self.damping < 1.0:
            raise ValueError("damping must be strictly between 0 and 1")
        if self.max_velocity is not None and self.max_velocity <= 0:
            raise ValueError("max_velocity must be positive")
        if self.bands < 2 or self.rings < 2:
            raise ValueError("bands and rings must be at least 2")
        if not 0.0 < self.radius_ratio < 0.5:
            raise ValueError("radius_ratio must be in (0, 0.5)")
        if not 0.0 < self.shadow_min_scale <= 1.0:
            raise ValueError("shadow_min_scale must be in (0, 1]")
