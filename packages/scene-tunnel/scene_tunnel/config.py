"""Dot tunnel configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TunnelConfig:
    """Immutable constants for the dot tunnel.

    Attributes:
        rings: Number of rings in flight.
        points_per_ring: Dots per ring, evenly spaced in angle.
        speed: Depth travelled per frame (depth runs over (0, 1]).
        spin: Ring rotation in radians per frame.
        min_radius: Radius of a ring at the far plane limit, in pixels.
        max_radius_ratio: Largest radius as a fraction of the shorter viewport side.
        move_offset: Bias added to the perspective denominator.
        wobble_amplitude: Relative size of the radial wobble.
        wobble_speed: Wobble angular speed in radians per second.
        wobble_frequency: Wobble phase change per unit of depth.
        point_size: Dot diameter at depth 0.
        color: Dot colour at full intensity.
        lookup_table: Use a 256-entry sine table instead of native trig.
    """

    rings: int = 16
    points_per_ring: int = 32
    speed: float = 0.005
    spin: float = 0.01
    min_radius: float = 10.0
    max_radius_ratio: float = 0.9
    move_offset: float = 0.0
    wobble_amplitude: float = 0.05
    wobble_speed: float = 2.0
    wobble_frequency: float = 6.0
    point_size: float = 4.0
    color: tuple[int, int, int] = (120, 220, 255)
    lookup_table: bool = False

    def __post_init__(self) -> None:
        if self.rings <= 0 or self.points_per_ring <= 0:
            raise ValueError("rings and points_per_ring must be positive")
        if not 0.0 < self.speed < 1.0:
            raise ValueError("speed must be in (0, 1)")
        if self.move_offset <= -1.0:
            raise ValueError("move_offset must be greater than -1")
