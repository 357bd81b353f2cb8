"""Copper bar configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CopperConfig:
    """Immutable constants for the copper bars.

    Attributes:
        count: Number of bars.
        bar_height: Bar height in pixels.
        hue_step: Degrees added to every bar's hue each frame.
        base_speed: Angular speed of the first bar in radians per second.
        speed_step: Extra angular speed per layer index.
        swing: Multiplier on the ``height - bar_height`` amplitude.
        saturation: HSL saturation of the bar body.
        lightness: HSL lightness of the bar body.
        shine_lightness: HSL lightness of the centre stripe.
        shine_height: Centre stripe height in pixels.
    """

    count: int = 8
    bar_height: float = 40.0
    hue_step: float = 0.5
    base_speed: float = 1.0
    speed_step: float = 0.15
    swing: float = 1.0
    saturation: float = 1.0
    lightness: float = 0.5
    shine_lightness: float = 0.85
    shine_height: float = 2.0

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError("count must be positive")
        if self.bar_height <= 0:
            raise ValueError("bar_height must be positive")
