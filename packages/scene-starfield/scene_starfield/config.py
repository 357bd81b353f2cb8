"""Starfield configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StarfieldConfig:
    """Immutable constants for the parallax starfield.

    Attributes:
        layers: Number of parallax layers; higher index is nearer and faster.
        density: Stars per layer per square pixel of viewport.
        base_speed: Speed of layer 0 in pixels per frame.
        brightness_min: Lower bound of a star's random brightness.
        brightness_max: Upper bound of a star's random brightness.
        size_step: Extra dot diameter per layer index.
        color: Star colour at brightness 1.
    """

    layers: int = 5
    density: float = 50 / (320 * 256)
    base_speed: float = 0.5
    brightness_min: float = 0.3
    brightness_max: float = 1.0
    size_step: float = 0.5
    color: tuple[int, int, int] = (255, 255, 255)

    def __post_init__(self) -> None:
        if self.layers <= 0:
            raise ValueError("layers must be positive")
        if self.density <= 0:
            raise ValueError("density must be positive")
        if not 0.0 <= self.brightness_min <= self.brightness_max <= 1.0:
            raise ValueError("brightness range must satisfy 0 <= min <= max <= 1")
