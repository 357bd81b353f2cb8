"""Sinus scroller configuration."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MESSAGE = (
    "    WELCOME TO THE CLASSIC SINUS SCROLLER DEMO... "
    "GREETINGS TO ALL OLD SCHOOL DEMO MAKERS! "
    "PUSH YOUR PIXELS TO THE LIMIT!     "
)


@dataclass(frozen=True)
class ScrollerConfig:
    """Immutable constants for the sine-wave text scroller.

    Attributes:
        speed: Pixels scrolled left per frame.
        char_spacing: Horizontal distance between character origins.
        amplitude: Wave height in pixels.
        frequency: Wave phase change per pixel of x.
        wave_speed: Wave phase change per second.
        hue_speed: Hue change per second, in degrees.
        hue_per_char: Hue offset between neighbouring characters.
        glyph_scale: Pixel size of one font dot.
        center_ratio: Wave centre line as a fraction of viewport height.
        lookup_table: Use a 256-entry sine table instead of native trig.
    """

    speed: float = 2.0
    char_spacing: float = 16.0
    amplitude: float = 40.0
    frequency: float = 0.015
    wave_speed: float = 3.0
    hue_speed: float = 90.0
    hue_per_char: float = 15.0
    glyph_scale: int = 2
    center_ratio: float = 0.5
    saturation: float = 1.0
    lightness: float = 0.6
    lookup_table: bool = False

    def __post_init__(self) -> None:
        if self.char_spacing <= 0:
            raise ValueError("char_spacing must be positive")
        if self.glyph_scale <= 0:
            raise ValueError("glyph_scale must be positive")
