"""Colour helpers: HSL for the canvas-style effects, 12-bit for retro palettes."""
from __future__ import annotations

import colorsys

from scene_math.angles import wrap

RGB = tuple[int, int, int]


def _to_byte(channel: float) -> int:
    return max(0, min(255, round(channel * 255)))


def hsl(hue: float, saturation: float, lightness: float) -> RGB:
    """Hue in degrees (wrapped), saturation and lightness in [0, 1]."""
    h = wrap(hue, 360.0) / 360.0
    s = min(max(saturation, 0.0), 1.0)
    l = min(max(lightness, 0.0), 1.0)
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (_to_byte(r), _to_byte(g), _to_byte(b))


def rgb12(value: int) -> RGB:
    """Expand a 0x0RGB word (4 bits per channel) to 8-bit channels."""
    value &= 0x0FFF
    r = (value >> 8) & 0xF
    g = (value >> 4) & 0xF
    b = value & 0xF
    return (r * 17, g * 17, b * 17)


def shade(color: RGB, factor: float) -> RGB:
    """Scale each channel by ``factor``, clamped to 0..255."""
    return (
        max(0, min(255, round(color[0] * factor))),
        max(0, min(255, round(color[1] * factor))),
        max(0, min(255, round(color[2] * factor))),
    )
