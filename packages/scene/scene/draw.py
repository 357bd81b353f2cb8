"""Draw primitives issued by renderers and executed by a host surface.

Colours are ``(r, g, b)`` ints in 0..255. ``alpha`` is a blend factor in
[0, 1]; how it is blended is up to the host.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Union

Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Clear:
    color: Color


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    color: Color
    alpha: float = 1.0


@dataclass(frozen=True, slots=True)
class ColorStop:
    offset: float
    color: Color
    alpha: float = 1.0


@dataclass(frozen=True, slots=True)
class GradientRect:
    """Rectangle filled with a vertical linear gradient through ordered stops."""

    x: float
    y: float
    width: float
    height: float
    stops: tuple[ColorStop, ...]


@dataclass(frozen=True, slots=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Color
    width: int = 1


@dataclass(frozen=True, slots=True)
class Point:
    """Filled dot centred on (x, y); ``size`` is the diameter."""

    x: float
    y: float
    size: float
    color: Color
    alpha: float = 1.0


@dataclass(frozen=True, slots=True)
class Polygon:
    points: tuple[tuple[float, float], ...]
    color: Color


@dataclass(frozen=True, slots=True)
class Ellipse:
    x: float
    y: float
    rx: float
    ry: float
    color: Color
    alpha: float = 1.0


@dataclass(frozen=True, slots=True)
class Glyph:
    """One bitmap-font character with its top-left corner at (x, y)."""

    char: str
    x: float
    y: float
    color: Color
    scale: int = 1


Primitive = Union[Clear, Rect, GradientRect, Line, Point, Polygon, Ellipse, Glyph]


def is_finite(primitive: Primitive) -> bool:
    """True when every geometric coordinate of the primitive is finite."""
    if isinstance(primitive, Polygon):
        return all(math.isfinite(c) for pt in primitive.points for c in pt)
    for f in fields(primitive):
        value = getattr(primitive, f.name)
        if isinstance(value, float) and not math.isfinite(value):
            return False
    return True
