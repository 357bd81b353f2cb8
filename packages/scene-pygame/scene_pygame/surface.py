"""Execute scene draw primitives on a pygame surface."""
from __future__ import annotations

import logging
from typing import Iterable

import pygame

from scene.draw import (
    Clear,
    Color,
    ColorStop,
    Ellipse,
    GradientRect,
    Glyph,
    Line,
    Point,
    Polygon,
    Primitive,
    Rect,
    is_finite,
)
from scene.font import glyph_pixels

logger = logging.getLogger(__name__)


def _alpha_byte(alpha: float) -> int:
    return max(0, min(255, round(alpha * 255)))


def interpolate_stops(stops: tuple[ColorStop, ...], t: float) -> tuple[Color, float]:
    """Colour and alpha at relative offset ``t`` along ordered gradient stops."""
    if not stops:
        raise ValueError("gradient needs at least one stop")
    if t <= stops[0].offset:
        return stops[0].color, stops[0].alpha
    for lo, hi in zip(stops, stops[1:]):
        if t <= hi.offset:
            span = hi.offset - lo.offset
            k = 0.0 if span <= 0 else (t - lo.offset) / span
            color = tuple(
                round(a + (b - a) * k) for a, b in zip(lo.color, hi.color)
            )
            return (color[0], color[1], color[2]), lo.alpha + (hi.alpha - lo.alpha) * k
    return stops[-1].color, stops[-1].alpha


class PygameSurface:
    """Host surface: draws each primitive's logical effect with pygame."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def present(self, primitives: Iterable[Primitive]) -> int:
        """Draw primitives in order; returns how many were skipped as degenerate."""
        skipped = 0
        for prim in primitives:
            if not is_finite(prim):
                logger.debug("skipping non-finite %s", type(prim).__name__)
                skipped += 1
                continue
            self.draw(prim)
        return skipped

    def draw(self, prim: Primitive) -> None:
        if isinstance(prim, Clear):
            self._surface.fill(prim.color)
        elif isinstance(prim, Rect):
            self._draw_rect(prim)
        elif isinstance(prim, GradientRect):
            self._draw_gradient(prim)
        elif isinstance(prim, Line):
            pygame.draw.line(
                self._surface, prim.color, (prim.x1, prim.y1), (prim.x2, prim.y2), prim.width
            )
        elif isinstance(prim, Point):
            self._draw_point(prim)
        elif isinstance(prim, Polygon):
            if len(prim.points) >= 3:
                pygame.draw.polygon(self._surface, prim.color, prim.points)
        elif isinstance(prim, Ellipse):
            self._draw_ellipse(prim)
        elif isinstance(prim, Glyph):
            self._draw_glyph(prim)
        else:
            raise TypeError(f"Unsupported primitive {type(prim).__name__}")

    def _blend(self, layer: pygame.Surface, x: float, y: float) -> None:
        self._surface.blit(layer, (round(x), round(y)))

    def _draw_rect(self, prim: Rect) -> None:
        w, h = round(prim.width), round(prim.height)
        if w <= 0 or h <= 0:
            return
        if prim.alpha >= 1.0:
            pygame.draw.rect(self._surface, prim.color, (round(prim.x), round(prim.y), w, h))
            return
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        layer.fill((*prim.color, _alpha_byte(prim.alpha)))
        self._blend(layer, prim.x, prim.y)

    def _draw_gradient(self, prim: GradientRect) -> None:
        w, h = round(prim.width), round(prim.height)
        if w <= 0 or h <= 0:
            return
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        for row in range(h):
            color, alpha = interpolate_stops(prim.stops, (row + 0.5) / h)
            pygame.draw.line(layer, (*color, _alpha_byte(alpha)), (0, row), (w - 1, row))
        self._blend(layer, prim.x, prim.y)

    def _draw_point(self, prim: Point) -> None:
        radius = prim.size / 2
        if radius < 1.0:
            ox, oy = round(prim.x), round(prim.y)
            if prim.alpha < 1.0:
                layer = pygame.Surface((1, 1), pygame.SRCALPHA)
                layer.fill((*prim.color, _alpha_byte(prim.alpha)))
                self._blend(layer, ox, oy)
            else:
                pygame.draw.rect(self._surface, prim.color, (ox, oy, 1, 1))
            return
        if prim.alpha >= 1.0:
            pygame.draw.circle(self._surface, prim.color, (prim.x, prim.y), radius)
            return
        size = int(radius * 2) + 2
        layer = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(layer, (*prim.color, _alpha_byte(prim.alpha)), (size / 2, size / 2), radius)
        self._blend(layer, prim.x - size / 2, prim.y - size / 2)

    def _draw_ellipse(self, prim: Ellipse) -> None:
        w, h = round(prim.rx * 2), round(prim.ry * 2)
        if w <= 0 or h <= 0:
            return
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.ellipse(layer, (*prim.color, _alpha_byte(prim.alpha)), (0, 0, w, h))
        self._blend(layer, prim.x - prim.rx, prim.y - prim.ry)

    def _draw_glyph(self, prim: Glyph) -> None:
        s = prim.scale
        ox, oy = round(prim.x), round(prim.y)
        for col, row in glyph_pixels(prim.char):
            pygame.draw.rect(self._surface, prim.color, (ox + col * s, oy + row * s, s, s))
