"""Boing ball renderer: backdrop grid, floor shadow, checkered sphere."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable

from scene.draw import Ellipse, Line, Polygon, Primitive
from scene_math import TAU, rotate_z, vec

from scene_boing.components import Ball
from scene_boing.config import BoingConfig
from scene_boing.systems import shadow_for

if TYPE_CHECKING:
    from scene import FrameContext, Viewport, World


def checker_parity(u: float, v: float) -> int:
    """0 or 1 for the checker square containing surface coordinate (u, v)."""
    return (math.floor(u) + math.floor(v)) % 2


def _sphere_point(lat: float, lon: float, tilt: float) -> tuple[float, float, float]:
    p = (math.cos(lat) * math.sin(lon), math.sin(lat), math.cos(lat) * math.cos(lon))
    return rotate_z(p, tilt)


def render_grid(config: BoingConfig, viewport: Viewport) -> list[Primitive]:
    if config.grid_spacing <= 0:
        return []
    lines: list[Primitive] = []
    step = config.grid_spacing
    for x in range(0, viewport.width + 1, step):
        lines.append(Line(x, 0, x, viewport.height, config.grid_color))
    for y in range(0, viewport.height + 1, step):
        lines.append(Line(0, y, viewport.width, y, config.grid_color))
    return lines


def render_ball(ball: Ball, config: BoingConfig) -> list[Primitive]:
    """Front-facing checker patches; the spin shifts longitude so it rolls."""
    tilt = math.radians(config.tilt)
    spin = math.radians(ball.rotation)
    band = TAU / config.bands
    ring = math.pi / config.rings
    patches: list[Primitive] = []
    for j in range(config.rings):
        lat0 = -math.pi / 2 + j * ring
        lat1 = lat0 + ring
        for i in range(config.bands):
            lon0 = i * band + spin
            lon1 = lon0 + band
            corners = (
                _sphere_point(lat0, lon0, tilt),
                _sphere_point(lat0, lon1, tilt),
                _sphere_point(lat1, lon1, tilt),
                _sphere_point(lat1, lon0, tilt),
            )
            centre = vec.scale(
                vec.add(vec.add(corners[0], corners[1]), vec.add(corners[2], corners[3])),
                0.25,
            )
            if centre[2] <= 0.0:
                continue
            parity = checker_parity(i + 0.5, j + 0.5)
            color = config.color_a if parity == 0 else config.color_b
            points = tuple(
                (ball.x + c[0] * ball.radius, ball.y + c[1] * ball.radius)
                for c in corners
            )
            patches.append(Polygon(points, color))
    return patches


def make_boing_renderer(
    config: BoingConfig | None = None,
) -> Callable[[World, FrameContext], list[Primitive]]:
    cfg = config if config is not None else BoingConfig()

    def boing_renderer(world: World, ctx: FrameContext) -> list[Primitive]:
        out: list[Primitive] = render_grid(cfg, ctx.viewport)
        for _, (ball,) in world.query(Ball):
            shadow = shadow_for(ball, cfg, ctx.viewport)
            out.append(
                Ellipse(shadow.x, shadow.y, shadow.rx, shadow.ry, cfg.shadow_color, shadow.alpha)
            )
            out.extend(render_ball(ball, cfg))
        return out

    return boing_renderer
