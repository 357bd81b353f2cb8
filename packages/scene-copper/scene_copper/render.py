"""Copper bar renderer: three-stop gradient body plus a centre shine."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from scene.draw import ColorStop, GradientRect, Primitive, Rect
from scene_math import hsl

from scene_copper.components import Bar
from scene_copper.config import CopperConfig

if TYPE_CHECKING:
    from scene import FrameContext, Viewport, World

STOP_ALPHAS: tuple[tuple[float, float], ...] = ((0.0, 0.2), (0.5, 0.8), (1.0, 0.2))


def render_bar(bar: Bar, config: CopperConfig, viewport: Viewport) -> list[Primitive]:
    color = hsl(bar.hue, config.saturation, config.lightness)
    top = bar.y - config.bar_height / 2
    stops = tuple(ColorStop(offset, color, alpha) for offset, alpha in STOP_ALPHAS)
    shine = hsl(bar.hue, config.saturation, config.shine_lightness)
    return [
        GradientRect(0.0, top, viewport.width, config.bar_height, stops),
        Rect(
            0.0,
            bar.y - config.shine_height / 2,
            viewport.width,
            config.shine_height,
            shine,
            0.9,
        ),
    ]


def make_copper_renderer(
    config: CopperConfig | None = None,
) -> Callable[[World, FrameContext], list[Primitive]]:
    cfg = config if config is not None else CopperConfig()

    def copper_renderer(world: World, ctx: FrameContext) -> list[Primitive]:
        bars = sorted((bar for _, (bar,) in world.query(Bar)), key=lambda b: b.layer)
        out: list[Primitive] = []
        for bar in bars:
            out.extend(render_bar(bar, cfg, ctx.viewport))
        return out

    return copper_renderer
