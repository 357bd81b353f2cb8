"""Cube renderer: strokes every edge with two visible endpoints."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from scene.draw import Line, Primitive

from scene_cube.components import CUBE_EDGES, Cube
from scene_cube.config import CubeConfig
from scene_cube.systems import transform_cube

if TYPE_CHECKING:
    from scene import FrameContext, Viewport, World


def render_cube(cube: Cube, config: CubeConfig, viewport: Viewport) -> list[Primitive]:
    points = transform_cube(cube, config, viewport)
    lines: list[Primitive] = []
    for a, b in CUBE_EDGES:
        pa, pb = points[a], points[b]
        if pa is None or pb is None:
            continue
        lines.append(Line(pa[0], pa[1], pb[0], pb[1], cube.color, config.line_width))
    return lines


def make_cube_renderer(
    config: CubeConfig | None = None,
) -> Callable[[World, FrameContext], list[Primitive]]:
    cfg = config if config is not None else CubeConfig()

    def cube_renderer(world: World, ctx: FrameContext) -> list[Primitive]:
        out: list[Primitive] = []
        for _, (cube,) in world.query(Cube):
            out.extend(render_cube(cube, cfg, ctx.viewport))
        return out

    return cube_renderer
