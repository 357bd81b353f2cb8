"""Tunnel renderer: far rings first, dots shrink and dim with depth."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from scene.draw import Point, Primitive
from scene_math import shade

from scene_tunnel.components import Ring
from scene_tunnel.config import TunnelConfig
from scene_tunnel.systems import intensity, point_size, ring_points

if TYPE_CHECKING:
    from scene import FrameContext, Viewport, World


def render_ring(
    ring: Ring, config: TunnelConfig, viewport: Viewport, elapsed: float
) -> list[Primitive]:
    size = point_size(ring.z, config)
    color = shade(config.color, intensity(ring.z))
    return [
        Point(x, y, size, color)
        for x, y in ring_points(ring, config, viewport, elapsed)
    ]


def make_tunnel_renderer(
    config: TunnelConfig | None = None,
) -> Callable[[World, FrameContext], list[Primitive]]:
    cfg = config if config is not None else TunnelConfig()

    def tunnel_renderer(world: World, ctx: FrameContext) -> list[Primitive]:
        rings = sorted((ring for _, (ring,) in world.query(Ring)), key=lambda r: -r.z)
        out: list[Primitive] = []
        for ring in rings:
            out.extend(render_ring(ring, cfg, ctx.viewport, ctx.elapsed))
        return out

    return tunnel_renderer
