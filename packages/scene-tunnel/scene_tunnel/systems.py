"""Ring travel, perspective radius and dot placement for the tunnel."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from scene_math import TAU, trig_functions, wrap, wrap_depth

from scene_tunnel.components import Ring
from scene_tunnel.config import TunnelConfig

if TYPE_CHECKING:
    from scene import EntityId, FrameContext, Viewport, World


def advance_ring(ring: Ring, config: TunnelConfig) -> None:
    """Move toward the viewer; past the near plane, re-enter at the far plane."""
    ring.z = wrap_depth(ring.z - config.speed)
    ring.angle = wrap(ring.angle + config.spin, TAU)


def ring_radius(z: float, config: TunnelConfig, viewport: Viewport) -> float:
    max_radius = min(viewport.width, viewport.height) * config.max_radius_ratio
    return config.min_radius + (max_radius - config.min_radius) * (
        1.0 / (z + 1.0 + config.move_offset)
    )


def point_size(z: float, config: TunnelConfig) -> float:
    return max(1.0, config.point_size * (1.0 - z))


def intensity(z: float) -> float:
    """Brightness factor in [0.1, 1], falling with depth."""
    return max(0.1, 1.0 - z)


def ring_points(
    ring: Ring,
    config: TunnelConfig,
    viewport: Viewport,
    elapsed: float,
) -> list[tuple[float, float]]:
    sin, cos = trig_functions(config.lookup_table)
    cx, cy = viewport.center
    radius = ring_radius(ring.z, config, viewport)
    step = TAU / config.points_per_ring
    points: list[tuple[float, float]] = []
    for k in range(config.points_per_ring):
        a = ring.angle + k * step
        wobble = 1.0 + config.wobble_amplitude * sin(
            elapsed * config.wobble_speed + ring.z * config.wobble_frequency + k * step
        )
        r = radius * wobble
        points.append((cx + cos(a) * r, cy + sin(a) * r))
    return points


def spawn_rings(world: World, config: TunnelConfig | None = None) -> list[EntityId]:
    """Spawn rings at evenly spaced depths (i + 1) / n."""
    cfg = config if config is not None else TunnelConfig()
    eids: list[EntityId] = []
    for i in range(cfg.rings):
        eid = world.spawn()
        world.attach(eid, Ring(z=(i + 1) / cfg.rings))
        eids.append(eid)
    return eids


def make_tunnel_system(
    config: TunnelConfig | None = None,
) -> Callable[[World, FrameContext], None]:
    cfg = config if config is not None else TunnelConfig()

    def tunnel_system(world: World, ctx: FrameContext) -> None:
        for _, (ring,) in world.query(Ring):
            advance_ring(ring, cfg)

    return tunnel_system
