"""scene-tunnel - Perspective dot tunnel with wrapping ring depths."""
from __future__ import annotations

from scene_tunnel.components import Ring
from scene_tunnel.config import TunnelConfig
from scene_tunnel.render import make_tunnel_renderer, render_ring
from scene_tunnel.systems import (
    advance_ring,
    intensity,
    make_tunnel_system,
    point_size,
    ring_points,
    ring_radius,
    spawn_rings,
)

__all__ = [
    "Ring",
    "TunnelConfig",
    "advance_ring",
    "intensity",
    "make_tunnel_renderer",
    "make_tunnel_system",
    "point_size",
    "render_ring",
    "ring_points",
    "ring_radius",
    "spawn_rings",
]
