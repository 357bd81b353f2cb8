"""scene-starfield - Multi-layer parallax starfield."""
from __future__ import annotations

from scene_starfield.components import Star
from scene_starfield.config import StarfieldConfig
from scene_starfield.render import make_starfield_renderer, render_star, star_size
from scene_starfield.systems import (
    advance_star,
    layer_speed,
    make_starfield_resize_hook,
    make_starfield_system,
    populate,
    spawn_star,
    stars_per_layer,
)

__all__ = [
    "Star",
    "StarfieldConfig",
    "advance_star",
    "layer_speed",
    "make_starfield_renderer",
    "make_starfield_resize_hook",
    "make_starfield_system",
    "populate",
    "render_star",
    "spawn_star",
    "star_size",
    "stars_per_layer",
]
