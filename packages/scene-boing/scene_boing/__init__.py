"""scene-boing - Bouncing checkered ball with damped floor/ceiling physics."""
from __future__ import annotations

from scene_boing.components import Ball, Shadow
from scene_boing.config import BoingConfig
from scene_boing.render import checker_parity, make_boing_renderer, render_ball, render_grid
from scene_boing.systems import (
    make_boing_resize_hook,
    make_boing_system,
    shadow_for,
    spawn_ball,
    step_ball,
)

__all__ = [
    "Ball",
    "BoingConfig",
    "Shadow",
    "checker_parity",
    "make_boing_renderer",
    "make_boing_resize_hook",
    "make_boing_system",
    "render_ball",
    "render_grid",
    "shadow_for",
    "spawn_ball",
    "step_ball",
]
