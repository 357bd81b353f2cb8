"""scene-copper - Sine-driven copper bars with cycling hues."""
from __future__ import annotations

from scene_copper.components import Bar
from scene_copper.config import CopperConfig
from scene_copper.render import STOP_ALPHAS, make_copper_renderer, render_bar
from scene_copper.systems import advance_bar, bar_position, make_copper_system, spawn_bars

__all__ = [
    "Bar",
    "CopperConfig",
    "STOP_ALPHAS",
    "advance_bar",
    "bar_position",
    "make_copper_renderer",
    "make_copper_system",
    "render_bar",
    "spawn_bars",
]
