"""scene-scroller - Horizontally scrolling text riding a travelling sine wave."""
from __future__ import annotations

from scene_scroller.components import Scroller
from scene_scroller.config import DEFAULT_MESSAGE, ScrollerConfig
from scene_scroller.render import make_scroller_renderer, render_scroller
from scene_scroller.systems import (
    advance_scroller,
    char_color,
    char_y,
    make_scroller_system,
    message_width,
    spawn_scroller,
    visible_chars,
)

__all__ = [
    "DEFAULT_MESSAGE",
    "Scroller",
    "ScrollerConfig",
    "advance_scroller",
    "char_color",
    "char_y",
    "make_scroller_renderer",
    "make_scroller_system",
    "message_width",
    "render_scroller",
    "spawn_scroller",
    "visible_chars",
]
