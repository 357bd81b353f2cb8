"""Scroll offset update and per-character wave layout."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from scene.font import GLYPH_SIZE
from scene_math import hsl, trig_functions, wrap

from scene_scroller.components import Scroller
from scene_scroller.config import DEFAULT_MESSAGE, ScrollerConfig

if TYPE_CHECKING:
    from scene import EntityId, FrameContext, Viewport, World


def message_width(scroller: Scroller, config: ScrollerConfig) -> float:
    return len(scroller.message) * config.char_spacing


def advance_scroller(scroller: Scroller, config: ScrollerConfig) -> None:
    """Scroll left; once the whole message is off the left edge, wrap it."""
    scroller.offset -= config.speed
    width = message_width(scroller, config)
    if width > 0 and scroller.offset <= -width:
        scroller.offset += width


def char_y(x: float, elapsed: float, config: ScrollerConfig, viewport: Viewport) -> float:
    """Wave centre of a character at horizontal position ``x``."""
    sin, _ = trig_functions(config.lookup_table)
    center = viewport.height * config.center_ratio
    return center + sin(x * config.frequency + elapsed * config.wave_speed) * config.amplitude


def char_color(index: int, elapsed: float, config: ScrollerConfig) -> tuple[int, int, int]:
    hue = wrap(elapsed * config.hue_speed + index * config.hue_per_char, 360.0)
    return hsl(hue, config.saturation, config.lightness)


def visible_chars(
    scroller: Scroller, config: ScrollerConfig, viewport: Viewport
) -> list[tuple[int, str, float]]:
    """(index, char, x) for every on-screen character.

    The message repeats every ``message_width`` pixels from ``offset``
    rightwards, so the copy that follows covers the wrap seamlessly.
    """
    width = message_width(scroller, config)
    if width <= 0:
        return []
    glyph_width = GLYPH_SIZE * config.glyph_scale
    out: list[tuple[int, str, float]] = []
    base = scroller.offset
    while base < viewport.width:
        for index, ch in enumerate(scroller.message):
            x = base + index * config.char_spacing
            if x + glyph_width <= 0 or x >= viewport.width:
                continue
            out.append((index, ch, x))
        base += width
    return out


def spawn_scroller(
    world: World,
    viewport: Viewport,
    message: str = DEFAULT_MESSAGE,
) -> EntityId:
    """Spawn a scroller whose first character starts at the right edge."""
    eid = world.spawn()
    world.attach(eid, Scroller(message=message, offset=float(viewport.width)))
    return eid


def make_scroller_system(
    config: ScrollerConfig | None = None,
) -> Callable[[World, FrameContext], None]:
    cfg = config if config is not None else ScrollerConfig()

    def scroller_system(world: World, ctx: FrameContext) -> None:
        for _, (scroller,) in world.query(Scroller):
            advance_scroller(scroller, cfg)

    return scroller_system
