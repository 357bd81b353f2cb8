"""Scroller renderer: one glyph per visible character, riding the wave."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from scene.draw import Glyph, Primitive
from scene.font import GLYPH_SIZE

from scene_scroller.components import Scroller
from scene_scroller.config import ScrollerConfig
from scene_scroller.systems import char_color, char_y, visible_chars

if TYPE_CHECKING:
    from scene import FrameContext, Viewport, World


def render_scroller(
    scroller: Scroller, config: ScrollerConfig, viewport: Viewport, elapsed: float
) -> list[Primitive]:
    half = GLYPH_SIZE * config.glyph_scale / 2
    glyphs: list[Primitive] = []
    for index, ch, x in visible_chars(scroller, config, viewport):
        if ch == " ":
            continue
        y = char_y(x, elapsed, config, viewport)
        glyphs.append(
            Glyph(ch, x, y - half, char_color(index, elapsed, config), config.glyph_scale)
        )
    return glyphs


def make_scroller_renderer(
    config: ScrollerConfig | None = None,
) -> Callable[[World, FrameContext], list[Primitive]]:
    cfg = config if config is not None else ScrollerConfig()

    def scroller_renderer(world: World, ctx: FrameContext) -> list[Primitive]:
        out: list[Primitive] = []
        for _, (scroller,) in world.query(Scroller):
            out.extend(render_scroller(scroller, cfg, ctx.viewport, ctx.elapsed))
        return out

    return scroller_renderer
