"""Tests for scroll wrapping, wave layout and glyph output."""
from __future__ import annotations

import math

import pytest

from scene import Engine, Viewport
from scene.draw import Glyph
from scene_scroller import (
    DEFAULT_MESSAGE,
    Scroller,
    ScrollerConfig,
    advance_scroller,
    char_color,
    char_y,
    make_scroller_renderer,
    make_scroller_system,
    message_width,
    render_scroller,
    spawn_scroller,
    visible_chars,
)

VIEWPORT = Viewport(320, 256)


# ── Scrolling ──────────────────────────────────────────────────


class TestAdvance:
    def test_scrolls_left_by_speed(self) -> None:
        scroller = Scroller(message="HELLO", offset=100.0)
        advance_scroller(scroller, ScrollerConfig(speed=2.0))
        assert scroller.offset == 98.0

    def test_wraps_once_fully_off_screen(self) -> None:
        config = ScrollerConfig(speed=2.0, char_spacing=16.0)
        scroller = Scroller(message="HELLO", offset=-79.0)
        advance_scroller(scroller, config)
        assert scroller.offset == pytest.approx(-81.0 + 80.0)

    def test_offset_stays_bounded(self) -> None:
        config = ScrollerConfig(speed=3.0)
        scroller = Scroller(message="ABC", offset=320.0)
        width = message_width(scroller, config)
        for _ in range(1000):
            advance_scroller(scroller, config)
            assert -width < scroller.offset <= 320.0

    def test_empty_message_never_wraps(self) -> None:
        scroller = Scroller(message="", offset=0.0)
        advance_scroller(scroller, ScrollerConfig())
        assert scroller.offset == -2.0


# ── Layout ─────────────────────────────────────────────────────


class TestLayout:
    def test_wave_formula(self) -> None:
        config = ScrollerConfig(amplitude=40.0, frequency=0.015, wave_speed=3.0)
        expected = 128 + math.sin(50.0 * 0.015 + 2.0 * 3.0) * 40.0
        assert char_y(50.0, 2.0, config, VIEWPORT) == pytest.approx(expected)

    def test_wave_stays_within_amplitude(self) -> None:
        config = ScrollerConfig(amplitude=40.0)
        for x in range(0, 320, 7):
            assert abs(char_y(float(x), 1.3, config, VIEWPORT) - 128) <= 40.0

    def test_neighbouring_hues_differ(self) -> None:
        config = ScrollerConfig()
        assert char_color(0, 0.0, config) != char_color(1, 0.0, config)
        assert char_color(0, 0.0, config) != char_color(0, 1.0, config)

    def test_hue_cycles_with_time(self) -> None:
        config = ScrollerConfig(hue_speed=90.0)
        assert char_color(0, 0.0, config) == char_color(0, 4.0, config)

    def test_offscreen_characters_skipped(self) -> None:
        config = ScrollerConfig(char_spacing=16.0, glyph_scale=2)
        scroller = Scroller(message="A" * 100, offset=-40.0)
        chars = visible_chars(scroller, config, VIEWPORT)
        xs = [x for _, _, x in chars]
        assert min(xs) == -8.0
        assert max(xs) < 320
        assert [i for i, _, _ in chars] == list(range(2, 23))

    def test_message_tiles_across_wrap(self) -> None:
        config = ScrollerConfig(char_spacing=16.0)
        scroller = Scroller(message="AB", offset=-8.0)
        chars = visible_chars(scroller, config, VIEWPORT)
        xs = [x for _, _, x in chars]
        assert xs == sorted(xs)
        assert all(b - a == 16.0 for a, b in zip(xs, xs[1:]))
        assert [c for _, c, _ in chars[:4]] == ["A", "B", "A", "B"]

    def test_nothing_visible_before_entering(self) -> None:
        scroller = Scroller(message="HELLO", offset=320.0)
        assert visible_chars(scroller, ScrollerConfig(), VIEWPORT) == []


# ── Rendering ──────────────────────────────────────────────────


class TestRender:
    def test_spaces_are_not_drawn(self) -> None:
        scroller = Scroller(message="A B", offset=0.0)
        glyphs = render_scroller(scroller, ScrollerConfig(), VIEWPORT, 0.0)
        assert [g.char for g in glyphs][:2] == ["A", "B"]
        assert all(g.char != " " for g in glyphs)

    def test_glyph_centred_on_wave(self) -> None:
        config = ScrollerConfig(glyph_scale=2)
        scroller = Scroller(message="A", offset=10.0)
        glyph = render_scroller(scroller, config, VIEWPORT, 0.5)[0]
        assert glyph.x == 10.0
        assert glyph.y + 8 == pytest.approx(char_y(10.0, 0.5, config, VIEWPORT))
        assert glyph.scale == 2

    def test_unsupported_characters_pass_through(self) -> None:
        scroller = Scroller(message="~", offset=0.0)
        glyphs = render_scroller(scroller, ScrollerConfig(), VIEWPORT, 0.0)
        assert glyphs[0].char == "~"


# ── Effect ─────────────────────────────────────────────────────


class TestScrollerEffect:
    def test_spawn_starts_at_right_edge(self) -> None:
        engine = Engine(viewport=VIEWPORT)
        eid = spawn_scroller(engine.world, engine.viewport)
        scroller = engine.world.get(eid, Scroller)
        assert scroller.offset == 320.0
        assert scroller.message == DEFAULT_MESSAGE

    def test_text_enters_from_the_right(self) -> None:
        engine = Engine(viewport=VIEWPORT)
        spawn_scroller(engine.world, engine.viewport, message="HELLO")
        engine.add_system(make_scroller_system())
        engine.add_renderer(make_scroller_renderer())
        frames = [engine.step() for _ in range(20)]
        glyphs = [p for p in frames[-1] if isinstance(p, Glyph)]
        assert glyphs[0].char == "H"
        assert glyphs[0].x == 280.0

    def test_config_validation(self) -> None:
        with pytest.raises(ValueError):
            ScrollerConfig(char_spacing=0.0)
        with pytest.raises(ValueError):
            ScrollerConfig(glyph_scale=0)
