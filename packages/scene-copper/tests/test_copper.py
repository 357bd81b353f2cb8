"""Tests for copper bar motion, hue cycling and gradient output."""
from __future__ import annotations

import math

import pytest

from scene import Engine, Viewport
from scene.draw import GradientRect, Rect
from scene_copper import (
    STOP_ALPHAS,
    Bar,
    CopperConfig,
    advance_bar,
    bar_position,
    make_copper_renderer,
    make_copper_system,
    render_bar,
    spawn_bars,
)

VIEWPORT = Viewport(320, 256)


# ── Motion ─────────────────────────────────────────────────────


class TestMotion:
    def test_position_formula(self) -> None:
        bar = Bar(layer=0, speed=2.0, phase=0.5, hue=0.0)
        config = CopperConfig(bar_height=40.0)
        expected = math.sin(1.5 * 2.0 + 0.5) * (256 - 40) + 128
        assert bar_position(bar, config, 1.5, 256) == pytest.approx(expected)

    def test_swing_scales_amplitude(self) -> None:
        bar = Bar(layer=0, speed=1.0, phase=math.pi / 2, hue=0.0)
        full = bar_position(bar, CopperConfig(), 0.0, 256)
        half = bar_position(bar, CopperConfig(swing=0.5), 0.0, 256)
        assert full - 128 == pytest.approx(2 * (half - 128))

    def test_position_depends_only_on_elapsed(self) -> None:
        fast = Engine(fps=100, viewport=VIEWPORT)
        slow = Engine(fps=10, viewport=VIEWPORT)
        for engine in (fast, slow):
            spawn_bars(engine.world)
            engine.add_system(make_copper_system())
        fast.run(100)
        slow.run(10)
        ys_fast = [bar.y for _, (bar,) in fast.world.query(Bar)]
        ys_slow = [bar.y for _, (bar,) in slow.world.query(Bar)]
        assert ys_fast == pytest.approx(ys_slow)

    def test_bars_stay_within_swing(self) -> None:
        engine = Engine(fps=50, viewport=VIEWPORT)
        spawn_bars(engine.world)
        engine.add_system(make_copper_system())
        amplitude = 256 - CopperConfig().bar_height
        for _ in range(500):
            engine.step()
            for _, (bar,) in engine.world.query(Bar):
                assert abs(bar.y - 128) <= amplitude + 1e-9


# ── Hue ────────────────────────────────────────────────────────


class TestHue:
    def test_hue_wraps_past_360(self) -> None:
        bar = Bar(layer=0, speed=1.0, phase=0.0, hue=358.0)
        config = CopperConfig(hue_step=0.5)
        for _ in range(5):
            advance_bar(bar, config, 0.0, 256)
        assert bar.hue == pytest.approx(0.5)

    def test_hue_always_in_range(self) -> None:
        bar = Bar(layer=0, speed=1.0, phase=0.0, hue=0.0)
        config = CopperConfig(hue_step=7.3)
        for _ in range(2000):
            advance_bar(bar, config, 0.0, 256)
            assert 0.0 <= bar.hue < 360.0


# ── Rendering ──────────────────────────────────────────────────


class TestRender:
    def test_gradient_stops(self) -> None:
        bar = Bar(layer=0, speed=1.0, phase=0.0, hue=120.0, y=100.0)
        body, shine = render_bar(bar, CopperConfig(bar_height=40.0), VIEWPORT)
        assert isinstance(body, GradientRect)
        assert [(s.offset, s.alpha) for s in body.stops] == list(STOP_ALPHAS)
        assert [(s.offset, s.alpha) for s in body.stops] == [
            (0.0, 0.2), (0.5, 0.8), (1.0, 0.2)
        ]
        assert len({s.color for s in body.stops}) == 1
        assert body.y == 80.0
        assert body.height == 40.0
        assert body.width == 320

        assert isinstance(shine, Rect)
        assert shine.y + shine.height / 2 == pytest.approx(100.0)
        assert sum(shine.color) > sum(body.stops[0].color)

    def test_renderer_draws_in_layer_order(self) -> None:
        engine = Engine(viewport=VIEWPORT)
        spawn_bars(engine.world, CopperConfig(count=4))
        engine.add_system(make_copper_system())
        engine.add_renderer(make_copper_renderer())
        frame = engine.step()
        gradients = [p for p in frame if isinstance(p, GradientRect)]
        assert len(gradients) == 4


# ── Spawning ───────────────────────────────────────────────────


class TestSpawn:
    def test_layers_spread_phase_and_hue(self) -> None:
        engine = Engine()
        eids = spawn_bars(engine.world, CopperConfig(count=4))
        bars = [engine.world.get(eid, Bar) for eid in eids]
        assert [b.layer for b in bars] == [0, 1, 2, 3]
        assert [b.hue for b in bars] == [0.0, 90.0, 180.0, 270.0]
        assert bars[1].phase == pytest.approx(math.pi / 2)
        assert bars[0].speed < bars[3].speed

    def test_config_validation(self) -> None:
        with pytest.raises(ValueError):
            CopperConfig(count=0)
        with pytest.raises(ValueError):
            CopperConfig(bar_height=0.0)
