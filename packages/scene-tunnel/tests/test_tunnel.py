"""Tests for tunnel depth travel, perspective radius and dot output."""
from __future__ import annotations

import math

import pytest

from scene import Engine, Viewport
from scene.draw import Point
from scene_math import TAU, trig_functions
from scene_tunnel import (
    Ring,
    TunnelConfig,
    advance_ring,
    intensity,
    make_tunnel_renderer,
    make_tunnel_system,
    point_size,
    render_ring,
    ring_points,
    ring_radius,
    spawn_rings,
)

VIEWPORT = Viewport(320, 256)


# ── Depth travel ───────────────────────────────────────────────


class TestAdvance:
    def test_moves_toward_viewer(self) -> None:
        ring = Ring(z=0.5)
        advance_ring(ring, TunnelConfig(speed=0.1))
        assert ring.z == pytest.approx(0.4)

    def test_wraps_to_far_plane(self) -> None:
        ring = Ring(z=0.05)
        advance_ring(ring, TunnelConfig(speed=0.1))
        assert math.isclose(ring.z, 0.95)

    def test_landing_on_zero_wraps_to_one(self) -> None:
        ring = Ring(z=0.25)
        advance_ring(ring, TunnelConfig(speed=0.25))
        assert ring.z == 1.0

    def test_depth_and_angle_stay_bounded(self) -> None:
        ring = Ring(z=1.0)
        config = TunnelConfig(speed=0.07, spin=0.9)
        for _ in range(1000):
            advance_ring(ring, config)
            assert 0.0 < ring.z <= 1.0
            assert 0.0 <= ring.angle < TAU


# ── Perspective ────────────────────────────────────────────────


class TestPerspective:
    def test_radius_formula(self) -> None:
        config = TunnelConfig(min_radius=10.0, max_radius_ratio=0.5, move_offset=0.5)
        max_radius = 256 * 0.5
        expected = 10.0 + (max_radius - 10.0) / (0.4 + 1.0 + 0.5)
        assert ring_radius(0.4, config, VIEWPORT) == pytest.approx(expected)

    def test_nearer_rings_are_larger(self) -> None:
        config = TunnelConfig()
        radii = [ring_radius(z / 10, config, VIEWPORT) for z in range(1, 11)]
        assert radii == sorted(radii, reverse=True)

    def test_size_and_intensity_fall_with_depth(self) -> None:
        config = TunnelConfig(point_size=4.0)
        depths = [0.05, 0.3, 0.6]
        sizes = [point_size(z, config) for z in depths]
        levels = [intensity(z) for z in depths]
        assert sizes == sorted(sizes, reverse=True)
        assert levels == sorted(levels, reverse=True)

    def test_size_has_floor_of_one(self) -> None:
        assert point_size(1.0, TunnelConfig()) == 1.0
        assert point_size(0.99, TunnelConfig(point_size=4.0)) == 1.0

    def test_intensity_floor(self) -> None:
        assert intensity(1.0) == 0.1


# ── Dots ───────────────────────────────────────────────────────


class TestRingPoints:
    def test_points_evenly_spaced_without_wobble(self) -> None:
        config = TunnelConfig(points_per_ring=8, wobble_amplitude=0.0)
        ring = Ring(z=0.5)
        cx, cy = VIEWPORT.center
        radius = ring_radius(0.5, config, VIEWPORT)
        points = ring_points(ring, config, VIEWPORT, 0.0)
        assert len(points) == 8
        for k, (x, y) in enumerate(points):
            assert math.hypot(x - cx, y - cy) == pytest.approx(radius)
            assert math.atan2(y - cy, x - cx) % TAU == pytest.approx(
                (k * TAU / 8) % TAU, abs=1e-9
            )

    def test_wobble_changes_with_time(self) -> None:
        config = TunnelConfig(wobble_amplitude=0.1)
        ring = Ring(z=0.5)
        assert ring_points(ring, config, VIEWPORT, 0.0) != ring_points(
            ring, config, VIEWPORT, 0.3
        )

    def test_wobble_is_bounded(self) -> None:
        config = TunnelConfig(wobble_amplitude=0.1)
        ring = Ring(z=0.3)
        cx, cy = VIEWPORT.center
        radius = ring_radius(0.3, config, VIEWPORT)
        for x, y in ring_points(ring, config, VIEWPORT, 1.7):
            assert math.hypot(x - cx, y - cy) <= radius * 1.1 + 1e-9

    def test_lookup_table_tracks_native(self) -> None:
        ring = Ring(z=0.5, angle=0.3)
        native = ring_points(ring, TunnelConfig(), VIEWPORT, 0.0)
        table = ring_points(ring, TunnelConfig(lookup_table=True), VIEWPORT, 0.0)
        radius = ring_radius(0.5, TunnelConfig(), VIEWPORT) * 1.05
        for (nx, ny), (tx, ty) in zip(native, table):
            assert math.hypot(nx - tx, ny - ty) <= radius * TAU / 256

    def test_lookup_table_drives_wobble_too(self) -> None:
        config = TunnelConfig(points_per_ring=8, wobble_amplitude=0.2, lookup_table=True)
        ring = Ring(z=0.37, angle=0.3)
        elapsed = 1.23
        sin, cos = trig_functions(True)
        cx, cy = VIEWPORT.center
        radius = ring_radius(ring.z, config, VIEWPORT)
        step = TAU / 8
        expected = []
        for k in range(8):
            a = ring.angle + k * step
            wobble = 1.0 + 0.2 * sin(elapsed * 2.0 + ring.z * 6.0 + k * step)
            expected.append((cx + cos(a) * radius * wobble, cy + sin(a) * radius * wobble))
        points = ring_points(ring, config, VIEWPORT, elapsed)
        for got, want in zip(points, expected):
            assert got == pytest.approx(want, abs=1e-9)

    def test_render_ring_colours_by_depth(self) -> None:
        config = TunnelConfig(color=(200, 200, 200))
        near = render_ring(Ring(z=0.1), config, VIEWPORT, 0.0)
        far = render_ring(Ring(z=0.9), config, VIEWPORT, 0.0)
        assert near[0].color == (180, 180, 180)
        assert far[0].color == (20, 20, 20)
        assert near[0].size > far[0].size


# ── Effect ─────────────────────────────────────────────────────


class TestTunnelEffect:
    def test_spawn_depths(self) -> None:
        engine = Engine()
        eids = spawn_rings(engine.world, TunnelConfig(rings=4))
        assert [engine.world.get(e, Ring).z for e in eids] == [0.25, 0.5, 0.75, 1.0]

    def test_frame_draws_far_rings_first(self) -> None:
        engine = Engine(viewport=VIEWPORT)
        config = TunnelConfig(rings=4, points_per_ring=8)
        spawn_rings(engine.world, config)
        engine.add_system(make_tunnel_system(config))
        engine.add_renderer(make_tunnel_renderer(config))
        frame = engine.step()
        points = [p for p in frame if isinstance(p, Point)]
        assert len(points) == 32
        assert points[0].size <= points[-1].size

    def test_config_validation(self) -> None:
        for kwargs in (
            {"rings": 0},
            {"points_per_ring": 0},
            {"speed": 0.0},
            {"speed": 1.0},
            {"move_offset": -1.0},
        ):
            with pytest.raises(ValueError):
                TunnelConfig(**kwargs)
