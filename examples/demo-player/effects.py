"""Engine builders for each effect."""
from __future__ import annotations

from typing import Callable

from scene import Engine, Viewport
from scene_boing import BoingConfig, make_boing_renderer, make_boing_resize_hook, make_boing_system, spawn_ball
from scene_copper import CopperConfig, make_copper_renderer, make_copper_system, spawn_bars
from scene_cube import CubeConfig, make_cube_renderer, make_cube_system, spawn_cubes
from scene_math import rgb12
from scene_scroller import ScrollerConfig, make_scroller_renderer, make_scroller_system, spawn_scroller
from scene_starfield import (
    StarfieldConfig,
    make_starfield_renderer,
    make_starfield_resize_hook,
    make_starfield_system,
    populate,
)
from scene_tunnel import TunnelConfig, make_tunnel_renderer, make_tunnel_system, spawn_rings


def build_cube(engine: Engine, lookup_table: bool) -> None:
    config = CubeConfig()
    spawn_cubes(engine.world)
    engine.add_system(make_cube_system(config))
    engine.add_renderer(make_cube_renderer(config))


def build_boing(engine: Engine, lookup_table: bool) -> None:
    config = BoingConfig(max_velocity=12.0)
    spawn_ball(engine.world, engine.viewport, config)
    engine.add_system(make_boing_system(config))
    engine.add_renderer(make_boing_renderer(config))
    engine.on_resize(make_boing_resize_hook(config))


def build_copper(engine: Engine, lookup_table: bool) -> None:
    config = CopperConfig(swing=0.45)
    spawn_bars(engine.world, config)
    engine.add_system(make_copper_system(config))
    engine.add_renderer(make_copper_renderer(config))


def build_tunnel(engine: Engine, lookup_table: bool) -> None:
    config = TunnelConfig(lookup_table=lookup_table)
    spawn_rings(engine.world, config)
    engine.add_system(make_tunnel_system(config))
    engine.add_renderer(make_tunnel_renderer(config))


def build_scroller(engine: Engine, lookup_table: bool) -> None:
    config = ScrollerConfig(lookup_table=lookup_table)
    spawn_scroller(engine.world, engine.viewport)
    engine.add_system(make_scroller_system(config))
    engine.add_renderer(make_scroller_renderer(config))


def build_starfield(engine: Engine, lookup_table: bool) -> None:
    config = StarfieldConfig()
    populate(engine.world, engine.viewport, engine.random, config)
    engine.add_system(make_starfield_system(config))
    engine.add_renderer(make_starfield_renderer(config))
    engine.on_resize(make_starfield_resize_hook(config))


# name -> (builder, background)
EFFECTS: dict[str, tuple[Callable[[Engine, bool], None], tuple[int, int, int]]] = {
    "cube": (build_cube, (0, 0, 0)),
    "boing": (build_boing, (170, 170, 170)),
    "copper": (build_copper, (0, 0, 0)),
    "tunnel": (build_tunnel, (0, 0, 0)),
    "scroller": (build_scroller, (0, 0, 0)),
    "starfield": (build_starfield, rgb12(0x002)),
}

EFFECT_NAMES = list(EFFECTS)


def make_engine(
    name: str,
    viewport: Viewport,
    fps: int,
    seed: int | None,
    lookup_table: bool = False,
) -> Engine:
    builder, background = EFFECTS[name]
    engine = Engine(fps=fps, seed=seed, viewport=viewport, background=background)
    builder(engine, lookup_table)
    return engine
