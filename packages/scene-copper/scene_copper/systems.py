"""Sinusoidal bar motion and hue cycling."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable

from scene_math import TAU, wrap

from scene_copper.components import Bar
from scene_copper.config import CopperConfig

if TYPE_CHECKING:
    from scene import EntityId, FrameContext, World


def bar_position(bar: Bar, config: CopperConfig, elapsed: float, height: float) -> float:
    """Centre line of the bar, a direct function of elapsed time."""
    amplitude = (height - config.bar_height) * config.swing
    return math.sin(elapsed * bar.speed + bar.phase) * amplitude + height / 2


def advance_bar(bar: Bar, config: CopperConfig, elapsed: float, height: float) -> None:
    bar.hue = wrap(bar.hue + config.hue_step, 360.0)
    bar.y = bar_position(bar, config, elapsed, height)


def spawn_bars(world: World, config: CopperConfig | None = None) -> list[EntityId]:
    """Spawn bars with evenly spread phases and hues, faster by layer."""
    cfg = config if config is not None else CopperConfig()
    eids: list[EntityId] = []
    for layer in range(cfg.count):
        eid = world.spawn()
        world.attach(
            eid,
            Bar(
                layer=layer,
                speed=cfg.base_speed + layer * cfg.speed_step,
                phase=layer * TAU / cfg.count,
                hue=layer * 360.0 / cfg.count,
            ),
        )
        eids.append(eid)
    return eids


def make_copper_system(
    config: CopperConfig | None = None,
) -> Callable[[World, FrameContext], None]:
    cfg = config if config is not None else CopperConfig()

    def copper_system(world: World, ctx: FrameContext) -> None:
        for _, (bar,) in world.query(Bar):
            advance_bar(bar, cfg, ctx.elapsed, ctx.viewport.height)

    return copper_system
