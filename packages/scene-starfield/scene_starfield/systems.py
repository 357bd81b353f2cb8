"""Star drift, edge wrap and viewport-driven population."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable

from scene_starfield.components import Star
from scene_starfield.config import StarfieldConfig

if TYPE_CHECKING:
    from scene import EntityId, FrameContext, Viewport, World

logger = logging.getLogger(__name__)


def layer_speed(layer: int, config: StarfieldConfig) -> float:
    return config.base_speed * (layer + 1)


def stars_per_layer(viewport: Viewport, config: StarfieldConfig) -> int:
    return max(1, round(viewport.area * config.density))


def advance_star(
    star: Star, config: StarfieldConfig, viewport: Viewport, rng: random.Random
) -> None:
    """Drift right; past the right edge, restart at x=0 with fresh y and brightness."""
    star.x += star.speed
    if star.x > viewport.width:
        star.x = 0.0
        star.y = rng.uniform(0.0, viewport.height)
        star.brightness = rng.uniform(config.brightness_min, config.brightness_max)


def spawn_star(
    world: World,
    layer: int,
    config: StarfieldConfig,
    viewport: Viewport,
    rng: random.Random,
) -> EntityId:
    eid = world.spawn()
    world.attach(
        eid,
        Star(
            layer=layer,
            x=rng.uniform(0.0, viewport.width),
            y=rng.uniform(0.0, viewport.height),
            speed=layer_speed(layer, config),
            brightness=rng.uniform(config.brightness_min, config.brightness_max),
        ),
    )
    return eid


def populate(
    world: World,
    viewport: Viewport,
    rng: random.Random,
    config: StarfieldConfig | None = None,
) -> None:
    """Bring every layer to the density target for ``viewport``.

    Missing stars are spawned at random positions; surplus stars are
    despawned newest first. Surviving stars are left untouched.
    """
    cfg = config if config is not None else StarfieldConfig()
    target = stars_per_layer(viewport, cfg)
    by_layer: dict[int, list[EntityId]] = {layer: [] for layer in range(cfg.layers)}
    for eid, (star,) in world.query(Star):
        by_layer.setdefault(star.layer, []).append(eid)

    for layer, eids in by_layer.items():
        wanted = target if layer < cfg.layers else 0
        if len(eids) < wanted:
            for _ in range(wanted - len(eids)):
                spawn_star(world, layer, cfg, viewport, rng)
        elif len(eids) > wanted:
            for eid in eids[wanted:]:
                world.despawn(eid)
        logger.debug("layer %d: %d -> %d stars", layer, len(eids), wanted)


def make_starfield_system(
    config: StarfieldConfig | None = None,
) -> Callable[[World, FrameContext], None]:
    cfg = config if config is not None else StarfieldConfig()

    def starfield_system(world: World, ctx: FrameContext) -> None:
        for _, (star,) in world.query(Star):
            advance_star(star, cfg, ctx.viewport, ctx.random)

    return starfield_system


def make_starfield_resize_hook(
    config: StarfieldConfig | None = None,
) -> Callable[[World, FrameContext], None]:
    cfg = config if config is not None else StarfieldConfig()

    def starfield_resize(world: World, ctx: FrameContext) -> None:
        populate(world, ctx.viewport, ctx.random, cfg)

    return starfield_resize
