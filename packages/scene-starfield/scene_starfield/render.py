"""Starfield renderer."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from scene.draw import Point, Primitive
from scene_math import shade

from scene_starfield.components import Star
from scene_starfield.config import StarfieldConfig

if TYPE_CHECKING:
    from scene import FrameContext, World


def star_size(layer: int, config: StarfieldConfig) -> float:
    return 1.0 + layer * config.size_step


def render_star(star: Star, config: StarfieldConfig) -> Point:
    return Point(star.x, star.y, star_size(star.layer, config), shade(config.color, star.brightness))


def make_starfield_renderer(
    config: StarfieldConfig | None = None,
) -> Callable[[World, FrameContext], list[Primitive]]:
    cfg = config if config is not None else StarfieldConfig()

    def starfield_renderer(world: World, ctx: FrameContext) -> list[Primitive]:
        stars = sorted((star for _, (star,) in world.query(Star)), key=lambda s: s.layer)
        return [render_star(star, cfg) for star in stars]

    return starfield_renderer
