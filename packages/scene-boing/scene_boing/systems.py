"""Bounce physics, shadow derivation and spawning for the boing ball."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from scene_math import wrap

from scene_boing.components import Ball, Shadow
from scene_boing.config import BoingConfig

if TYPE_CHECKING:
    from scene import EntityId, FrameContext, Viewport, World


def step_ball(ball: Ball, config: BoingConfig, height: float) -> None:
    """One frame: gravity, move, then bounce off the floor or ceiling."""
    ball.vy += config.gravity
    if config.max_velocity is not None and ball.vy > config.max_velocity:
        ball.vy = config.max_velocity
    ball.y += ball.vy

    floor = height - ball.radius
    if ball.y > floor:
        ball.y = floor
        ball.vy = -abs(ball.vy) * config.damping
    elif ball.y < ball.radius:
        ball.y = ball.radius
        ball.vy = abs(ball.vy) * config.damping

    ball.rotation = wrap(ball.rotation + config.spin, 360.0)


def shadow_for(ball: Ball, config: BoingConfig, viewport: Viewport) -> Shadow:
    """Shadow on the floor that shrinks as the ball rises."""
    floor = max(viewport.height - ball.radius, ball.radius)
    scale = min(max(ball.y / floor, config.shadow_min_scale), 1.0)
    ry = ball.radius * 0.2 * scale
    return Shadow(
        x=ball.x,
        y=viewport.height - ry,
        rx=ball.radius * scale,
        ry=ry,
        alpha=0.45 * scale,
    )


def spawn_ball(
    world: World,
    viewport: Viewport,
    config: BoingConfig | None = None,
    start_height: float = 0.25,
) -> EntityId:
    """Spawn the ball at rest, centred, ``start_height`` down the screen."""
    cfg = config if config is not None else BoingConfig()
    radius = min(viewport.width, viewport.height) * cfg.radius_ratio
    y = min(max(viewport.height * start_height, radius), viewport.height - radius)
    eid = world.spawn()
    world.attach(eid, Ball(x=viewport.width / 2, y=y, radius=radius))
    return eid


def make_boing_system(
    config: BoingConfig | None = None,
) -> Callable[[World, FrameContext], None]:
    cfg = config if config is not None else BoingConfig()

    def boing_system(world: World, ctx: FrameContext) -> None:
        for _, (ball,) in world.query(Ball):
            step_ball(ball, cfg, ctx.viewport.height)

    return boing_system


def make_boing_resize_hook(
    config: BoingConfig | None = None,
) -> Callable[[World, FrameContext], None]:
    """Rescale and recentre the ball, then pull it back inside the viewport."""
    cfg = config if config is not None else BoingConfig()

    def boing_resize(world: World, ctx: FrameContext) -> None:
        vp = ctx.viewport
        radius = min(vp.width, vp.height) * cfg.radius_ratio
        for _, (ball,) in world.query(Ball):
            ball.radius = radius
            ball.x = vp.width / 2
            ball.y = min(max(ball.y, radius), vp.height - radius)

    return boing_resize
