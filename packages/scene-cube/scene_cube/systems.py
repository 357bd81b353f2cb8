"""Rotation update, vertex transform and spawning for the cube effect."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from scene_math import TAU, project, rotate_zyx, vec, wrap

from scene_cube.components import CUBE_VERTICES, Cube
from scene_cube.config import CubeConfig

if TYPE_CHECKING:
    from scene import EntityId, FrameContext, Viewport, World

CUBE_COLORS: tuple[tuple[int, int, int], ...] = (
    (255, 255, 255),
    (120, 200, 255),
    (255, 120, 220),
)


def advance_cube(cube: Cube, config: CubeConfig, dt: float) -> None:
    """Advance each axis by its own speed, wrapping every angle mod 2π."""
    cube.angle_x = wrap(cube.angle_x + config.speed_x * dt, TAU)
    cube.angle_y = wrap(cube.angle_y + config.speed_y * dt, TAU)
    cube.angle_z = wrap(cube.angle_z + config.speed_z * dt, TAU)


def rotated_vertices(cube: Cube) -> list[tuple[float, float, float]]:
    """Object-space vertices scaled by size and rotated Z, Y, X (phase applied)."""
    ax = cube.angle_x + cube.phase
    ay = cube.angle_y + cube.phase
    az = cube.angle_z + cube.phase
    return [rotate_zyx(vec.scale(v, cube.size), ax, ay, az) for v in CUBE_VERTICES]


def transform_cube(
    cube: Cube, config: CubeConfig, viewport: Viewport
) -> list[tuple[float, float] | None]:
    """Screen position per vertex, or None for a vertex at/behind the eye."""
    scale = min(viewport.width, viewport.height) * config.scale_ratio
    return [
        project(v, config.focal_distance, scale, viewport.center)
        for v in rotated_vertices(cube)
    ]


def spawn_cubes(
    world: World,
    count: int = 3,
    size_step: float = 0.3,
    phase_step: float = 0.5,
    colors: tuple[tuple[int, int, int], ...] = CUBE_COLORS,
) -> list[EntityId]:
    """Spawn nested cubes, each smaller than the last and phase-shifted."""
    if count <= 0:
        raise ValueError("count must be positive")
    eids: list[EntityId] = []
    for i in range(count):
        size = max(1.0 - i * size_step, 0.05)
        eid = world.spawn()
        world.attach(
            eid,
            Cube(size=size, phase=i * phase_step, color=colors[i % len(colors)]),
        )
        eids.append(eid)
    return eids


def make_cube_system(
    config: CubeConfig | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that advances every cube's rotation by ctx.dt."""
    cfg = config if config is not None else CubeConfig()

    def cube_system(world: World, ctx: FrameContext) -> None:
        for _, (cube,) in world.query(Cube):
            advance_cube(cube, cfg, ctx.dt)

    return cube_system
