"""scene-cube - Nested rotating wireframe cubes with perspective projection."""
from __future__ import annotations

from scene_cube.components import CUBE_EDGES, CUBE_VERTICES, Cube
from scene_cube.config import CubeConfig
from scene_cube.render import make_cube_renderer, render_cube
from scene_cube.systems import (
    advance_cube,
    make_cube_system,
    rotated_vertices,
    spawn_cubes,
    transform_cube,
)

__all__ = [
    "CUBE_EDGES",
    "CUBE_VERTICES",
    "Cube",
    "CubeConfig",
    "advance_cube",
    "make_cube_renderer",
    "make_cube_system",
    "render_cube",
    "rotated_vertices",
    "spawn_cubes",
    "transform_cube",
]
