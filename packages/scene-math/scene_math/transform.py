"""Axis rotations and perspective projection."""
from __future__ import annotations

import math

from scene_math.vec import Vec3


def rotate_x(v: Vec3, angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    x, y, z = v
    return (x, y * c - z * s, y * s + z * c)


def rotate_y(v: Vec3, angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    x, y, z = v
    return (x * c + z * s, y, -x * s + z * c)


def rotate_z(v: Vec3, angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    x, y, z = v
    return (x * c - y * s, x * s + y * c, z)


def rotate_zyx(v: Vec3, angle_x: float, angle_y: float, angle_z: float) -> Vec3:
    """Rotate about Z, then Y, then X. The order is part of the look."""
    return rotate_x(rotate_y(rotate_z(v, angle_z), angle_y), angle_x)


def project(
    v: Vec3,
    focal_distance: float,
    scale: float,
    center: tuple[float, float],
) -> tuple[float, float] | None:
    """Perspective-project onto the screen, or None when at/behind the eye."""
    depth = focal_distance + v[2]
    if depth <= 0.0:
        return None
    k = focal_distance / depth * scale
    return (v[0] * k + center[0], v[1] * k + center[1])
