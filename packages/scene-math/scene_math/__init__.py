"""scene-math - Wrapping, rotation, projection and colour helpers."""
from __future__ import annotations

from scene_math import vec
from scene_math.angles import TAU, wrap, wrap_depth
from scene_math.color import hsl, rgb12, shade
from scene_math.sintable import SineTable, trig_functions
from scene_math.transform import project, rotate_x, rotate_y, rotate_z, rotate_zyx

__all__ = [
    "TAU",
    "SineTable",
    "hsl",
    "project",
    "rgb12",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "rotate_zyx",
    "shade",
    "trig_functions",
    "vec",
    "wrap",
    "wrap_depth",
]
