"""scene-pygame - pygame host surface and window loop for scene engines."""
from __future__ import annotations

from scene_pygame.surface import PygameSurface, interpolate_stops
from scene_pygame.window import run_window

__all__ = ["PygameSurface", "interpolate_stops", "run_window"]
