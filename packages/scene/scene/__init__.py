"""scene - A minimal frame engine for old-school demo effects."""

from scene.clock import Clock
from scene.engine import Engine
from scene.types import DeadEntityError, EntityId, FrameContext, Viewport
from scene.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "FrameContext",
    "Viewport",
    "EntityId",
    "DeadEntityError",
]
