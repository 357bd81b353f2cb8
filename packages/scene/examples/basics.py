"""Hello World -- the simplest possible scene engine program.

Demonstrates:
- Creating an engine with a fixed frame rate and viewport
- Defining an update system and a renderer as plain functions
- Presenting each frame's primitives with a callback
- Accessing frame_number, dt, and elapsed from FrameContext

Run: python -m examples.basics
"""

from scene import Engine, FrameContext, Viewport, World
from scene.draw import Point, Primitive


# A system is just a function that takes (world, ctx).
def hello_system(world: World, ctx: FrameContext) -> None:
    print(
        f"  frame {ctx.frame_number}  |  dt={ctx.dt:.3f}s  |  elapsed={ctx.elapsed:.3f}s"
    )


# A renderer reads state and returns draw primitives.
def dot_renderer(world: World, ctx: FrameContext) -> list[Primitive]:
    cx, cy = ctx.viewport.center
    return [Point(cx + ctx.frame_number * 10, cy, 2.0, (255, 255, 255))]


def present(frame: list[Primitive]) -> None:
    kinds = ", ".join(type(p).__name__ for p in frame)
    print(f"    drew: {kinds}")


def main() -> None:
    print("=== Hello World ===\n")

    # 10 frames per second on a 320x256 screen.
    engine = Engine(fps=10, viewport=Viewport(320, 256))

    engine.add_system(hello_system)
    engine.add_renderer(dot_renderer)

    # Run exactly 5 frames, then stop.
    engine.run(5, present=present)

    print(f"\nDone. Clock stopped at frame {engine.clock.frame_number}.")


if __name__ == "__main__":
    main()
