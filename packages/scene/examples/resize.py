"""Resize hooks -- keeping effect state valid when the viewport changes.

Demonstrates:
- Components as plain dataclasses
- on_resize hooks that adjust state without resetting it
- Systems reading the current viewport from ctx

Run: python -m examples.resize
"""

from dataclasses import dataclass

from scene import Engine, FrameContext, Viewport, World


@dataclass
class Marker:
    x: float
    y: float


def drift_system(world: World, ctx: FrameContext) -> None:
    """Move right one pixel per frame, wrapping at the right edge."""
    for _, (m,) in world.query(Marker):
        m.x += 1.0
        if m.x > ctx.viewport.width:
            m.x = 0.0


def clamp_on_resize(world: World, ctx: FrameContext) -> None:
    vp = ctx.viewport
    for eid, (m,) in world.query(Marker):
        m.x = min(m.x, vp.width)
        m.y = min(m.y, vp.height)
        print(f"  [resize {vp.width}x{vp.height}] marker {eid} at ({m.x:.0f}, {m.y:.0f})")


def main() -> None:
    print("=== Resize ===\n")
    engine = Engine(fps=30, viewport=Viewport(640, 480))
    eid = engine.world.spawn()
    engine.world.attach(eid, Marker(x=600.0, y=400.0))

    engine.add_system(drift_system)
    engine.on_resize(clamp_on_resize)

    engine.run(10)
    engine.resize(320, 256)
    engine.run(10)

    m = engine.world.get(eid, Marker)
    print(f"\nDone. Marker at ({m.x:.0f}, {m.y:.0f}) after frame {engine.clock.frame_number}.")


if __name__ == "__main__":
    main()
