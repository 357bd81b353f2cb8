"""
Demo Player
The six classic effects in one resizable window.

Controls:
  1-6     Switch effect (cube, boing, copper, tunnel, scroller, starfield)
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from scene import Viewport
from scene_pygame import run_window

from effects import EFFECT_NAMES, make_engine

logger = logging.getLogger("demo-player")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play classic demo-scene effects.")
    ap.add_argument("--effect", choices=EFFECT_NAMES, default="cube")
    ap.add_argument("--width", type=int, default=800)
    ap.add_argument("--height", type=int, default=600)
    ap.add_argument("--fps", type=int, default=60)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--lookup-table", action="store_true",
                    help="use 256-entry sine lookup tables instead of native trig")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    viewport = Viewport(args.width, args.height)
    engine = make_engine(args.effect, viewport, args.fps, args.seed, args.lookup_table)
    logger.info("playing %s (seed=%d)", args.effect, engine.seed)

    keys = {pygame.K_1 + i: name for i, name in enumerate(EFFECT_NAMES)}

    def on_key(key: int):
        name = keys.get(key)
        if name is None:
            return None
        logger.info("switching to %s", name)
        return make_engine(name, viewport, args.fps, args.seed, args.lookup_table)

    run_window(engine, title=f"Demo Player - {args.effect}", fps=args.fps, on_key=on_key)
    sys.exit()


if __name__ == "__main__":
    main()
