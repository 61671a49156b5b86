#!/usr/bin/env python3
"""
Render the sphere grid animation to a sequence of SVG files.

Usage:
    python spheresvg.py                         # 120 frames into ./frames
    python spheresvg.py --toggle-at 30 90       # switch projection twice
    python spheresvg.py --stereographic --frames 1 --out still
"""

import argparse
from pathlib import Path

import config
from scene import Frame, Scene, Tick
from svgsurface import SvgSurface


def render_frames(scene, frames, frame_ms, width, height, toggle_at=(), sim_speed=1.0):
    """
    Drive `scene` for `frames` ticks and return one SvgSurface per frame.

    Args:
        scene: Scene to animate
        frames: Number of frames
        frame_ms: Simulated milliseconds per frame
        width: Output width in pixels
        height: Output height in pixels
        toggle_at: Frame numbers at which the projection mode is toggled
        sim_speed: Speed multiplier, folded into the tick's elapsed time
    """
    toggles = set(toggle_at)
    surfaces = []
    for i in range(frames):
        if i in toggles:
            scene.toggle()
        scene.on_tick(Tick(sim_time=frame_ms * sim_speed, sim_speed=sim_speed,
                           width=width, height=height))
        surface = SvgSurface(width, height)
        scene.on_draw(Frame(ctx=surface, width=width, height=height))
        surfaces.append(surface)
    return surfaces


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Export sphere grid frames as SVG.")
    parser.add_argument("--frames", type=int, default=120)
    parser.add_argument("--frame-ms", type=float, default=config.FRAME_MS)
    parser.add_argument("--speed", type=float, default=1.0)
    parser.add_argument("--width", type=int, default=config.WINDOW_SIZE[0])
    parser.add_argument("--height", type=int, default=config.WINDOW_SIZE[1])
    parser.add_argument("--rings", type=int, default=config.RING_COUNT)
    parser.add_argument("--ring-points", type=int, default=config.RING_POINT_COUNT)
    parser.add_argument("--toggle-at", type=int, nargs="*", default=[])
    parser.add_argument("--stereographic", action="store_true",
                        help="start in stereographic mode")
    parser.add_argument("--out", default="frames")
    args = parser.parse_args(argv)
    if args.frames < 1:
        parser.error("--frames must be at least 1")
    if args.rings < 2 or args.ring_points < 1:
        parser.error("need --rings >= 2 and --ring-points >= 1")
    return args


def main(argv=None):
    args = parse_args(argv)

    print("=" * 60)
    print("Sphere Grid SVG Export")
    print("=" * 60)

    scene = Scene(ring_count=args.rings, ring_point_count=args.ring_points,
                  stereographic=args.stereographic)
    print(f"Mesh: {len(scene.base)} vertices "
          f"({args.rings} rings x {args.ring_points} points)")

    surfaces = render_frames(scene, args.frames, args.frame_ms, args.width, args.height,
                             toggle_at=args.toggle_at, sim_speed=args.speed)

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    for i, surface in enumerate(surfaces):
        surface.save_svg(out_dir / f"sphere_{i:04d}.svg")

    print(f"Wrote {len(surfaces)} frames to '{out_dir}'")
    print(f"Average {scene.readout}")


if __name__ == "__main__":
    main()
