# main.py
import argparse
import logging
import random
import sys
import time
from core.motion import Timespan
from renderer.raytracer import Renderer, RenderOptions
from renderer.image import save_image
import scenes

# Samples per pixel and bounce budget per quality level
QUALITY_LEVELS = {
    "draft": {"samples": 8, "depth": 4},
    "balanced": {"samples": 32, "depth": 8},
    "final": {"samples": 100, "depth": 10},
}

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Offline Monte Carlo path tracer for sphere scenes.")
    parser.add_argument("--scene", choices=sorted(scenes.SCENES), default="weekend")
    parser.add_argument("--height", type=int, default=360, help="image height in pixels")
    parser.add_argument("--width", type=int, default=None,
                        help="image width in pixels (default: height * aspect)")
    parser.add_argument("--aspect", type=float, default=16.0 / 9.0, help="aspect ratio")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="balanced")
    parser.add_argument("--samples", type=int, default=None, help="samples per pixel (overrides --quality)")
    parser.add_argument("--depth", type=int, default=None, help="maximum bounce depth (overrides --quality)")
    parser.add_argument("--workers", type=int, default=None, help="worker processes (default: one per CPU)")
    parser.add_argument("--seed", type=int, default=None, help="seed for scene, BVH and sampling")
    parser.add_argument("-o", "--output", default="image.ppm", help=".ppm, .png, ... (default: image.ppm)")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    quality = QUALITY_LEVELS[args.quality]
    height = args.height
    width = args.width if args.width is not None else int(height * args.aspect)

    try:
        options = RenderOptions(
            samples_per_pixel=args.samples if args.samples is not None else quality["samples"],
            max_depth=args.depth if args.depth is not None else quality["depth"],
            workers=args.workers,
            seed=args.seed,
            progress=not args.no_progress,
        )
        renderer = Renderer(width, height, options)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    aspect_ratio = width / height
    rng = random.Random(args.seed)
    scene = scenes.build_scene(args.scene, rng)
    camera = scenes.default_camera(args.scene, aspect_ratio)
    print(f"Scene '{args.scene}': {len(scene)} primitives, {len(scene.materials)} materials")

    start = time.perf_counter()
    bvh = scene.build_bvh(Timespan(camera.time0, camera.time1), rng)
    print(f"BVH built in {time.perf_counter() - start:.2f}s ({bvh.node_count()} nodes)")

    pixels = renderer.render(bvh, scene.materials, camera)
    save_image(pixels, args.output)
    print(f"Wrote {width}x{height} image to {args.output}")

    if args.preview:
        from renderer.preview import preview
        preview(pixels, title=f"{args.scene} ({width}x{height}, {options.samples_per_pixel} spp)")
    return 0

if __name__ == "__main__":
    sys.exit(main())
