# main.py
import argparse
import logging
import random
import sys
from core.config import RenderSettings, default_workers
from renderer.output import save_image
from renderer.raytracer import Renderer
from renderer.tone_mapping import gamma_correct
from scenes.library import world_select

logger = logging.getLogger("pathtracer")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render one of the demo scenes with the path tracer.")
    parser.add_argument("-s", "--scene-number", type=int, default=0, metavar="NUM",
                        help="Scene to render: 1 random spheres, 2 checker spheres, "
                             "3 Perlin spheres, 4 earth, 5 empty, 6 simple light, "
                             "7 Cornell box, 8 Cornell smoke, other: final scene (default: 0)")
    parser.add_argument("-f", "--filename", required=True, metavar="FILE",
                        help="Output file; .ppm is appended when no extension is given")
    parser.add_argument("--width", type=_positive_int,
                        help="Image width in pixels (height follows the scene's aspect ratio)")
    parser.add_argument("--samples", type=_positive_int, help="Samples per pixel")
    parser.add_argument("--max-depth", type=_positive_int, help="Maximum bounces per path")
    parser.add_argument("-j", "--workers", type=_positive_int, default=default_workers(),
                        help="Worker processes (default: CPU count)")
    parser.add_argument("--seed", type=int,
                        help="Seed for scene construction and sampling; fixes the output image")
    parser.add_argument("-q", "--quiet", action="store_true", help="Hide the progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    scene_rng = random.Random(args.seed)
    scene = world_select(args.scene_number, scene_rng)
    settings = scene.settings.override(
        image_width=args.width,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        workers=args.workers,
        seed=args.seed,
    )

    image = Renderer(settings, quiet=args.quiet).render(scene.world, scene.camera,
                                                        scene.background)
    try:
        save_image(args.filename, gamma_correct(image))
    except OSError as e:
        logger.error("Write failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
