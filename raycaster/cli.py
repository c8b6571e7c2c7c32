"""Command line entry point: load a scene, render it and save the image."""

import argparse
import logging

from raycaster import config
from raycaster.errors import RaycasterError
from raycaster.loader import load_scene
from raycaster.logging_config import setup_logging
from raycaster.render import render_scene, save_image

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="raycaster", description="Python Ray Tracer")
    parser.add_argument("scene_file", type=str, help="Path to the scene file (.json or text)")
    parser.add_argument("-o", "--output", type=str, default=str(config.OUTPUT_PATH),
                        help="Output image path")
    parser.add_argument("--width", type=int, help="Image width")
    parser.add_argument("--height", type=int, help="Image height")
    parser.add_argument("--fov", type=float, help="Field of view in degrees")
    parser.add_argument("--bias", type=float, help="Secondary ray offset along the normal")
    parser.add_argument("--max-depth", type=int, dest="max_recursion_depth",
                        help="Maximum raycast recursion depth")
    parser.add_argument("--fov-scaling", action="store_true", default=None,
                        help="Scale the sensor by the field of view")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")
    return parser


def main(argv=None) -> int:
    """Entry point used when running this module as a script."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        scene = load_scene(
            args.scene_file,
            width=args.width,
            height=args.height,
            fov=args.fov,
            bias=args.bias,
            max_recursion_depth=args.max_recursion_depth,
            fov_scaling=args.fov_scaling,
        )
        image = render_scene(scene)
        save_image(image, args.output)
    except (RaycasterError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0
