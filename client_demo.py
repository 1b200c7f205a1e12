#!/usr/bin/env python3
#
# PROJECT: raytracer-core
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 7
# LOG_REF: 2026-10-17
#

import argparse
import logging
import sys

from raytracer_core.config import DemoConfig, SCENE_DEFAULTS
from raytracer_core.demo import main as run_demo
from raytracer_core.logging_config import setup_logging

logger = logging.getLogger("raytracer_core.client_demo")


def parse_args(argv=None):
    """CLI argument parser for the demo scenes."""
    epilog = """\
examples:
  %(prog)s                                            Projectile arc to output.ppm
  %(prog)s clock -o clock.ppm                         Clock face on 400x400
  %(prog)s projectile --fg-color #0044FF --bg-color #000000
  %(prog)s clock --width 800 --height 800 --log-level DEBUG
"""
    parser = argparse.ArgumentParser(
        description="Render a demo scene to a PPM image",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("scene", nargs='?', default='projectile',
                        choices=sorted(SCENE_DEFAULTS),
                        help="Scene to render (default: projectile)")
    parser.add_argument("-o", "--output", default=None,
                        help="Output .ppm path (default: $RAYTRACER_OUTPUT or output.ppm)")
    parser.add_argument("--width", type=int, default=None,
                        help="Canvas width in pixels (default: per scene)")
    parser.add_argument("--height", type=int, default=None,
                        help="Canvas height in pixels (default: per scene)")
    parser.add_argument("--fg-color", default=None,
                        help="Drawing color in hex #RRGGBB (default: per scene)")
    parser.add_argument("--bg-color", default=None,
                        help="Background color in hex #RRGGBB (default: per scene)")
    parser.add_argument("--log-level", default=None,
                        help="DEBUG, INFO, WARNING or ERROR (default: $RAYTRACER_LOG_LEVEL or INFO)")
    parser.add_argument("--log-file", default=None,
                        help="Also write the log to this file")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        config = DemoConfig.from_env(
            scene=args.scene,
            output=args.output,
            width=args.width,
            height=args.height,
            fg_color=args.fg_color,
            bg_color=args.bg_color,
            log_level=args.log_level,
            log_file=args.log_file,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        setup_logging(config.level, config.log_file)
    except OSError as e:
        print(f"Error: could not open log file '{config.log_file}': {e}", file=sys.stderr)
        return 1

    try:
        run_demo(config)
    except OSError as e:
        logger.error("Could not write '%s': %s", config.output, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
