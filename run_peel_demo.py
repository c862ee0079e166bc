#!/usr/bin/env python3
"""
Peel Demo - Path Sweep
======================

Sweeps a peel along a path and prints one JSON frame per step, the values
a renderer would apply (clip outlines, back layer transform, shadows,
gradients, opacity).

Usage:
    python run_peel_demo.py --config configs/book.yaml
    python run_peel_demo.py --width 400 --height 300 --steps 5 --path 400 300 0 0
    python run_peel_demo.py --config configs/calendar.yaml --css

Workflow:
    1. Load options from YAML (or defaults)
    2. Build the Peel (size, options, path)
    3. Step the time along the path from 0 to 1
    4. Print each frame
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from peel_engine import Container, PeelBuilder, PeelConfigurationError, PeelOptions
from peel_engine.logging import LogEvent, create_logger


def load_options(config_path, logger) -> PeelOptions:
    """Load options from YAML, logging what was loaded."""
    if config_path is None:
        return PeelOptions()

    try:
        options = PeelOptions.from_yaml(config_path)
    except PeelConfigurationError as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message=f"Invalid configuration in {config_path}",
            exc_info=e,
        )
        raise

    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message=f"Loaded options from {config_path}",
        metadata={'preset': options.preset.value if options.preset else None},
    )
    return options


def default_path(width: float, height: float, options: PeelOptions):
    """Straight line from the peel corner to the corner opposite it."""
    corner = Container(width, height).resolve(options.corner)
    return corner.x, corner.y, width - corner.x, height - corner.y


def frame_as_css(frame) -> dict:
    """Frame reduced to the CSS/SVG strings a DOM renderer sets."""
    return {
        'front_clip': frame.front_clip.to_svg_points(),
        'back_clip': frame.back_clip.to_svg_points(),
        'back_transform': frame.back_transform.to_css(),
        'top_shadow': frame.top_shadow.to_css() if frame.top_shadow else None,
        'back_reflection': frame.back_reflection.to_css(),
        'back_shadow': frame.back_shadow.to_css(),
        'bottom_shadow': frame.bottom_shadow.to_css(),
        'opacity': frame.opacity,
    }


def parse_args():
    """
    Parse command-line arguments.

    Returns:
        argparse.Namespace with parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Peel Engine - sweep a page peel along a path",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Book preset, default size and path
  python run_peel_demo.py --config configs/book.yaml

  # Curved path on a larger page
  python run_peel_demo.py --width 400 --height 300 --path 400 300 300 100 100 200 0 0

  # CSS strings instead of raw values
  python run_peel_demo.py --config configs/calendar.yaml --css
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to peel options YAML file (default: built-in defaults)'
    )
    parser.add_argument('--width', type=float, default=200, help='Container width (default: 200)')
    parser.add_argument('--height', type=float, default=100, help='Container height (default: 100)')
    parser.add_argument(
        '--steps',
        type=int,
        default=10,
        help='Number of steps along the path (default: 10)'
    )
    parser.add_argument(
        '--path',
        type=float,
        nargs='+',
        default=None,
        help='4 (line) or 8 (bezier) coordinates (default: corner to opposite corner)'
    )
    parser.add_argument(
        '--css',
        action='store_true',
        help='Print CSS/SVG strings instead of raw frame values'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log every position update'
    )

    return parser.parse_args()


def main():
    """
    Main entry point.

    Exit codes:
        0: Success
        1: Invalid configuration, size or path (all ValueErrors)
    """
    args = parse_args()
    logger = create_logger("demo", level=logging.DEBUG if args.debug else logging.WARNING)

    if args.config is not None and not args.config.exists():
        print(f"❌ Error: Configuration file not found: {args.config}", file=sys.stderr)
        sys.exit(1)
    if args.steps < 1:
        print("❌ Error: --steps must be at least 1", file=sys.stderr)
        sys.exit(1)

    try:
        options = load_options(args.config, logger)
        path = args.path or default_path(args.width, args.height, options)

        peel = (
            PeelBuilder()
            .with_size(args.width, args.height)
            .with_options(options)
            .with_path(*path)
            .with_logger(logger)
            .build()
        )
    except ValueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    for step in range(args.steps + 1):
        t = step / args.steps
        frame = peel.set_time_along_path(t)
        values = frame_as_css(frame) if args.css else frame.to_dict()
        print(json.dumps({'t': round(t, 4), 'frame': values}))


if __name__ == '__main__':
    main()
