"""Command-line entry points: render a rings PNG, serve them over HTTP, or draw a swatch sheet."""
from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Optional, Sequence

from .colors.rgb import BLACK, parse_color
from .config import DEFAULT_LAYOUT
from .rings.image import ActivityRingsImage
from .rings.model import RingType
from .swatches import save_swatches

logger = logging.getLogger(__name__)


def progress_value(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"could not parse {text!r} as a float") from None
    if not math.isfinite(value) or value < 0.0:
        raise argparse.ArgumentTypeError(f"{text!r} is not a finite, non-negative number")
    return value


def color_value(text: str):
    try:
        return parse_color(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="activityrings",
        description="Draw activity rings for the given fractions of each goal.",
    )
    parser.add_argument("--out-path", default="rings.png",
                        help="Path, including the filename, the PNG is written to")
    for ring_type in RingType:
        parser.add_argument(f"--{ring_type.value}", type=progress_value, default=0.0,
                            help=f"Decimal value for the {ring_type.value} ring")
    parser.add_argument("--size", type=int, default=None,
                        help=f"Width and height of the image in pixels (default {DEFAULT_LAYOUT.image_size})")
    parser.add_argument("--background", type=color_value, default=None,
                        help="Background color: #RRGGBB, #RRGGBBAA, black, white or transparent "
                             "(default black, transparent when serving)")
    parser.add_argument("--http", action="store_true",
                        help="Start an HTTP server for serving activity ring images instead")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8082)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.size is not None and args.size <= 0:
        logger.error("--size must be positive, got %d", args.size)
        return 2

    if args.http:
        from .server import create_app

        # Only flags given on the command line override the server config
        overrides = {}
        if args.size is not None:
            overrides["IMAGE_SIZE"] = args.size
        if args.background is not None:
            overrides["BACKGROUND"] = args.background
        logger.info("Serving activity rings on %s:%d", args.host, args.port)
        create_app(overrides).run(host=args.host, port=args.port)
        return 0

    size = DEFAULT_LAYOUT.image_size if args.size is None else args.size
    background = BLACK if args.background is None else args.background
    values = {ring_type: getattr(args, ring_type.value) for ring_type in RingType}
    img = ActivityRingsImage(size, background)
    img.draw_activity(values)
    try:
        img.save_png(args.out_path)
    except OSError as exc:
        logger.error("Could not write %s: %s", args.out_path, exc)
        return 1
    logger.info("Wrote %s", args.out_path)
    return 0


def swatches_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="activityrings-swatches",
        description="Draw the ring color ramps as a grid of squares.",
    )
    parser.add_argument("--out-path", default="sample.png")
    parser.add_argument("--rows", type=int, default=12)
    args = parser.parse_args(argv)
    configure_logging(False)

    if args.rows <= 0:
        logger.error("--rows must be positive, got %d", args.rows)
        return 2
    try:
        save_swatches(args.out_path, rows=args.rows)
    except OSError as exc:
        logger.error("Could not write %s: %s", args.out_path, exc)
        return 1
    logger.info("Wrote %s", args.out_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
