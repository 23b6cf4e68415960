# main.py
"""Command line entry point: print resize schedules or resize image files."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from PIL import Image

from progressive_resize.callbacks import LoggingCallback
from progressive_resize.exceptions import ResizeError
from progressive_resize.planner import RESIZE_SKIP_THRESHOLD, plan, schedule
from progressive_resize.resizer import resize_file
from progressive_resize.types import Size

EIGHTY, SIXTY, FOUR = 80, 60, 4

DEMO_SCENARIOS: list[tuple[int, int, int, int]] = [
    (EIGHTY, SIXTY, FOUR, EIGHTY),
    (EIGHTY, SIXTY, EIGHTY, SIXTY),
    (EIGHTY << 4, SIXTY << 4, EIGHTY, SIXTY),
    (EIGHTY << 4, SIXTY << 2, EIGHTY, SIXTY),
    (EIGHTY << 2, SIXTY << 4, EIGHTY, SIXTY),
    ((EIGHTY << 1) + 1 + RESIZE_SKIP_THRESHOLD, (SIXTY << 1) + 1 + RESIZE_SKIP_THRESHOLD, EIGHTY, SIXTY),
    ((EIGHTY << 1) + RESIZE_SKIP_THRESHOLD, (SIXTY << 1) + RESIZE_SKIP_THRESHOLD, EIGHTY, SIXTY),
    (EIGHTY << 1, SIXTY << 1, EIGHTY, SIXTY),
]


def format_schedule(sw: int, sh: int, tw: int, th: int) -> list[str]:
    """Describe every scaled copy of a resize, one line per blit."""
    steps = plan(sw, sh, tw, th)
    source, target = Size(sw, sh), Size(tw, th)
    lines = [f"**RESIZE.: {source}\t-> {target}"]
    lines.extend(blit.describe() for blit in schedule(source, target, steps))
    return lines


def _print_schedule(sizes: Sequence[int], reverse: bool, out: TextIO) -> None:
    sw, sh, tw, th = sizes
    directions = [(sw, sh, tw, th)]
    if reverse:
        directions.append((tw, th, sw, sh))
    for direction in directions:
        for line in format_schedule(*direction):
            print(line, file=out)
        print(file=out)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="progressive-resize",
        description="Progressive bilinear image resizing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every blit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    plan_parser = subparsers.add_parser("plan", help="Print the blits needed for a resize")
    plan_parser.add_argument("sizes", type=int, nargs=4, metavar=("SW", "SH", "TW", "TH"))
    plan_parser.add_argument("--reverse", action="store_true", help="Also print the opposite direction")

    subparsers.add_parser("demo", help="Print the schedules of the reference scenarios")

    resize_parser = subparsers.add_parser("resize", help="Resize an image file")
    resize_parser.add_argument("input", help="Input image path")
    resize_parser.add_argument("output", help="Output image path")
    resize_parser.add_argument("--width", type=int, required=True, help="Target width")
    resize_parser.add_argument("--height", type=int, required=True, help="Target height")
    resize_parser.add_argument(
        "--keep-aspect",
        action="store_true",
        help="Fit inside width x height, preserving aspect ratio",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "plan":
            _print_schedule(args.sizes, args.reverse, sys.stdout)
        elif args.command == "demo":
            for scenario in DEMO_SCENARIOS:
                _print_schedule(scenario, True, sys.stdout)
        elif args.command == "resize":
            callbacks = [LoggingCallback()] if args.verbose else []
            output = resize_file(
                input_path=args.input,
                output_path=args.output,
                width=args.width,
                height=args.height,
                maintain_aspect_ratio=args.keep_aspect,
                callbacks=callbacks,
            )
            with Image.open(args.input) as before, Image.open(output) as after:
                print(f"Resized {args.input} ({Size(*before.size)}) -> {output} ({Size(*after.size)})")
    except (ResizeError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
