"""Command-line interface for brush stroke rendering.

Reads a user path from the command line, a file or stdin, deforms a brush
along it and prints the resulting SVG path data to stdout.

Usage:
    brush-stroke --brush calligraphy --points '[[0, 0], [50, 30], [100, 0]]'
    brush-stroke -b ink --path 'M 0 0 Q 50 60 100 0' --width 1.5
    brush-stroke -b flat --augment -i gesture.json
    cat gesture.json | brush-stroke -b round -i -
    brush-stroke --list-brushes

Or run via the module:
    python -m brush_lib.cli --brush round --points '[[0, 0], [100, 0]]'
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import List, Optional, Union

from .api.services import BrushStrokeService
from .config import DEFAULT_SIMPLIFICATION_TOLERANCE, DEFAULT_STROKE_WIDTH, StrokeOptions
from .domain.geometry import Point
from .exceptions import BrushError

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'WARNING', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Log records go to stderr so they never mix with the path data written
    to stdout.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.

    Example:
        Configure at startup::

            from brush_lib.cli import configure_logging
            configure_logging(level='DEBUG', log_file='brush_stroke.log')
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='brush-stroke',
        description='Deform a brush outline along a user path and print SVG path data'
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--points', type=str, default=None,
                        help='User path as JSON, e.g. "[[0, 0], [100, 0]]"')
    source.add_argument('--path', type=str, default=None,
                        help='User path as SVG path data; each subpath is stroked')
    source.add_argument('--input', '-i', type=str, default=None,
                        help='File with JSON points or path data ("-" for stdin)')
    source.add_argument('--list-brushes', action='store_true',
                        help='List the available brushes and exit')
    parser.add_argument('--brush', '-b', type=str, default='round',
                        help='Brush id or name (default: round)')
    parser.add_argument('--width', '-w', type=float, default=DEFAULT_STROKE_WIDTH,
                        help=f'Stroke width multiplier (default: {DEFAULT_STROKE_WIDTH:g})')
    parser.add_argument('--tolerance', '-t', type=float,
                        default=DEFAULT_SIMPLIFICATION_TOLERANCE,
                        help='Simplification tolerance for smoothed output '
                             f'(default: {DEFAULT_SIMPLIFICATION_TOLERANCE:g})')
    parser.add_argument('--augment', action='store_true',
                        help='Insert brush points at user path vertices; '
                             'emits a polyline')
    parser.add_argument('--precision', type=int, default=None,
                        help='Decimal places for coordinates (default: exact)')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Log level (default: WARNING)')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write log records to this file')
    return parser


def parse_points(text: str) -> List[Point]:
    """Parse a JSON array of [x, y] pairs.

    Raises:
        ValueError: If ``text`` is not valid JSON, not a list of pairs, or
            holds a coordinate that is not a finite number.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("points must be a JSON array of [x, y] pairs")
    points = []
    for i, pair in enumerate(data):
        if not isinstance(pair, list) or len(pair) != 2:
            raise ValueError(f"point {i} must be an [x, y] pair, got {pair!r}")
        for value in pair:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"point {i} has a non-numeric coordinate: {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"point {i} has a non-finite coordinate: {value!r}")
        points.append(Point.from_list(pair))
    return points


def _read_input(source: str) -> Union[str, List[Point]]:
    """Read a user path from a file or stdin.

    Content starting with '[' is parsed as JSON points, anything else is
    returned as path data.
    """
    if source == '-':
        text = sys.stdin.read()
    else:
        with open(source, 'r', encoding='utf-8') as f:
            text = f.read()
    text = text.strip()
    if text.startswith('['):
        return parse_points(text)
    return text


def _print_brushes(service: BrushStrokeService) -> None:
    for info in service.list_brushes():
        print(f"{info['id']:<12} {info['name']:<18} {info['description']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point.

    Args:
        argv: Arguments to parse; defaults to sys.argv[1:].

    Returns:
        Process exit code: 0 on success, 2 on an unknown brush or
        malformed input.
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.log_file)
    service = BrushStrokeService()

    if args.list_brushes:
        _print_brushes(service)
        return 0

    if args.points is None and args.path is None and args.input is None:
        parser.error('one of --points, --path, --input or --list-brushes is required')

    try:
        if args.points is not None:
            user_path = parse_points(args.points)
        elif args.path is not None:
            user_path = args.path
        else:
            user_path = _read_input(args.input)

        options = StrokeOptions(
            stroke_width=args.width,
            simplification_tolerance=args.tolerance,
            brush_augmentation=args.augment,
            precision=args.precision,
        )
        result = service.create_stroke(user_path, args.brush, options)
    except (BrushError, ValueError, OSError) as e:
        logger.debug("Stroke generation failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
