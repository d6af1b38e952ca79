"""SVG path data <-> point sequences.

Decoding turns the ``d`` attribute of an SVG path into Shapes. Parsing
happens in two steps: ``parse_commands`` tokenizes the string and
normalizes every command to an absolute PathCommand (H/V become L, S/T
become C/Q with their reflected control points resolved), then
``path_to_shapes`` walks those commands and flattens curves.

Encoding goes the other way, either as an exact polyline (``M … L …``) or
as a smoothed chain of quadratic curves through a simplified copy of the
points (``M … Q … T …``).

Supported commands: M L H V C S Q T Z, absolute and relative. Anything
else, including elliptical arcs, raises MalformedPathError.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import DEFAULT_CURVE_SAMPLES, DEFAULT_SIMPLIFICATION_TOLERANCE
from ..domain.geometry import Point, PointLike, Shape, as_point
from ..exceptions import MalformedPathError
from ..utils.geometry import sample_cubic_bezier, sample_quadratic_bezier
from ..utils.simplify import simplify_points

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(
    r'(?P<cmd>[A-Za-z])'
    r'|(?P<num>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)'
    r'|(?P<sep>[\s,]+)'
    r'|(?P<bad>.)',
    re.DOTALL,
)

# Number of arguments consumed by one repetition of each command
ARG_COUNTS = {'M': 2, 'L': 2, 'H': 1, 'V': 1, 'C': 6, 'S': 4, 'Q': 4, 'T': 2, 'Z': 0}


@dataclass(frozen=True)
class PathCommand:
    """One absolute drawing command.

    Attributes:
        code: One of 'M', 'L', 'C', 'Q', 'Z'.
        start: Current point before the command.
        points: Control points followed by the end point. Empty for 'Z',
            whose end point is the subpath start.
        position: Character offset of the source command letter.
    """
    code: str
    start: Point
    points: Tuple[Point, ...]
    position: int = 0

    @property
    def end(self) -> Point:
        return self.points[-1] if self.points else self.start


def _tokenize(path_data: str) -> List[Tuple[str, str, int]]:
    """Split path data into (kind, text, offset) tuples, dropping separators."""
    tokens = []
    for match in _TOKEN_RE.finditer(path_data):
        kind = match.lastgroup
        if kind == 'sep':
            continue
        if kind == 'bad':
            raise MalformedPathError(
                "unexpected character in path data", match.group(), match.start()
            )
        tokens.append((kind, match.group(), match.start()))
    return tokens


def _group_commands(tokens: List[Tuple[str, str, int]]) -> List[Tuple[str, int, List[float]]]:
    """Collect each command letter with the numbers that follow it."""
    groups: List[Tuple[str, int, List[float]]] = []
    for kind, text, pos in tokens:
        if kind == 'cmd':
            if text.upper() not in ARG_COUNTS:
                raise MalformedPathError("unsupported path command", text, pos)
            groups.append((text, pos, []))
        elif not groups:
            raise MalformedPathError("coordinates before the first command", text, pos)
        else:
            groups[-1][2].append(float(text))
    return groups


def _absolute(current: Point, x: float, y: float, relative: bool) -> Point:
    if relative:
        return Point(current.x + x, current.y + y)
    return Point(x, y)


def parse_commands(path_data: str) -> List[PathCommand]:
    """Parse path data into absolute, normalized commands.

    Args:
        path_data: SVG path ``d`` string.

    Returns:
        Commands using only the codes M, L, C, Q and Z.

    Raises:
        MalformedPathError: On unknown characters or commands, wrong
            argument counts, or drawing before the first move-to.
    """
    commands: List[PathCommand] = []
    current = Point(0.0, 0.0)
    subpath_start = Point(0.0, 0.0)
    # Last control point of the previous C/S or Q/T, for reflection
    last_cubic: Optional[Point] = None
    last_quad: Optional[Point] = None
    seen_move = False

    for letter, pos, args in _group_commands(_tokenize(path_data)):
        code = letter.upper()
        relative = letter.islower()
        count = ARG_COUNTS[code]

        if code == 'Z':
            if args:
                raise MalformedPathError("close command takes no arguments", letter, pos)
            if not seen_move:
                raise MalformedPathError("path must start with a move command", letter, pos)
            commands.append(PathCommand('Z', current, (), pos))
            current = subpath_start
            last_cubic = last_quad = None
            continue

        if not args or len(args) % count:
            raise MalformedPathError(
                f"expected a multiple of {count} arguments, got {len(args)}", letter, pos
            )
        if code != 'M' and not seen_move:
            raise MalformedPathError("path must start with a move command", letter, pos)

        for i in range(0, len(args), count):
            chunk = args[i:i + count]

            if code == 'M' and i == 0:
                end = _absolute(current, chunk[0], chunk[1], relative)
                commands.append(PathCommand('M', current, (end,), pos))
                subpath_start = end
                seen_move = True
                last_cubic = last_quad = None
            elif code in ('M', 'L'):
                # Extra coordinate pairs after a move-to are implicit line-tos
                end = _absolute(current, chunk[0], chunk[1], relative)
                commands.append(PathCommand('L', current, (end,), pos))
                last_cubic = last_quad = None
            elif code == 'H':
                x = current.x + chunk[0] if relative else chunk[0]
                end = Point(x, current.y)
                commands.append(PathCommand('L', current, (end,), pos))
                last_cubic = last_quad = None
            elif code == 'V':
                y = current.y + chunk[0] if relative else chunk[0]
                end = Point(current.x, y)
                commands.append(PathCommand('L', current, (end,), pos))
                last_cubic = last_quad = None
            elif code == 'C':
                c1 = _absolute(current, chunk[0], chunk[1], relative)
                c2 = _absolute(current, chunk[2], chunk[3], relative)
                end = _absolute(current, chunk[4], chunk[5], relative)
                commands.append(PathCommand('C', current, (c1, c2, end), pos))
                last_cubic, last_quad = c2, None
            elif code == 'S':
                c1 = current * 2 - last_cubic if last_cubic is not None else current
                c2 = _absolute(current, chunk[0], chunk[1], relative)
                end = _absolute(current, chunk[2], chunk[3], relative)
                commands.append(PathCommand('C', current, (c1, c2, end), pos))
                last_cubic, last_quad = c2, None
            elif code == 'Q':
                c = _absolute(current, chunk[0], chunk[1], relative)
                end = _absolute(current, chunk[2], chunk[3], relative)
                commands.append(PathCommand('Q', current, (c, end), pos))
                last_cubic, last_quad = None, c
            else:  # T
                c = current * 2 - last_quad if last_quad is not None else current
                end = _absolute(current, chunk[0], chunk[1], relative)
                commands.append(PathCommand('Q', current, (c, end), pos))
                last_cubic, last_quad = None, c
            current = end

    return commands


def path_to_shapes(path_data: str, samples: int = DEFAULT_CURVE_SAMPLES) -> List[Shape]:
    """Decode SVG path data into shapes.

    Each move-to starts a new shape. A shape is closed only when an
    explicit Z terminates it; no closing point is appended. Curves are
    flattened into ``samples`` points each. An unterminated shape still
    open at the end of the data is returned with ``closed=False``.

    Args:
        path_data: SVG path ``d`` string.
        samples: Points emitted per curve command (>= 1).

    Returns:
        Shapes in path order.

    Raises:
        MalformedPathError: If the data cannot be parsed.

    Example:
        >>> shapes = path_to_shapes("M0,0 L10,0 L10,10 Z")
        >>> shapes[0].closed, len(shapes[0])
        (True, 3)
    """
    if samples < 1:
        raise MalformedPathError(f"curve samples must be >= 1, got {samples}")

    shapes: List[Shape] = []
    current: Optional[List[Point]] = None

    for cmd in parse_commands(path_data):
        if cmd.code == 'M':
            if current is not None:
                shapes.append(Shape(tuple(current), closed=False))
            current = [cmd.end]
            continue

        if cmd.code == 'Z':
            if current:
                shapes.append(Shape(tuple(current), closed=True))
            current = None
            continue

        if current is None:
            # Drawing straight after Z continues from the subpath start
            current = [cmd.start]

        if cmd.code == 'L':
            current.append(cmd.end)
        elif cmd.code == 'C':
            current.extend(sample_cubic_bezier(cmd.start, *cmd.points, samples))
        else:
            current.extend(sample_quadratic_bezier(cmd.start, *cmd.points, samples))

    if current is not None:
        shapes.append(Shape(tuple(current), closed=False))

    logger.debug("Decoded %d shape(s) from %d chars of path data", len(shapes), len(path_data))
    return shapes


def format_number(value: float, precision: Optional[int] = None) -> str:
    """Format a coordinate for path output.

    With ``precision=None`` the shortest exact representation is used and
    integral values drop their fractional part. Otherwise the value is
    rounded to ``precision`` decimals with trailing zeros removed.
    """
    value = float(value)
    if precision is None:
        if value.is_integer():
            return str(int(value))
        return repr(value)
    text = f"{value:.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'
    return text


def _xy(point: Point, precision: Optional[int]) -> str:
    return f"{format_number(point.x, precision)} {format_number(point.y, precision)}"


def points_to_path(points: Sequence[PointLike], precision: Optional[int] = None) -> str:
    """Encode points as a polyline: ``M x0 y0 L x1 y1 …``.

    Lossless with the default precision. Empty input yields ''.
    """
    pts = [as_point(p) for p in points]
    if not pts:
        return ''
    parts = [f"M {_xy(pts[0], precision)}"]
    parts.extend(f"L {_xy(p, precision)}" for p in pts[1:])
    return ' '.join(parts)


def points_to_smooth_path(
    points: Sequence[PointLike],
    tolerance: float = DEFAULT_SIMPLIFICATION_TOLERANCE,
    precision: Optional[int] = None,
) -> str:
    """Encode points as a smooth chain of quadratic Bézier curves.

    The points are simplified first. Every retained interior point then
    becomes the control point of a Q segment ending at the midpoint between
    it and its successor, and a T segment finishes at the last point.

    Args:
        points: Points to pass near.
        tolerance: Simplification tolerance; controls output size only.
        precision: Decimal places, or None for exact output.

    Returns:
        Path data. 0, 1 and 2 points give '', a bare move-to, and a single
        line respectively.
    """
    pts = [as_point(p) for p in points]
    if not pts:
        return ''
    if len(pts) == 1:
        return f"M {_xy(pts[0], precision)}"
    if len(pts) == 2:
        return f"M {_xy(pts[0], precision)} L {_xy(pts[1], precision)}"

    simplified = simplify_points(pts, tolerance)
    parts = [f"M {_xy(simplified[0], precision)}"]
    for current, following in zip(simplified[1:-1], simplified[2:]):
        mid = (current + following) / 2
        parts.append(f"Q {_xy(current, precision)} {_xy(mid, precision)}")
    parts.append(f"T {_xy(simplified[-1], precision)}")
    return ' '.join(parts)


def shapes_to_path(
    shapes: Iterable[Shape],
    smooth: bool = True,
    tolerance: float = DEFAULT_SIMPLIFICATION_TOLERANCE,
    precision: Optional[int] = None,
) -> str:
    """Encode several shapes into one path string.

    Each shape is encoded on its own (smoothed or as a polyline) and a Z is
    appended after every closed shape. Empty shapes are skipped.
    """
    parts = []
    for shape in shapes:
        if smooth:
            encoded = points_to_smooth_path(shape.points, tolerance, precision)
        else:
            encoded = points_to_path(shape.points, precision)
        if not encoded:
            continue
        if shape.closed:
            encoded += ' Z'
        parts.append(encoded)
    return ' '.join(parts)
