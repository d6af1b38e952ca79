"""Backbone deformation of brush outlines along user paths.

Every brush is authored against the same straight backbone, so projecting
a brush point onto it is a clamp-and-scale of its x coordinate: x gives
the parameter t along the backbone and y the perpendicular offset. The
deformation then samples the user path at the same t and moves the point
along the user path's normal by that offset:

    deformed = point_at(path, t) + normal_at(path, t) * offset.y * stroke_width

Optional augmentation inserts brush points at the parameters of the user
path's vertices, so sharp turns are not cut off by interpolating between
widely spaced brush points.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from ..brushes.brush import Brush
from ..brushes.repository import get_brush
from ..codec.svg_path import shapes_to_path
from ..config import AUGMENTATION_EPSILON, BACKBONE_LENGTH, DEFAULT_STROKE_WIDTH, StrokeOptions
from ..domain.geometry import Point, PointLike, Shape, as_point
from ..utils.geometry import ArcLengthPath, cumulative_lengths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionResult:
    """Position of a brush point relative to the backbone.

    Attributes:
        parameter: t in [0, 1] along the backbone.
        backbone_point: Point on the backbone at t.
        offset: Brush point minus backbone point. x is ~0 for points inside
            the backbone span; y is the perpendicular offset.
    """
    parameter: float
    backbone_point: Point
    offset: Point


def project_to_backbone(point: PointLike) -> ProjectionResult:
    """Project a brush-local point onto the straight backbone."""
    point = as_point(point)
    x = min(max(point.x, 0.0), BACKBONE_LENGTH)
    t = x / BACKBONE_LENGTH
    backbone_point = Point(t * BACKBONE_LENGTH, 0.0)
    return ProjectionResult(t, backbone_point, point - backbone_point)


def _as_path(user_points: Union[ArcLengthPath, Sequence[PointLike]]) -> ArcLengthPath:
    if isinstance(user_points, ArcLengthPath):
        return user_points
    return ArcLengthPath(user_points)


def remap_point(
    point: PointLike,
    user_points: Union[ArcLengthPath, Sequence[PointLike]],
    stroke_width: float = DEFAULT_STROKE_WIDTH,
) -> Point:
    """Move one brush point into the frame of a user path.

    Args:
        point: Brush-local point.
        user_points: The user path, or an ArcLengthPath built from it.
        stroke_width: Multiplier for the perpendicular offset only.

    Returns:
        The deformed point.
    """
    path = _as_path(user_points)
    projection = project_to_backbone(point)
    base = path.point_at(projection.parameter)
    normal = path.normal_at(projection.parameter)
    return base + normal * (projection.offset.y * stroke_width)


def build_parameter_table(user_points: Sequence[PointLike]) -> np.ndarray:
    """Backbone parameters of the user path's vertices.

    Cumulative arc length at every vertex, normalized to
    [0, BACKBONE_LENGTH]. Values closer than AUGMENTATION_EPSILON to the
    previous kept value are dropped and the last entry is exactly
    BACKBONE_LENGTH.

    Returns:
        Ascending array; empty when the path has fewer than 2 points or no
        length.
    """
    cum = cumulative_lengths(user_points)
    if len(cum) < 2 or cum[-1] <= 0:
        return np.zeros(0, dtype=float)

    params = cum / cum[-1] * BACKBONE_LENGTH
    kept = [float(params[0])]
    for value in params[1:]:
        if value - kept[-1] >= AUGMENTATION_EPSILON:
            kept.append(float(value))
    # The last vertex is either kept or within epsilon of the last kept one
    kept[-1] = BACKBONE_LENGTH
    return np.array(kept, dtype=float)


def _clamp_parameter(x: float) -> float:
    return min(max(x, 0.0), BACKBONE_LENGTH)


def _edge_insertions(start: Point, end: Point, table: np.ndarray) -> List[Point]:
    """Points on the edge start-end at table parameters strictly inside it."""
    p0 = _clamp_parameter(start.x)
    p1 = _clamp_parameter(end.x)
    lo, hi = min(p0, p1), max(p0, p1)
    if hi - lo <= 2 * AUGMENTATION_EPSILON:
        return []

    first = int(np.searchsorted(table, lo + AUGMENTATION_EPSILON, side='right'))
    last = int(np.searchsorted(table, hi - AUGMENTATION_EPSILON, side='left'))
    values = table[first:last]
    if p0 > p1:
        values = values[::-1]

    span = end.x - start.x
    return [start.lerp(end, (float(v) - start.x) / span) for v in values]


def augment_shape(shape: Shape, table: np.ndarray) -> Shape:
    """Insert brush points at the given backbone parameters.

    Every edge of the shape (including the closing edge of a closed shape)
    gains a point at each table value that lies strictly inside its
    backbone span, in the edge's own direction so the winding is kept.
    Original points are never removed and ``closed`` is unchanged.

    Args:
        shape: Brush-local shape.
        table: Ascending parameters from build_parameter_table.

    Returns:
        A new shape, or ``shape`` itself when it has fewer than 2 points
        or the table is empty.
    """
    points = shape.points
    if len(points) < 2 or len(table) == 0:
        return shape

    augmented: List[Point] = []
    count = len(points)
    for i, point in enumerate(points):
        augmented.append(point)
        if i + 1 < count:
            augmented.extend(_edge_insertions(point, points[i + 1], table))
        elif shape.closed:
            augmented.extend(_edge_insertions(point, points[0], table))
    return shape.with_points(augmented)


def deform_shape(
    shape: Shape,
    user_points: Union[ArcLengthPath, Sequence[PointLike]],
    stroke_width: float = DEFAULT_STROKE_WIDTH,
) -> Shape:
    """Deform every point of a brush-local shape along a user path."""
    path = _as_path(user_points)
    return shape.with_points(remap_point(p, path, stroke_width) for p in shape.points)


def deform_brush(
    brush: Brush,
    user_points: Sequence[PointLike],
    stroke_width: float = DEFAULT_STROKE_WIDTH,
    augment: bool = False,
) -> List[Shape]:
    """Deform all shapes of a brush along a user path.

    Args:
        brush: Brush to deform. It is never modified.
        user_points: User path vertices.
        stroke_width: Multiplier for perpendicular offsets.
        augment: Insert brush points at the user path's vertices first.

    Returns:
        One deformed shape per brush shape, with the same closed flags.
        Empty when the user path has fewer than 2 points.
    """
    if len(user_points) < 2:
        return []

    path = ArcLengthPath(user_points)
    shapes = brush.shapes
    if augment:
        table = build_parameter_table(path.points)
        shapes = tuple(augment_shape(shape, table) for shape in shapes)
        logger.debug(
            "Augmented brush %r: %d -> %d points (%d parameters)",
            brush.id,
            sum(len(s) for s in brush.shapes),
            sum(len(s) for s in shapes),
            len(table),
        )

    return [deform_shape(shape, path, stroke_width) for shape in shapes]


def resolve_brush(brush: Union[Brush, str]) -> Brush:
    """Return ``brush`` itself or the built-in brush it names.

    Raises:
        BrushNotFoundError: If ``brush`` is a name with no built-in match.
    """
    if isinstance(brush, Brush):
        return brush
    return get_brush(brush)


def create_brush_stroke(
    user_points: Sequence[PointLike],
    brush: Union[Brush, str],
    options: Optional[StrokeOptions] = None,
) -> str:
    """Turn a user path into the path data of a brush stroke.

    Augmented strokes are encoded as exact polylines so the inserted corner
    points survive; otherwise the smoothed encoder is used with the
    configured simplification tolerance.

    Args:
        user_points: User path vertices.
        brush: Brush object or built-in brush id/name.
        options: Width, tolerance, augmentation and precision settings.

    Returns:
        Path data, '' when the user path has fewer than 2 points.

    Raises:
        BrushNotFoundError: If ``brush`` names no built-in brush.

    Example:
        >>> create_brush_stroke([(0, 0), (100, 0)], 'flat',
        ...                     StrokeOptions(brush_augmentation=True))
        'M 0 -10 L 100 -10 L 100 10 L 0 10 Z'
    """
    options = options or StrokeOptions()
    brush = resolve_brush(brush)
    shapes = deform_brush(
        brush, user_points,
        stroke_width=options.stroke_width,
        augment=options.brush_augmentation,
    )
    logger.debug("Deformed brush %r along %d points into %d shape(s)",
                 brush.id, len(user_points), len(shapes))
    return shapes_to_path(
        shapes,
        smooth=not options.brush_augmentation,
        tolerance=options.simplification_tolerance,
        precision=options.precision,
    )
