"""Arc-length geometry over polylines.

This module provides the sampling functions the deformation engine uses to
build a moving coordinate frame along a user path, plus the Bézier
evaluators the path decoder uses to flatten curves.

The module provides the following functions:
    path_length: Total length of a polyline.
    cumulative_lengths: Arc-length table (one entry per vertex).
    point_at: Point at a normalized arc-length parameter.
    tangent_at: Unit direction at a normalized arc-length parameter.
    normal_at: Tangent rotated 90 degrees counter-clockwise.
    sample_cubic_bezier: Flatten a cubic Bézier segment.
    sample_quadratic_bezier: Flatten a quadratic Bézier segment.

All functions accept Points or (x, y) pairs and never raise on degenerate
input: empty paths, single points and zero-length segments fall back to
well-defined values.

Example usage:
    Sampling a path::

        from brush_lib.utils.geometry import point_at, tangent_at, normal_at

        path = [(0, 0), (10, 0)]
        point_at(path, 0.5)    # Point(x=5.0, y=0.0)
        tangent_at(path, 0.5)  # Point(x=1.0, y=0.0)
        normal_at(path, 0.5)   # Point(x=-0.0, y=1.0)
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..config import VERTEX_BLEND_FRACTION
from ..domain.geometry import Point, PointLike, as_point

_DEFAULT_TANGENT = Point(1.0, 0.0)


def as_array(points: Sequence[PointLike]) -> np.ndarray:
    """Convert points to an (N, 2) float array."""
    if len(points) == 0:
        return np.zeros((0, 2), dtype=float)
    return np.array([as_point(p).to_tuple() for p in points], dtype=float)


def _segment_lengths(arr: np.ndarray) -> np.ndarray:
    return np.linalg.norm(np.diff(arr, axis=0), axis=1)


def cumulative_lengths(points: Sequence[PointLike]) -> np.ndarray:
    """Cumulative arc length at each vertex.

    Args:
        points: Polyline vertices.

    Returns:
        Array of length N whose first entry is 0 and last entry is the
        total length. Empty for empty input.
    """
    arr = as_array(points)
    if len(arr) == 0:
        return np.zeros(0, dtype=float)
    return np.concatenate([[0.0], np.cumsum(_segment_lengths(arr))])


def path_length(points: Sequence[PointLike]) -> float:
    """Sum of the Euclidean lengths of consecutive segments.

    Returns 0 for fewer than 2 points.
    """
    if len(points) < 2:
        return 0.0
    return float(_segment_lengths(as_array(points)).sum())


class ArcLengthPath:
    """A polyline with its arc-length table precomputed.

    Sampling many parameters along the same path (as the deformation
    engine does for every brush point) reuses the table instead of
    rebuilding it per call.

    Attributes:
        points: The vertices as Points.
        total_length: Sum of all segment lengths.
    """

    def __init__(self, points: Sequence[PointLike]):
        self.points = [as_point(p) for p in points]
        self._arr = as_array(self.points)
        if len(self._arr) >= 2:
            self._seg_len = _segment_lengths(self._arr)
        else:
            self._seg_len = np.zeros(0, dtype=float)
        self._cum = np.concatenate([[0.0], np.cumsum(self._seg_len)])
        self._live = np.flatnonzero(self._seg_len > 0)
        self.total_length = float(self._cum[-1])

    def __len__(self) -> int:
        return len(self.points)

    def point_at(self, t: float) -> Point:
        """Sample at normalized arc-length parameter t.

        t <= 0 returns the first point and t >= 1 the last point exactly.
        An empty path yields Point(0, 0); a single point or a path of zero
        length yields its first point.
        """
        if not self.points:
            return Point(0.0, 0.0)
        if len(self.points) == 1 or t <= 0:
            return self.points[0]
        if t >= 1:
            return self.points[-1]
        if self.total_length <= 0:
            return self.points[0]

        cum = self._cum
        target = t * self.total_length
        # First vertex whose cumulative length reaches the target; the
        # segment ending there has positive length because cum[i-1] < target
        i = int(np.searchsorted(cum, target, side='left'))
        i = min(max(i, 1), len(self._arr) - 1)
        seg_len = cum[i] - cum[i - 1]
        frac = (target - cum[i - 1]) / seg_len if seg_len > 0 else 0.0
        x, y = self._arr[i - 1] + (self._arr[i] - self._arr[i - 1]) * frac
        return Point(float(x), float(y))

    def _direction(self, index: int) -> np.ndarray:
        return (self._arr[index + 1] - self._arr[index]) / self._seg_len[index]

    def _blend_weight(self, distance: float, seg: int, neighbour: int) -> float:
        window = VERTEX_BLEND_FRACTION * min(self._seg_len[seg], self._seg_len[neighbour])
        if distance >= window:
            return 0.0
        return 0.5 * (1.0 - distance / window)

    def tangent_at(self, t: float) -> Point:
        """Unit tangent at normalized arc-length parameter t.

        The enclosing segment is located the same way point_at locates it,
        ignoring zero-length segments. Near an interior vertex the incoming
        and outgoing directions are blended and renormalized so offset
        geometry does not kink there. The blend window on each side is
        VERTEX_BLEND_FRACTION of the shorter adjacent segment; the weight of
        the neighbouring direction falls linearly from one half on the
        vertex to zero at the window edge, so the tangent is continuous
        along the path. At the two path ends the one-sided segment
        direction is returned unmodified. Paths with fewer than 2 points or
        zero length yield (1, 0).
        """
        live = self._live
        if len(live) == 0:
            return _DEFAULT_TANGENT

        cum = self._cum
        target = min(max(t, 0.0), 1.0) * self.total_length

        # Index into live segments of the first one ending at or after target
        k = int(np.searchsorted(cum[live + 1], target, side='left'))
        k = min(k, len(live) - 1)
        seg = live[k]
        direction = self._direction(seg)

        neighbour = None
        weight = 0.0
        if k + 1 < len(live):
            neighbour = live[k + 1]
            weight = self._blend_weight(max(cum[seg + 1] - target, 0.0), seg, neighbour)
        if weight == 0.0 and k > 0:
            neighbour = live[k - 1]
            weight = self._blend_weight(max(target - cum[seg], 0.0), seg, neighbour)

        if weight > 0.0:
            merged = (1.0 - weight) * direction + weight * self._direction(neighbour)
            norm = np.linalg.norm(merged)
            # Opposite directions cancel out on the vertex; keep the one-sided tangent
            if norm > 1e-12:
                direction = merged / norm

        return Point(float(direction[0]), float(direction[1]))

    def normal_at(self, t: float) -> Point:
        """Tangent rotated 90 degrees counter-clockwise."""
        return self.tangent_at(t).perpendicular()


def point_at(points: Sequence[PointLike], t: float) -> Point:
    """Sample a polyline at normalized arc-length parameter t.

    Args:
        points: Polyline vertices.
        t: Parameter in [0, 1]. Values outside are clamped, so t <= 0
            returns the first point and t >= 1 the last point exactly.

    Returns:
        Interpolated point. See ArcLengthPath.point_at for degenerate
        inputs.
    """
    return ArcLengthPath(points).point_at(t)


def tangent_at(points: Sequence[PointLike], t: float) -> Point:
    """Unit tangent of a polyline at normalized arc-length parameter t.

    Directions are averaged at interior vertices and one-sided at the path
    ends; see ArcLengthPath.tangent_at.
    """
    return ArcLengthPath(points).tangent_at(t)


def normal_at(points: Sequence[PointLike], t: float) -> Point:
    """Unit normal at t: the tangent rotated 90 degrees counter-clockwise."""
    return ArcLengthPath(points).normal_at(t)


def _bezier_parameters(samples: int) -> np.ndarray:
    # Start point is already part of the outline, so u runs 1/n .. 1
    return np.arange(1, samples + 1, dtype=float) / samples


def sample_cubic_bezier(
    p0: PointLike, p1: PointLike, p2: PointLike, p3: PointLike, samples: int
) -> List[Point]:
    """Evenly u-spaced points on a cubic Bézier curve.

    B(u) = (1-u)³·p0 + 3(1-u)²u·p1 + 3(1-u)u²·p2 + u³·p3

    Args:
        p0, p1, p2, p3: Start point, two control points and end point.
        samples: Number of points to produce, at u = 1/samples .. 1.

    Returns:
        ``samples`` points; the last equals p3. Empty if samples < 1.
    """
    if samples < 1:
        return []
    u = _bezier_parameters(samples)[:, None]
    mu = 1.0 - u
    ctrl = as_array([p0, p1, p2, p3])
    pts = (mu ** 3 * ctrl[0] + 3 * mu ** 2 * u * ctrl[1]
           + 3 * mu * u ** 2 * ctrl[2] + u ** 3 * ctrl[3])
    return [Point(float(x), float(y)) for x, y in pts]


def sample_quadratic_bezier(
    p0: PointLike, p1: PointLike, p2: PointLike, samples: int
) -> List[Point]:
    """Evenly u-spaced points on a quadratic Bézier curve.

    B(u) = (1-u)²·p0 + 2(1-u)u·p1 + u²·p2
    """
    if samples < 1:
        return []
    u = _bezier_parameters(samples)[:, None]
    mu = 1.0 - u
    ctrl = as_array([p0, p1, p2])
    pts = mu ** 2 * ctrl[0] + 2 * mu * u * ctrl[1] + u ** 2 * ctrl[2]
    return [Point(float(x), float(y)) for x, y in pts]
