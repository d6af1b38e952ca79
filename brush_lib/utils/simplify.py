"""Polyline simplification.

Two passes, both measured against the squared tolerance:
    1. Radial distance: drop points closer than the tolerance to the last
       kept point. Cheap, and removes pointer-event jitter.
    2. Ramer-Douglas-Peucker: keep the point farthest from the chord
       between two kept points while it deviates by more than the
       tolerance.

The first and last points are always kept, so anchors of the output are a
subset of the input.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..domain.geometry import Point, PointLike, as_point
from .geometry import as_array


def _radial_mask(arr: np.ndarray, sq_tolerance: float) -> np.ndarray:
    mask = np.zeros(len(arr), dtype=bool)
    mask[0] = True
    prev = arr[0]
    for i in range(1, len(arr)):
        delta = arr[i] - prev
        if float(delta @ delta) > sq_tolerance:
            mask[i] = True
            prev = arr[i]
    mask[-1] = True
    return mask


def _segment_sq_distances(pts: np.ndarray, start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """Squared distance of each point to the segment start-end."""
    line = end - start
    sq_len = float(line @ line)
    if sq_len == 0:
        diff = pts - start
        return np.einsum('ij,ij->i', diff, diff)
    t = np.clip((pts - start) @ line / sq_len, 0.0, 1.0)
    proj = start + t[:, None] * line
    diff = pts - proj
    return np.einsum('ij,ij->i', diff, diff)


def _douglas_peucker_mask(arr: np.ndarray, sq_tolerance: float) -> np.ndarray:
    mask = np.zeros(len(arr), dtype=bool)
    mask[0] = True
    mask[-1] = True
    stack = [(0, len(arr) - 1)]
    while stack:
        first, last = stack.pop()
        if last <= first + 1:
            continue
        dists = _segment_sq_distances(arr[first + 1:last], arr[first], arr[last])
        idx = int(np.argmax(dists))
        if dists[idx] > sq_tolerance:
            split = first + 1 + idx
            mask[split] = True
            stack.append((first, split))
            stack.append((split, last))
    return mask


def simplify_points(
    points: Sequence[PointLike],
    tolerance: float,
    high_quality: bool = False,
) -> List[Point]:
    """Reduce the number of points in a polyline.

    Args:
        points: Polyline vertices.
        tolerance: Maximum deviation, in path units, of a dropped point from
            the simplified line.
        high_quality: Skip the radial distance pre-pass and run only
            Douglas-Peucker. Slower, slightly more faithful.

    Returns:
        Retained points in their original order. Inputs of 2 points or
        fewer are returned unchanged.

    Example:
        >>> simplify_points([(0, 0), (1, 0.01), (2, 0)], tolerance=0.3)
        [Point(x=0.0, y=0.0), Point(x=2.0, y=0.0)]
    """
    pts = [as_point(p) for p in points]
    if len(pts) <= 2:
        return pts

    sq_tolerance = tolerance * tolerance
    arr = as_array(pts)
    keep = np.arange(len(pts))
    if not high_quality:
        keep = keep[_radial_mask(arr, sq_tolerance)]
        arr = arr[keep]
    keep = keep[_douglas_peucker_mask(arr, sq_tolerance)]
    return [pts[i] for i in keep]
