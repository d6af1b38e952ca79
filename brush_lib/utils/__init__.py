"""Utility functions for brush stroke geometry.

This module provides the geometry kernel used by the path codec and the
deformation engine. These functions work on plain point sequences and are
also exported for use by external code.

The module exports the following functions:

Arc-length sampling:
    ArcLengthPath: Polyline with a precomputed arc-length table.
    path_length: Total polyline length.
    cumulative_lengths: Arc-length table at each vertex.
    point_at: Point at normalized arc-length parameter.
    tangent_at: Unit tangent with vertex blending.
    normal_at: Counter-clockwise unit normal.

Curves and simplification:
    sample_cubic_bezier: Flatten a cubic Bézier.
    sample_quadratic_bezier: Flatten a quadratic Bézier.
    simplify_points: Radial distance + Douglas-Peucker simplification.

Example usage:
    Sampling a user path::

        from brush_lib.utils import point_at, normal_at

        path = [(0, 0), (50, 0), (50, 50)]
        mid = point_at(path, 0.5)     # the corner
        outward = normal_at(path, 0.5)
"""

from .geometry import (
    ArcLengthPath,
    as_array,
    cumulative_lengths,
    normal_at,
    path_length,
    point_at,
    sample_cubic_bezier,
    sample_quadratic_bezier,
    tangent_at,
)
from .simplify import simplify_points

__all__ = [
    'ArcLengthPath', 'as_array', 'path_length', 'cumulative_lengths',
    'point_at', 'tangent_at', 'normal_at',
    'sample_cubic_bezier', 'sample_quadratic_bezier',
    'simplify_points',
]
