"""Unit tests for geometry value objects and the arc-length kernel.

Tests brush_lib.domain.geometry:
    - Point: vector arithmetic and conversions
    - BBox: construction from points
    - Shape: immutability, length, closed flag handling
    - UserPath: incremental capture and freezing

Tests brush_lib.utils.geometry:
    - path_length / cumulative_lengths: arc-length tables
    - point_at: arc-length parameterized sampling
    - tangent_at / normal_at: frames with vertex blending
    - sample_cubic_bezier / sample_quadratic_bezier: curve flattening
"""

import dataclasses
import math
import unittest

import numpy as np

from brush_lib.domain.geometry import BBox, Point, Shape, UserPath, as_point
from brush_lib.exceptions import FrozenPathError
from brush_lib.utils.geometry import (
    ArcLengthPath,
    cumulative_lengths,
    normal_at,
    path_length,
    point_at,
    sample_cubic_bezier,
    sample_quadratic_bezier,
    tangent_at,
)

CORNER = [(0.0, 0.0), (50.0, 0.0), (50.0, 50.0)]


class TestPoint(unittest.TestCase):
    """Tests for the Point value object."""

    def test_arithmetic(self):
        """Addition, subtraction and scaling work component-wise."""
        a = Point(1, 2)
        b = Point(3, 5)
        self.assertEqual(a + b, Point(4, 7))
        self.assertEqual(b - a, Point(2, 3))
        self.assertEqual(a * 3, Point(3, 6))
        self.assertEqual(b / 2, Point(1.5, 2.5))

    def test_dot_and_length(self):
        """Dot product and vector length (3-4-5 triangle)."""
        self.assertEqual(Point(1, 2).dot(Point(3, 4)), 11)
        self.assertEqual(Point(3, 4).length(), 5.0)
        self.assertEqual(Point(0, 0).distance_to(Point(3, 4)), 5.0)

    def test_normalized(self):
        """Normalized vectors have unit length; zero stays zero."""
        n = Point(3, 4).normalized()
        self.assertAlmostEqual(n.x, 0.6)
        self.assertAlmostEqual(n.y, 0.8)
        self.assertEqual(Point(0, 0).normalized(), Point(0, 0))

    def test_perpendicular_is_counter_clockwise(self):
        """(x, y) rotates to (-y, x)."""
        self.assertEqual(Point(1, 0).perpendicular(), Point(0, 1))
        self.assertEqual(Point(0, 1).perpendicular(), Point(-1, 0))

    def test_lerp(self):
        """Interpolation at 0, 0.5 and 1."""
        a, b = Point(0, 0), Point(10, -4)
        self.assertEqual(a.lerp(b, 0), a)
        self.assertEqual(a.lerp(b, 0.5), Point(5, -2))
        self.assertEqual(a.lerp(b, 1), b)

    def test_conversions(self):
        """Tuple and list conversions round-trip."""
        p = Point(1.5, -2.0)
        self.assertEqual(Point.from_tuple(p.to_tuple()), p)
        self.assertEqual(Point.from_list(p.to_list()), p)
        self.assertEqual(as_point((1.5, -2)), p)
        self.assertIs(as_point(p), p)

    def test_frozen(self):
        """Points cannot be modified."""
        with self.assertRaises(dataclasses.FrozenInstanceError):
            Point(1, 2).x = 5


class TestBBox(unittest.TestCase):
    """Tests for the BBox value object."""

    def test_from_points(self):
        """Bounding box of scattered points."""
        bbox = BBox.from_points([Point(1, 5), Point(-2, 3), Point(4, -1)])
        self.assertEqual(bbox.to_tuple(), (-2, -1, 4, 5))
        self.assertEqual(bbox.width, 6)
        self.assertEqual(bbox.height, 6)
        self.assertTrue(bbox.contains(Point(0, 0)))
        self.assertFalse(bbox.contains(Point(5, 0)))

    def test_from_no_points(self):
        """An empty point set gives a zero box."""
        self.assertEqual(BBox.from_points([]).to_tuple(), (0, 0, 0, 0))


class TestShape(unittest.TestCase):
    """Tests for the Shape value object."""

    def test_coerces_pairs_to_points(self):
        """Shapes accept (x, y) pairs and store Points in a tuple."""
        shape = Shape([(0, 0), (1, 2)])
        self.assertIsInstance(shape.points, tuple)
        self.assertEqual(shape[1], Point(1, 2))
        self.assertEqual(len(shape), 2)
        self.assertFalse(shape.closed)

    def test_length_open_and_closed(self):
        """Closed shapes include the closing edge in their length."""
        square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        self.assertEqual(Shape(square).length(), 30)
        self.assertEqual(Shape(square, closed=True).length(), 40)

    def test_with_points_keeps_closed(self):
        """with_points returns a new shape with the same closed flag."""
        shape = Shape.from_tuples([(0, 0), (1, 0), (1, 1)], closed=True)
        moved = shape.with_points(p + Point(1, 1) for p in shape)
        self.assertTrue(moved.closed)
        self.assertEqual(moved[0], Point(1, 1))
        self.assertEqual(shape[0], Point(0, 0))

    def test_list_round_trip(self):
        """to_list and from_list are inverse."""
        shape = Shape.from_list([[0, 0], [2.5, 1]], closed=True)
        self.assertEqual(shape.to_list(), [[0.0, 0.0], [2.5, 1.0]])
        self.assertEqual(shape.bbox.to_tuple(), (0, 0, 2.5, 1))


class TestUserPath(unittest.TestCase):
    """Tests for UserPath gesture capture."""

    def test_add_then_freeze(self):
        """Points accumulate until the path is frozen."""
        path = UserPath()
        path.add((0, 0))
        path.add(Point(5, 5))
        self.assertEqual(len(path), 2)
        self.assertEqual(path.freeze(), (Point(0, 0), Point(5, 5)))
        self.assertTrue(path.frozen)

    def test_add_after_freeze_raises(self):
        """A finished gesture rejects further points."""
        path = UserPath.from_points([(0, 0), (1, 1)])
        with self.assertRaises(FrozenPathError):
            path.add((2, 2))
        self.assertEqual(len(path), 2)

    def test_points_snapshot_is_immutable(self):
        """points returns a tuple that does not track later additions."""
        path = UserPath([(0, 0)])
        snapshot = path.points
        path.add((1, 1))
        self.assertEqual(len(snapshot), 1)
        self.assertIsInstance(snapshot, tuple)


class TestPathLength(unittest.TestCase):
    """Tests for path_length and cumulative_lengths."""

    def test_single_segment(self):
        """3-4-5 triangle hypotenuse."""
        self.assertEqual(path_length([(0, 0), (3, 4)]), 5.0)

    def test_polyline(self):
        """Sum over consecutive segments."""
        self.assertEqual(path_length(CORNER), 100.0)

    def test_degenerate(self):
        """Fewer than 2 points have zero length."""
        self.assertEqual(path_length([]), 0.0)
        self.assertEqual(path_length([(1, 1)]), 0.0)

    def test_cumulative_lengths(self):
        """Table starts at 0 and ends at the total length."""
        np.testing.assert_allclose(cumulative_lengths(CORNER), [0, 50, 100])
        self.assertEqual(len(cumulative_lengths([])), 0)


class TestPointAt(unittest.TestCase):
    """Tests for point_at arc-length sampling."""

    def test_midpoint_of_segment(self):
        """Halfway along a single segment."""
        self.assertEqual(point_at([[0, 0], [10, 0]], 0.5), Point(5, 0))

    def test_endpoints_exact(self):
        """t <= 0 and t >= 1 return the first and last points exactly."""
        path = [(1.1, 2.2), (7.7, -3.3), (9.9, 4.4)]
        self.assertEqual(point_at(path, 0), Point(1.1, 2.2))
        self.assertEqual(point_at(path, -0.5), Point(1.1, 2.2))
        self.assertEqual(point_at(path, 1), Point(9.9, 4.4))
        self.assertEqual(point_at(path, 1.5), Point(9.9, 4.4))

    def test_arc_length_parameterization(self):
        """t measures distance along the whole path, not per segment."""
        self.assertEqual(point_at(CORNER, 0.5), Point(50, 0))
        p = point_at(CORNER, 0.75)
        self.assertAlmostEqual(p.x, 50.0)
        self.assertAlmostEqual(p.y, 25.0)

    def test_degenerate_paths(self):
        """Empty, single-point and zero-length paths have fallbacks."""
        self.assertEqual(point_at([], 0.5), Point(0, 0))
        self.assertEqual(point_at([(3, 4)], 0.5), Point(3, 4))
        self.assertEqual(point_at([(3, 4), (3, 4)], 0.5), Point(3, 4))

    def test_skips_zero_length_segments(self):
        """Repeated vertices do not disturb sampling."""
        path = [(0, 0), (10, 0), (10, 0), (20, 0)]
        self.assertEqual(point_at(path, 0.5), Point(10, 0))
        p = point_at(path, 0.75)
        self.assertAlmostEqual(p.x, 15.0)


class TestTangentAndNormal(unittest.TestCase):
    """Tests for tangent_at and normal_at."""

    def test_straight_segment(self):
        """Unit tangent along x, normal rotated counter-clockwise."""
        path = [[0, 0], [10, 0]]
        self.assertEqual(tangent_at(path, 0.5), Point(1, 0))
        self.assertEqual(normal_at(path, 0.5), Point(0, 1))

    def test_vertical_segment(self):
        """Normal of an upward path points to -x."""
        self.assertEqual(normal_at([(0, 0), (0, 10)], 0.3), Point(-1, 0))

    def test_averaged_at_interior_vertex(self):
        """At the corner, incoming and outgoing directions are blended."""
        t = tangent_at(CORNER, 0.5)
        self.assertAlmostEqual(t.x, math.sqrt(0.5))
        self.assertAlmostEqual(t.y, math.sqrt(0.5))
        self.assertAlmostEqual(t.length(), 1.0)

    def test_one_sided_away_from_vertices(self):
        """Between vertices the enclosing segment's direction is used."""
        self.assertEqual(tangent_at(CORNER, 0.25), Point(1, 0))
        self.assertEqual(tangent_at(CORNER, 0.75), Point(0, 1))

    def test_blended_near_interior_vertex(self):
        """Samples just before a corner already lean into the turn."""
        # 5 units before the corner, inside the 12.5 unit window: weight 0.3
        t = tangent_at(CORNER, 0.45)
        norm = math.hypot(0.7, 0.3)
        self.assertAlmostEqual(t.x, 0.7 / norm)
        self.assertAlmostEqual(t.y, 0.3 / norm)
        after = tangent_at(CORNER, 0.55)
        self.assertAlmostEqual(after.x, 0.3 / norm)
        self.assertAlmostEqual(after.y, 0.7 / norm)

    def test_blend_is_continuous(self):
        """The tangent turns gradually across the corner."""
        angles = [math.atan2(tangent_at(CORNER, t).y, tangent_at(CORNER, t).x)
                  for t in np.linspace(0.3, 0.7, 81)]
        steps = np.abs(np.diff(angles))
        self.assertLess(steps.max(), math.radians(5))
        self.assertAlmostEqual(angles[0], 0.0)
        self.assertAlmostEqual(angles[-1], math.pi / 2)

    def test_blend_window_follows_shorter_segment(self):
        """A short neighbouring segment narrows the window."""
        path = [(0, 0), (96, 0), (96, 4)]
        # 2 units before the vertex, outside a 1 unit window
        self.assertEqual(tangent_at(path, 0.94), Point(1, 0))

    def test_one_sided_at_path_ends(self):
        """Path ends are not blended with anything."""
        self.assertEqual(tangent_at(CORNER, 0), Point(1, 0))
        self.assertEqual(tangent_at(CORNER, 1), Point(0, 1))

    def test_zero_length_segment_ignored(self):
        """A repeated vertex does not break vertex blending."""
        path = [(0, 0), (10, 0), (10, 0), (20, 0)]
        self.assertEqual(tangent_at(path, 0.5), Point(1, 0))

    def test_reversal_keeps_one_sided_direction(self):
        """Opposite directions cancel; the incoming direction is kept."""
        path = [(0, 0), (10, 0), (0, 0)]
        self.assertEqual(tangent_at(path, 0.5), Point(1, 0))

    def test_degenerate_fallback(self):
        """Paths without length fall back to (1, 0)."""
        self.assertEqual(tangent_at([], 0.5), Point(1, 0))
        self.assertEqual(tangent_at([(5, 5)], 0.5), Point(1, 0))
        self.assertEqual(tangent_at([(5, 5), (5, 5)], 0.5), Point(1, 0))

    def test_arc_length_path_matches_functions(self):
        """The precomputed path samples like the module functions."""
        path = ArcLengthPath(CORNER)
        self.assertEqual(path.total_length, 100.0)
        self.assertEqual(len(path), 3)
        for t in (0.0, 0.2, 0.5, 0.9, 1.0):
            self.assertEqual(path.point_at(t), point_at(CORNER, t))
            self.assertEqual(path.normal_at(t), normal_at(CORNER, t))


class TestBezierSampling(unittest.TestCase):
    """Tests for Bézier flattening."""

    def test_cubic(self):
        """Samples at u = 0.5 and u = 1."""
        pts = sample_cubic_bezier((0, 0), (0, 10), (10, 10), (10, 0), 2)
        self.assertEqual(len(pts), 2)
        self.assertAlmostEqual(pts[0].x, 5.0)
        self.assertAlmostEqual(pts[0].y, 7.5)
        self.assertEqual(pts[1], Point(10, 0))

    def test_quadratic(self):
        """Samples at u = 0.5 and u = 1."""
        pts = sample_quadratic_bezier((0, 0), (5, 10), (10, 0), 2)
        self.assertAlmostEqual(pts[0].x, 5.0)
        self.assertAlmostEqual(pts[0].y, 5.0)
        self.assertEqual(pts[1], Point(10, 0))

    def test_sample_count(self):
        """One point per sample, none for samples < 1."""
        self.assertEqual(len(sample_cubic_bezier((0, 0), (1, 1), (2, 1), (3, 0), 7)), 7)
        self.assertEqual(sample_cubic_bezier((0, 0), (1, 1), (2, 1), (3, 0), 0), [])
        self.assertEqual(sample_quadratic_bezier((0, 0), (1, 1), (2, 0), 0), [])


if __name__ == '__main__':
    unittest.main()
