"""Domain objects for brush strokes.

This module provides the value objects shared by every part of the
package: points, bounding boxes, outline shapes and the user path that is
collected while a gesture is drawn.

The module exports the following classes:
    Point: Immutable 2D point with vector operations.
    BBox: Immutable bounding box.
    Shape: Ordered, immutable outline with a ``closed`` flag.
    UserPath: Incrementally built input path, frozen when the gesture ends.

Example usage:
    Working with geometry::

        from brush_lib.domain import Point, Shape, UserPath

        rect = Shape.from_tuples([(0, -5), (100, -5), (100, 5), (0, 5)], closed=True)
        print(rect.bbox.to_tuple())

        path = UserPath()
        path.add((0, 0))
        path.add(Point(50, 20))
        points = path.freeze()
"""

from .geometry import BBox, Point, PointLike, Shape, UserPath, as_point

__all__ = [
    'Point', 'PointLike', 'BBox', 'Shape', 'UserPath', 'as_point',
]
