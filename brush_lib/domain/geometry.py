"""Geometric value objects for brush strokes."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union
import math

from ..exceptions import FrozenPathError


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar)

    def dot(self, other: Point) -> float:
        """Dot product treating points as vectors."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Length when treated as a vector from origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Point:
        """Unit vector in same direction."""
        length = self.length()
        if length < 1e-12:
            return Point(0.0, 0.0)
        return self / length

    def perpendicular(self) -> Point:
        """Vector rotated 90 degrees counter-clockwise."""
        return Point(-self.y, self.x)

    def lerp(self, other: Point, t: float) -> Point:
        """Linear interpolation towards another point."""
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]

    @classmethod
    def from_tuple(cls, t: Tuple[float, float]) -> Point:
        """Create from tuple."""
        return cls(float(t[0]), float(t[1]))

    @classmethod
    def from_list(cls, lst: List[float]) -> Point:
        """Create from list."""
        return cls(float(lst[0]), float(lst[1]))


PointLike = Union[Point, Sequence[float]]


def as_point(value: PointLike) -> Point:
    """Coerce a Point or an (x, y) pair into a Point."""
    if isinstance(value, Point):
        return value
    return Point.from_tuple(value)


@dataclass(frozen=True)
class BBox:
    """Immutable bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Point:
        return Point(
            (self.x_min + self.x_max) / 2,
            (self.y_min + self.y_max) / 2
        )

    def contains(self, point: Point) -> bool:
        """Check if point is inside bounding box."""
        return (self.x_min <= point.x <= self.x_max and
                self.y_min <= point.y <= self.y_max)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Convert to tuple for compatibility."""
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> BBox:
        """Create bounding box containing all points."""
        points = list(points)
        if not points:
            return cls(0, 0, 0, 0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True)
class Shape:
    """An ordered outline of points.

    When ``closed`` is set, an implicit edge joins the last point back to
    the first one. Shapes never change after construction; operations that
    move points return a new Shape.
    """
    points: Tuple[Point, ...] = ()
    closed: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(as_point(p) for p in self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx) -> Point:
        return self.points[idx]

    @property
    def bbox(self) -> BBox:
        """Bounding box of the outline."""
        return BBox.from_points(self.points)

    def length(self) -> float:
        """Arc length along the points, including the closing edge if closed."""
        total = 0.0
        for i in range(1, len(self.points)):
            total += self.points[i].distance_to(self.points[i - 1])
        if self.closed and len(self.points) > 2:
            total += self.points[-1].distance_to(self.points[0])
        return total

    def with_points(self, points: Iterable[PointLike]) -> Shape:
        """Return a shape with new points and the same closed flag."""
        return Shape(tuple(points), self.closed)

    def to_list(self) -> List[List[float]]:
        """Convert to nested list for JSON serialization."""
        return [p.to_list() for p in self.points]

    @classmethod
    def from_list(cls, lst: List[List[float]], closed: bool = False) -> Shape:
        """Create from nested list."""
        return cls(tuple(Point.from_list(p) for p in lst), closed)

    @classmethod
    def from_tuples(cls, tuples: List[Tuple[float, float]], closed: bool = False) -> Shape:
        """Create from list of tuples."""
        return cls(tuple(Point.from_tuple(t) for t in tuples), closed)


class UserPath:
    """Points captured during a drawing gesture.

    Points are appended while the gesture is in progress. Once ``freeze()``
    is called the path is final and further additions raise
    FrozenPathError.
    """

    def __init__(self, points: Iterable[PointLike] = (), frozen: bool = False):
        self._points: List[Point] = [as_point(p) for p in points]
        self.frozen = frozen

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    @property
    def points(self) -> Tuple[Point, ...]:
        """Snapshot of the captured points."""
        return tuple(self._points)

    def add(self, point: PointLike) -> None:
        """Append a point to an in-progress gesture."""
        if self.frozen:
            raise FrozenPathError("cannot add points to a finished path")
        self._points.append(as_point(point))

    def freeze(self) -> Tuple[Point, ...]:
        """End the gesture and return the final points."""
        self.frozen = True
        return self.points

    @classmethod
    def from_points(cls, points: Iterable[PointLike], frozen: bool = True) -> UserPath:
        """Create a path from existing points, frozen by default."""
        return cls(points, frozen)
