"""Brush outlines in brush-local space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from ..config import BACKBONE_LENGTH, DEFAULT_CURVE_SAMPLES
from ..codec.svg_path import path_to_shapes, shapes_to_path
from ..domain.geometry import BBox, Point, PointLike, Shape


@dataclass(frozen=True)
class Brush:
    """A named brush outline.

    Shapes are authored in brush-local space: the backbone runs from (0, 0)
    to (BACKBONE_LENGTH, 0), x is the position along it and y the
    perpendicular offset. Brushes never change after construction.

    Attributes:
        id: Short key used for catalog lookups (e.g. 'round').
        name: Display name (e.g. 'Round Brush').
        shapes: One or more outline shapes.
        description: Optional human readable description.
        category: Optional grouping, e.g. 'basic' or 'artistic'.
        tags: Optional search tags.
    """
    id: str
    name: str
    shapes: Tuple[Shape, ...]
    description: str = ''
    category: str = ''
    tags: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'shapes', tuple(self.shapes))
        object.__setattr__(self, 'tags', tuple(self.tags))

    @property
    def path(self) -> str:
        """Smoothed path data of the undeformed outline, for previews."""
        return shapes_to_path(self.shapes)

    @property
    def bbox(self) -> BBox:
        """Bounding box over all shapes."""
        return BBox.from_points(self.outline_points())

    def outline_points(self) -> List[Point]:
        """All outline points of all shapes, in order."""
        return [p for shape in self.shapes for p in shape.points]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'category': self.category,
            'tags': list(self.tags),
            'backbone_length': BACKBONE_LENGTH,
            'path': self.path,
            'bbox': list(self.bbox.to_tuple()),
            'shapes': [
                {'points': shape.to_list(), 'closed': shape.closed}
                for shape in self.shapes
            ],
        }

    @classmethod
    def from_points(
        cls,
        points: Iterable[PointLike],
        id: str = 'points',
        name: str = 'Points Brush',
        closed: bool = False,
        **metadata,
    ) -> Brush:
        """Create a single-shape brush from hand-authored points."""
        return cls(id, name, (Shape(tuple(points), closed),), **metadata)

    @classmethod
    def from_path(
        cls,
        path_data: str,
        id: str = 'path',
        name: str = 'Path Brush',
        offset: float = 0.0,
        samples: int = DEFAULT_CURVE_SAMPLES,
        **metadata,
    ) -> Brush:
        """Create a brush from SVG path data.

        Args:
            path_data: Outline in path notation, x spanning the backbone.
            id: Catalog key.
            name: Display name.
            offset: y of the authored baseline; subtracted from every point
                so the baseline lands on the backbone.
            samples: Points per curve command when flattening.
            **metadata: description, category, tags.

        Raises:
            MalformedPathError: If ``path_data`` cannot be decoded.
        """
        shapes = tuple(
            shape.with_points(Point(p.x, p.y - offset) for p in shape.points)
            for shape in path_to_shapes(path_data, samples)
        )
        return cls(id, name, shapes, **metadata)
