"""Brush Stroke Package.

Backbone deformation of brush outlines along user-drawn paths. A brush is
an outline authored against a straight backbone from (0, 0) to (100, 0);
drawing a stroke re-expresses every outline point as (position along the
backbone, perpendicular offset) and re-applies that pair in the moving
frame of the user's path, so the brush bends along the gesture while
keeping its width profile.

Architecture Overview:
    The package is layered bottom-up; each layer only imports the ones
    below it:

    - domain holds the value objects (Point, BBox, Shape, UserPath)
    - utils is the numpy geometry kernel (arc-length sampling, tangents,
      Bézier flattening, line simplification)
    - codec converts between SVG path data and shapes
    - brushes defines Brush and the built-in catalog
    - deformation implements projection, remapping and augmentation
    - api offers a dictionary-friendly service for external consumers

The package is organized into the following modules:
    domain: Point, BBox, Shape and UserPath value objects.
    utils: Geometry kernel and simplification.
    codec: SVG path decoding and polyline/smoothed encoding.
    brushes: Brush, BrushRepository and the preset catalog.
    deformation: The backbone deformation engine.
    api: BrushStrokeService.
    cli: The brush-stroke command.
    config: Shared constants and StrokeOptions.
    exceptions: Error hierarchy.

Example usage:
    Rendering a stroke::

        from brush_lib import StrokeOptions, create_brush_stroke

        d = create_brush_stroke([(0, 0), (40, 30), (100, 10)], 'calligraphy',
                                StrokeOptions(stroke_width=2))

    Through the service layer::

        from brush_lib.api import BrushStrokeService

        service = BrushStrokeService()
        d = service.create_stroke('M 0 0 C 30 40 70 40 100 0', 'ink')

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import BrushStrokeService
from .brushes import Brush, BrushRepository, get_all_brushes, get_brush
from .codec import path_to_shapes, points_to_path, points_to_smooth_path, shapes_to_path
from .config import BACKBONE_LENGTH, StrokeOptions
from .deformation import (
    augment_shape,
    build_parameter_table,
    create_brush_stroke,
    deform_brush,
    deform_shape,
    project_to_backbone,
    remap_point,
)
from .domain import BBox, Point, Shape, UserPath
from .exceptions import (
    BrushError,
    BrushNotFoundError,
    FrozenPathError,
    MalformedPathError,
    ReadOnlyRepositoryError,
)

__all__ = [
    # Domain objects
    'Point', 'BBox', 'Shape', 'UserPath', 'Brush',
    # Catalog
    'BrushRepository', 'get_brush', 'get_all_brushes',
    # Codec
    'path_to_shapes', 'points_to_path', 'points_to_smooth_path', 'shapes_to_path',
    # Deformation
    'project_to_backbone', 'remap_point', 'build_parameter_table', 'augment_shape',
    'deform_shape', 'deform_brush', 'create_brush_stroke',
    # Configuration and errors
    'BACKBONE_LENGTH', 'StrokeOptions',
    'BrushError', 'MalformedPathError', 'BrushNotFoundError', 'FrozenPathError',
    'ReadOnlyRepositoryError',
    # Services
    'BrushStrokeService',
]

__version__ = '1.0.0'
