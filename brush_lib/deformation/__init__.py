"""Deformation engine.

Bends brush outlines along user-drawn paths by treating every brush point
as (position along the backbone, perpendicular offset) and re-applying
that pair in the moving frame of the user path.

The module exports:
    ProjectionResult: Parameter and offset of a brush point.
    project_to_backbone: Brush point -> ProjectionResult.
    remap_point: Brush point -> point in the user path's frame.
    build_parameter_table: Backbone parameters of the user path's vertices.
    augment_shape: Insert brush points at those parameters.
    deform_shape / deform_brush: Deform whole shapes or brushes.
    create_brush_stroke: User path + brush -> path data.

Example usage:
    Rendering a stroke::

        from brush_lib.config import StrokeOptions
        from brush_lib.deformation import create_brush_stroke

        d = create_brush_stroke([(0, 0), (50, 20), (100, 0)], 'calligraphy',
                                StrokeOptions(stroke_width=1.5))
"""

from .backbone import (
    ProjectionResult,
    augment_shape,
    build_parameter_table,
    create_brush_stroke,
    deform_brush,
    deform_shape,
    project_to_backbone,
    remap_point,
    resolve_brush,
)

__all__ = [
    'ProjectionResult', 'project_to_backbone', 'remap_point',
    'build_parameter_table', 'augment_shape',
    'deform_shape', 'deform_brush', 'resolve_brush', 'create_brush_stroke',
]
