"""Path codec: SVG path data to shapes and back.

The module exports:
    parse_commands: Tokenize and normalize path data to absolute commands.
    path_to_shapes: Decode path data into Shapes, flattening curves.
    points_to_path: Exact polyline encoding.
    points_to_smooth_path: Simplified quadratic-curve encoding.
    shapes_to_path: Encode several shapes, closing the closed ones.
    PathCommand: Normalized command record.

Example usage:
    Round trip through the codec::

        from brush_lib.codec import path_to_shapes, shapes_to_path

        shapes = path_to_shapes("M0,0 L10,0 L10,10 Z")
        shapes_to_path(shapes, smooth=False)  # 'M 0 0 L 10 0 L 10 10 Z'
"""

from .svg_path import (
    PathCommand,
    format_number,
    parse_commands,
    path_to_shapes,
    points_to_path,
    points_to_smooth_path,
    shapes_to_path,
)

__all__ = [
    'PathCommand', 'parse_commands', 'path_to_shapes',
    'points_to_path', 'points_to_smooth_path', 'shapes_to_path',
    'format_number',
]
