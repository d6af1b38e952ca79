"""Brush outlines and the brush catalog.

A brush is one or more outline shapes authored against a straight
backbone from (0, 0) to (100, 0). The catalog holds the built-in brushes
and any brushes registered by the caller.

The module exports:
    Brush: Immutable brush outline with metadata.
    BrushRepository: Registry with lookup by id or display name.
    get_brush: Look up a built-in brush.
    get_all_brushes: List the built-in brushes.

Example usage:
    Using the catalog::

        from brush_lib.brushes import Brush, get_brush

        calligraphy = get_brush('calligraphy')
        custom = Brush.from_path('M 0 0 L 100 0 L 100 10 L 0 10 Z',
                                 'bar', 'Bar', offset=5)
"""

from .brush import Brush
from .repository import BrushRepository, default_repository, get_all_brushes, get_brush

__all__ = [
    'Brush', 'BrushRepository',
    'default_repository', 'get_brush', 'get_all_brushes',
]
