"""API layer for brush stroke rendering.

The module exports one service class:
    BrushStrokeService: Renders strokes from point lists or path data and
        describes the brush catalog as JSON-ready dictionaries.

Example usage:
    Render a stroke::

        from brush_lib.api import BrushStrokeService

        service = BrushStrokeService()
        d = service.create_stroke('M 10 10 Q 60 80 110 10', 'ink')
"""

from .services import BrushStrokeService

__all__ = ['BrushStrokeService']
