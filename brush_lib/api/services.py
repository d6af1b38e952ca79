"""Service layer for brush stroke rendering.

This module provides the BrushStrokeService class, which wraps the
deformation engine behind a small dictionary-friendly interface suitable
for API handlers and the command line. Callers pass user paths either as
point sequences or as SVG path data, and brushes either as Brush objects
or as catalog keys.

Example usage:
    Rendering strokes::

        from brush_lib.api.services import BrushStrokeService
        from brush_lib.config import StrokeOptions

        service = BrushStrokeService()

        # From points
        d = service.create_stroke([(0, 0), (60, 30), (120, 0)], 'round')

        # From path data, one stroke per subpath
        d = service.create_stroke('M 0 0 L 100 0 M 0 50 L 100 50', 'flat',
                                  StrokeOptions(stroke_width=0.5))

    Browsing the catalog::

        for info in service.list_brushes():
            print(info['id'], info['name'])
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from ..brushes.brush import Brush
from ..brushes.repository import BrushRepository, default_repository
from ..codec.svg_path import path_to_shapes
from ..config import StrokeOptions
from ..deformation.backbone import create_brush_stroke
from ..domain.geometry import PointLike
from ..exceptions import MalformedPathError

logger = logging.getLogger(__name__)

UserPathInput = Union[str, Sequence[PointLike]]


class BrushStrokeService:
    """Service for rendering brush strokes.

    Attributes:
        repository: BrushRepository used to resolve brush keys. Defaults to
            the shared read-only catalog of built-in brushes.

    Example:
        >>> service = BrushStrokeService()
        >>> service.create_stroke([(0, 0), (100, 0)], 'flat',
        ...                       StrokeOptions(brush_augmentation=True))
        'M 0 -10 L 100 -10 L 100 10 L 0 10 Z'
    """

    def __init__(self, repository: Optional[BrushRepository] = None):
        """Initialize the service.

        Args:
            repository: Brush catalog to use. If None, the read-only
                catalog of built-in brushes is used; pass
                ``default_repository().copy()`` to add brushes to it.
        """
        self.repository = repository if repository is not None else default_repository()

    def _resolve(self, brush: Union[Brush, str]) -> Brush:
        if isinstance(brush, Brush):
            return brush
        return self.repository.get(brush)

    def create_stroke(
        self,
        user_path: UserPathInput,
        brush: Union[Brush, str],
        options: Optional[StrokeOptions] = None,
    ) -> str:
        """Render a brush stroke along a user path.

        Args:
            user_path: Point sequence, or SVG path data. Every subpath of
                path data is treated as its own user path and the resulting
                strokes are joined with spaces.
            brush: Brush object, or id/display name in the repository.
            options: Stroke options; defaults to StrokeOptions().

        Returns:
            Path data of the stroke. Empty when the user path has fewer
            than 2 points.

        Raises:
            MalformedPathError: If ``user_path`` is unparseable path data.
            BrushNotFoundError: If ``brush`` is an unknown key.
        """
        brush = self._resolve(brush)

        if isinstance(user_path, str):
            strokes = []
            for shape in path_to_shapes(user_path):
                encoded = create_brush_stroke(shape.points, brush, options)
                if encoded:
                    strokes.append(encoded)
            return ' '.join(strokes)

        return create_brush_stroke(list(user_path), brush, options)

    def create_stroke_or_fallback(
        self,
        user_path: UserPathInput,
        brush: Union[Brush, str],
        options: Optional[StrokeOptions] = None,
    ) -> str:
        """Render a stroke, degrading to the raw user path on bad input.

        Same as create_stroke, except that malformed path data is logged
        and returned unchanged instead of raising. Point sequences are never
        decoded, so they behave exactly as in create_stroke.

        Raises:
            BrushNotFoundError: If ``brush`` is an unknown key.
        """
        try:
            return self.create_stroke(user_path, brush, options)
        except MalformedPathError as e:
            logger.warning("Falling back to the raw user path: %s", e)
            return user_path

    def list_brushes(self) -> List[Dict[str, Any]]:
        """Describe every brush in the repository, in registration order.

        Returns:
            List of dictionaries as returned by describe_brush.
        """
        return [brush.to_dict() for brush in self.repository]

    def describe_brush(self, key: str) -> Dict[str, Any]:
        """Describe one brush.

        Args:
            key: Brush id or display name.

        Returns:
            Dictionary containing:
                - 'id', 'name', 'description', 'category' (str)
                - 'tags' (list of str)
                - 'backbone_length' (float)
                - 'path' (str): Smoothed preview of the outline
                - 'bbox' (list): [x_min, y_min, x_max, y_max]
                - 'shapes' (list): {'points': [[x, y], ...], 'closed': bool}

        Raises:
            BrushNotFoundError: If no brush matches ``key``.
        """
        return self.repository.get(key).to_dict()
