"""Built-in brush catalog.

Point-authored brushes are generated from simple formulas; path-authored
brushes are declared as path data plus the y of their baseline. All of them
use the shared convention that the backbone runs from (0, 0) to (100, 0).
"""

from __future__ import annotations

import math
from typing import List

from .brush import Brush

BRUSH_WIDTH = 20.0
OUTLINE_SEGMENTS = 32
PATH_BRUSH_SAMPLES = 8

# id -> (name, path data, baseline offset, description, category, tags)
PATH_BRUSHES = {
    'ink': (
        'Ink Brush',
        'M 0 10 C 25 2 75 2 100 10 C 75 18 25 18 0 10 Z',
        10.0,
        'Leaf-shaped stroke that swells in the middle and tapers at both ends',
        'artistic',
        ('ink', 'tapered'),
    ),
    'marker': (
        'Marker Brush',
        'M 0 4 Q 0 0 4 0 L 96 0 Q 100 0 100 4 L 100 12 Q 100 16 96 16 '
        'L 4 16 Q 0 16 0 12 Z',
        8.0,
        'Even width stroke with rounded caps',
        'basic',
        ('marker', 'rounded'),
    ),
    'ribbon': (
        'Ribbon Brush',
        'M 0 0 H 100 V 4 H 0 Z M 0 8 H 100 V 12 H 0 Z',
        6.0,
        'Two parallel bands following the path',
        'artistic',
        ('double', 'lines'),
    ),
}


def round_brush(width: float = BRUSH_WIDTH, segments: int = OUTLINE_SEGMENTS) -> Brush:
    """Circle centered on the backbone midpoint."""
    radius = width / 2
    points = [
        (50 + radius * math.cos(2 * math.pi * i / segments),
         radius * math.sin(2 * math.pi * i / segments))
        for i in range(segments)
    ]
    return Brush.from_points(
        points, 'round', 'Round Brush', closed=True,
        description='Classic round brush for general drawing',
        category='basic', tags=('round', 'basic', 'drawing'),
    )


def flat_brush(width: float = BRUSH_WIDTH) -> Brush:
    """Rectangle spanning the whole backbone."""
    half = width / 2
    points = [(0, -half), (100, -half), (100, half), (0, half)]
    return Brush.from_points(
        points, 'flat', 'Flat Brush', closed=True,
        description='Rectangular brush for bold strokes and filling',
        category='basic', tags=('flat', 'rectangle', 'bold'),
    )


def calligraphy_brush(width: float = BRUSH_WIDTH) -> Brush:
    """Thin at both ends, wide through the middle."""
    half = width / 2
    top = [(0, -half * 0.3), (20, -half), (50, -half), (80, -half), (100, -half * 0.3)]
    bottom = [(x, -y) for x, y in reversed(top)]
    return Brush.from_points(
        top + bottom, 'calligraphy', 'Calligraphy Brush', closed=True,
        description='Tapered brush for expressive calligraphy and artistic strokes',
        category='artistic', tags=('calligraphy', 'tapered', 'expressive'),
    )


def texture_brush(width: float = BRUSH_WIDTH, segments: int = OUTLINE_SEGMENTS) -> Brush:
    """Blob with a deterministic wobbly radius."""
    points = []
    for i in range(segments):
        angle = 2 * math.pi * i / segments
        noise = (math.sin(angle * 6) + math.cos(angle * 8)) * 0.2
        radius = width * (1 + noise)
        points.append((50 + radius * math.cos(angle), radius * math.sin(angle)))
    return Brush.from_points(
        points, 'texture', 'Texture Brush', closed=True,
        description='Rough textured brush for organic, natural strokes',
        category='artistic', tags=('texture', 'rough', 'organic'),
    )


def path_brushes() -> List[Brush]:
    """Brushes decoded from PATH_BRUSHES."""
    return [
        Brush.from_path(
            path_data, brush_id, name, offset=offset, samples=PATH_BRUSH_SAMPLES,
            description=description, category=category, tags=tags,
        )
        for brush_id, (name, path_data, offset, description, category, tags)
        in PATH_BRUSHES.items()
    ]


def all_presets() -> List[Brush]:
    """Every built-in brush, path-authored ones first."""
    return path_brushes() + [
        round_brush(), flat_brush(), calligraphy_brush(), texture_brush(),
    ]
