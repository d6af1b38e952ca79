"""Shared configuration for brush stroke generation.

This module centralizes the constants used by:
    - brush_lib.utils.geometry (vertex tangent blending)
    - brush_lib.codec.svg_path (curve flattening, smoothing)
    - brush_lib.deformation.backbone (projection, augmentation)

and the per-call StrokeOptions passed to the deformation engine. There is
no global mutable state here; options travel with each call.
"""

from __future__ import annotations

from dataclasses import dataclass

# Brush backbones run from (0, 0) to (BACKBONE_LENGTH, 0) in brush-local space
BACKBONE_LENGTH = 100.0

DEFAULT_STROKE_WIDTH = 1.0

# Squared internally, in user path units
DEFAULT_SIMPLIFICATION_TOLERANCE = 0.3

# Points emitted per C/S/Q/T command when decoding path data
DEFAULT_CURVE_SAMPLES = 2

# Minimum spacing (backbone units) between inserted augmentation parameters
AUGMENTATION_EPSILON = 1e-3

# Tangent blend window on each side of an interior vertex, as a fraction of
# the shorter adjacent segment
VERTEX_BLEND_FRACTION = 0.25


@dataclass(frozen=True)
class StrokeOptions:
    """Per-call options for turning a user path into a brush stroke.

    Attributes:
        stroke_width: Multiplier applied to every perpendicular brush offset.
            1 keeps the brush's authored width, 2 doubles it.
        simplification_tolerance: Tolerance of the line simplification pass
            run by the smoothed encoder. Only affects output size.
        brush_augmentation: Insert brush points at the user path's vertices
            so sharp corners survive. Augmented strokes are encoded as
            polylines.
        precision: Decimal places for emitted coordinates, or None for the
            shortest exact representation.
    """
    stroke_width: float = DEFAULT_STROKE_WIDTH
    simplification_tolerance: float = DEFAULT_SIMPLIFICATION_TOLERANCE
    brush_augmentation: bool = False
    precision: int | None = None

    def __post_init__(self):
        if self.stroke_width < 0:
            raise ValueError(f"stroke_width must be >= 0, got {self.stroke_width}")
        if self.simplification_tolerance < 0:
            raise ValueError(
                f"simplification_tolerance must be >= 0, got {self.simplification_tolerance}"
            )
        if self.precision is not None and self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")
