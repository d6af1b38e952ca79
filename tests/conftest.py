"""Shared pytest fixtures for the brush_lib test suite.

Fixtures:
    straight_backbone: User path identical to the brush backbone
    split_backbone: Straight backbone with an extra vertex at its midpoint
    corner_path: L-shaped user path with a right-angle turn at t=0.5
    rectangle_brush: Closed rectangle brush 10 units wide
    service: BrushStrokeService over the built-in brushes

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from brush_lib.api import BrushStrokeService  # noqa: E402
from brush_lib.brushes import Brush  # noqa: E402


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# -----------------------------------------------------------------------------
# User Path Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def straight_backbone():
    """Return a user path that coincides with the brush backbone.

    Returns:
        list[tuple]: [(0, 0), (100, 0)]
    """
    return [(0.0, 0.0), (100.0, 0.0)]


@pytest.fixture
def split_backbone():
    """Return the backbone with a redundant vertex at its midpoint.

    Returns:
        list[tuple]: [(0, 0), (50, 0), (100, 0)]
    """
    return [(0.0, 0.0), (50.0, 0.0), (100.0, 0.0)]


@pytest.fixture
def corner_path():
    """Return an L-shaped path turning left by 90 degrees halfway along.

    Returns:
        list[tuple]: [(0, 0), (50, 0), (50, 50)]
    """
    return [(0.0, 0.0), (50.0, 0.0), (50.0, 50.0)]


# -----------------------------------------------------------------------------
# Brush Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def rectangle_brush():
    """Return a closed rectangle brush spanning the backbone, 10 units wide.

    Returns:
        Brush: Single closed shape [(0, -5), (100, -5), (100, 5), (0, 5)].
    """
    return Brush.from_points(
        [(0, -5), (100, -5), (100, 5), (0, 5)], 'rect', 'Rectangle', closed=True
    )


# -----------------------------------------------------------------------------
# Service Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def service():
    """Return a BrushStrokeService over the built-in brushes."""
    return BrushStrokeService()


@pytest.fixture
def restore_logging():
    """Restore the root logger's handlers and level after the test."""
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers.copy()
    original_level = root_logger.level
    yield root_logger
    root_logger.handlers = original_handlers
    root_logger.setLevel(original_level)
