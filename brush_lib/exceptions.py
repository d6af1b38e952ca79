"""Exceptions raised by brush_lib.

Only two conditions are reported as errors during stroke generation:
unparseable path data and unknown brush names. Degenerate geometry (empty
paths, zero-length segments, single points) is handled with fallback values
instead.
"""

from __future__ import annotations


class BrushError(Exception):
    """Base class for all brush_lib errors."""


class MalformedPathError(BrushError, ValueError):
    """Path data could not be decoded.

    Attributes:
        command: The offending command letter (or token) as it appeared in
            the input, or None when the error is not tied to one command.
        position: Character offset of the offending token, or None.
    """

    def __init__(self, message: str, command: str | None = None, position: int | None = None):
        self.command = command
        self.position = position
        if command is not None:
            where = f" at offset {position}" if position is not None else ""
            message = f"{message} (command {command!r}{where})"
        super().__init__(message)


class BrushNotFoundError(BrushError, KeyError):
    """No brush is registered under the requested id or name."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f'Brush "{self.key}" not found'


class FrozenPathError(BrushError):
    """A point was added to a UserPath after its gesture ended."""


class ReadOnlyRepositoryError(BrushError):
    """A brush was registered into a read-only repository."""
