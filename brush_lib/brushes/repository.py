"""Brush repository for looking up brushes by id or name.

This module provides the BrushRepository class, a registry of Brush
objects. Brushes are registered once and looked up many times, either by
their short id ('round') or by their display name ('Round Brush').
Repositories can be sealed read-only; the shared catalog of built-in
brushes always is.

The repository pattern provides:
    - Central storage for all brushes available to the engine
    - Lookup by id or display name with a clear error for unknown keys
    - Factory methods for the built-in presets and for path data dictionaries

Example usage:
    Basic repository operations::

        from brush_lib.brushes.repository import BrushRepository

        repo = BrushRepository.from_presets()
        round_brush = repo.get('round')
        same_brush = repo.get('Round Brush')

    Bulk loading from path data::

        repo = BrushRepository.from_dict({
            'bar': 'M 0 -5 L 100 -5 L 100 5 L 0 5 Z',
        })
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Iterator, List, Optional

from ..exceptions import BrushNotFoundError, ReadOnlyRepositoryError
from .brush import Brush
from .presets import all_presets


class BrushRepository:
    """Registry of brushes.

    Attributes:
        _brushes: Internal dictionary mapping brush ids to brushes, in
            registration order.
        _names: Internal dictionary mapping display names to brush ids.
        _read_only: Whether register() is refused.

    Example:
        >>> repo = BrushRepository()
        >>> repo.register(Brush.from_points([(0, 0), (100, 0)], 'line', 'Line'))
        >>> repo.list_ids()
        ['line']
    """

    def __init__(self):
        """Initialize an empty, writable brush repository."""
        self._brushes: Dict[str, Brush] = {}
        self._names: Dict[str, str] = {}
        self._read_only = False

    def __len__(self) -> int:
        return len(self._brushes)

    def __iter__(self) -> Iterator[Brush]:
        return iter(self.all())

    def __contains__(self, key: str) -> bool:
        return self.find(key) is not None

    def register(self, brush: Brush) -> None:
        """Register a brush, replacing any brush with the same id.

        Args:
            brush: Brush to make available under its id and name.

        Raises:
            ReadOnlyRepositoryError: If the repository has been sealed.
        """
        if self._read_only:
            raise ReadOnlyRepositoryError(
                f"Cannot register brush {brush.id!r}: repository is read-only"
            )
        previous = self._brushes.get(brush.id)
        if previous is not None and self._names.get(previous.name) == brush.id:
            del self._names[previous.name]
        self._brushes[brush.id] = brush
        self._names[brush.name] = brush.id

    @property
    def read_only(self) -> bool:
        return self._read_only

    def seal(self) -> BrushRepository:
        """Refuse any further register() calls. Returns self."""
        self._read_only = True
        return self

    def copy(self) -> BrushRepository:
        """Writable repository holding the same brushes."""
        repo = type(self)()
        for brush in self._brushes.values():
            repo.register(brush)
        return repo

    def find(self, key: str) -> Optional[Brush]:
        """Look up a brush by id, then by display name.

        Returns:
            The brush, or None if nothing matches.
        """
        brush = self._brushes.get(key)
        if brush is None and key in self._names:
            brush = self._brushes.get(self._names[key])
        return brush

    def get(self, key: str) -> Brush:
        """Look up a brush by id, then by display name.

        Raises:
            BrushNotFoundError: If no brush matches ``key``.
        """
        brush = self.find(key)
        if brush is None:
            raise BrushNotFoundError(key)
        return brush

    def list_ids(self) -> List[str]:
        """Brush ids in registration order."""
        return list(self._brushes)

    def all(self) -> List[Brush]:
        """All registered brushes in registration order."""
        return list(self._brushes.values())

    @classmethod
    def from_presets(cls, read_only: bool = False) -> BrushRepository:
        """Create a repository holding every built-in brush.

        Args:
            read_only: Seal the repository once the presets are in.
        """
        repo = cls()
        for brush in all_presets():
            repo.register(brush)
        return repo.seal() if read_only else repo

    @classmethod
    def from_dict(cls, brushes: Dict[str, str], offsets: Optional[Dict[str, float]] = None) -> BrushRepository:
        """Create a repository from path data definitions.

        Args:
            brushes: Mapping of brush id -> path data. The id doubles as the
                display name.
            offsets: Optional mapping of brush id -> baseline offset.

        Raises:
            MalformedPathError: If any path data cannot be decoded.
        """
        offsets = offsets or {}
        repo = cls()
        for brush_id, path_data in brushes.items():
            repo.register(Brush.from_path(path_data, brush_id, brush_id,
                                          offset=offsets.get(brush_id, 0.0)))
        return repo


@lru_cache(maxsize=None)
def default_repository() -> BrushRepository:
    """Shared read-only repository of the built-in brushes, built on first use.

    Use ``default_repository().copy()`` for a writable catalog that starts
    from the presets.
    """
    return BrushRepository.from_presets(read_only=True)


def get_brush(key: str) -> Brush:
    """Look up a built-in brush by id or display name.

    Raises:
        BrushNotFoundError: If no built-in brush matches ``key``.
    """
    return default_repository().get(key)


def get_all_brushes() -> List[Brush]:
    """All built-in brushes."""
    return default_repository().all()
