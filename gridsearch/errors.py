"""Error types raised by the search core and its loaders."""

from __future__ import annotations


class GridSearchError(Exception):
    """Base class for gridsearch failures."""


class InvalidGrid(GridSearchError, ValueError):
    """Grid is empty, jagged, or contains unknown cell characters."""


class InvalidStrategy(GridSearchError, ValueError):
    """Unknown search strategy name."""


class InvalidCoordinate(GridSearchError, ValueError):
    """Coordinate lies outside the grid or on a wall."""


class InvalidTransition(GridSearchError, RuntimeError):
    """Driver operation requested in a state that does not allow it."""


class InvalidSetting(GridSearchError, ValueError):
    """Configuration value from arguments or the environment is unusable."""
