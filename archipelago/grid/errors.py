"""Errors raised by the grid core.

Every error signals a caller mistake (bad size, coordinates, direction or
adjacency mode).  The core raises them immediately and never recovers.
"""

from __future__ import annotations


class GridError(Exception):
    """Base class for all grid errors."""


class InvalidSizeError(GridError, ValueError):
    """A grid was requested with a non-positive dimension."""


class OutOfBoundsError(GridError, IndexError):
    """A position outside ``[0, rows) x [0, cols)`` was accessed."""


class InvalidDirectionError(GridError, ValueError):
    """An unrecognised direction token was passed to ``Grid.neighbor``."""


class InvalidAdjacencyModeError(GridError, ValueError):
    """An unrecognised adjacency mode was passed to ``Grid.neighbors``."""
