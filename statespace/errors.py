from __future__ import annotations


class StateSpaceError(Exception):
    """Base class for construction-time failures raised by this package."""


class InvalidStateError(StateSpaceError, ValueError):
    """Puzzle values are not exactly one each of 0..N²-1 on a square board."""


class DimensionMismatchError(StateSpaceError, ValueError):
    """Adjacency matrix is not square or does not match the vertex count."""
