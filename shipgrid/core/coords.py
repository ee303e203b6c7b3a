"""Coordinate bounds validation."""

from __future__ import annotations


def is_valid(coord: int, dimension: int) -> bool:
    """Return whether a single axis value lies inside ``[0, dimension)``."""
    return 0 <= coord < dimension
