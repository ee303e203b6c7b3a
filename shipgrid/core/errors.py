"""Exception types raised by grid and placement code."""

from __future__ import annotations


class ShipGridError(Exception):
    """Base class for shipgrid errors."""


class GridAllocationError(ShipGridError):
    """Raised when grid storage cannot be allocated. Fatal for a run."""


class GridReleasedError(ShipGridError):
    """Raised when a grid is used after its storage was released."""
