"""Core domain models used by placement logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

BOARD_SIZE = 10
SHIP_LENGTH = 3


class CellState(IntEnum):
    """State of a single grid cell."""

    EMPTY = 0
    OCCUPIED = 1


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "H"
    VERTICAL = "V"


class PlacementFailure(StrEnum):
    """Reason a placement was rejected."""

    OUT_OF_BOUNDS_START = "OUT_OF_BOUNDS_START"
    INVALID_ORIENTATION = "INVALID_ORIENTATION"
    DOES_NOT_FIT = "DOES_NOT_FIT"
    OVERLAP = "OVERLAP"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class ShipSpec:
    """Static placement request for a single ship.

    A ``length`` of ``None`` takes the fleet-wide ship length at placement time.
    """

    row: int
    col: int
    orientation: Orientation | str
    length: int | None = None

    @property
    def start(self) -> Coord:
        return Coord(self.row, self.col)


@dataclass(frozen=True, slots=True)
class PlacementResult:
    """Outcome of a single placement attempt."""

    ok: bool
    failure: PlacementFailure | None = None
    reason: str = ""
    cells: tuple[Coord, ...] = ()
    conflict: Coord | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def placed(cls, cells: tuple[Coord, ...]) -> PlacementResult:
        return cls(ok=True, cells=cells)

    @classmethod
    def rejected(
        cls,
        failure: PlacementFailure,
        reason: str,
        *,
        conflict: Coord | None = None,
    ) -> PlacementResult:
        return cls(ok=False, failure=failure, reason=reason, conflict=conflict)


def parse_orientation(value: object) -> Orientation | None:
    """Return the orientation for an enum member or an H/V style string."""
    if isinstance(value, Orientation):
        return value
    if not isinstance(value, str):
        return None
    token = value.strip().upper()
    if token in {"H", "HORIZONTAL"}:
        return Orientation.HORIZONTAL
    if token in {"V", "VERTICAL"}:
        return Orientation.VERTICAL
    return None


def cells_for_ship(start: Coord, orientation: Orientation, length: int) -> list[Coord]:
    """Compute the cells a ship covers, bow first."""
    result: list[Coord] = []
    for i in range(length):
        if orientation is Orientation.HORIZONTAL:
            result.append(Coord(start.row, start.col + i))
        else:
            result.append(Coord(start.row + i, start.col))
    return result
