"""Ship placement validation and commit."""

from __future__ import annotations

from shipgrid.core.coords import is_valid
from shipgrid.core.grid import Grid
from shipgrid.core.models import (
    CellState,
    Coord,
    Orientation,
    PlacementFailure,
    PlacementResult,
    SHIP_LENGTH,
    ShipSpec,
    cells_for_ship,
    parse_orientation,
)
from shipgrid.infra.logging import get_logger

logger = get_logger(__name__)


def place_ship(
    grid: Grid,
    start_row: int,
    start_col: int,
    orientation: Orientation | str,
    length: int,
) -> PlacementResult:
    """Validate a ship placement and, when valid, mark its cells occupied.

    Checks run in order and stop at the first failure: start bounds,
    orientation, extent fit, overlap. The grid is only written once every
    check has passed, so a rejected placement never leaves partial cells.
    """
    if not is_valid(start_row, grid.rows) or not is_valid(start_col, grid.cols):
        return _reject(
            PlacementFailure.OUT_OF_BOUNDS_START,
            f"Start coordinates ({start_row}, {start_col}) are outside the board.",
        )

    resolved = parse_orientation(orientation)
    if resolved is None:
        return _reject(
            PlacementFailure.INVALID_ORIENTATION,
            f"Invalid orientation {orientation!r}; use 'H' or 'V'.",
        )

    if resolved is Orientation.HORIZONTAL:
        fits = length > 0 and start_col + length <= grid.cols
        if not fits:
            return _reject(
                PlacementFailure.DOES_NOT_FIT,
                f"Horizontal ship does not fit starting at column {start_col}.",
            )
    else:
        fits = length > 0 and start_row + length <= grid.rows
        if not fits:
            return _reject(
                PlacementFailure.DOES_NOT_FIT,
                f"Vertical ship does not fit starting at row {start_row}.",
            )

    cells = cells_for_ship(Coord(start_row, start_col), resolved, length)
    for cell in cells:
        if grid.get(cell.row, cell.col) is CellState.OCCUPIED:
            return _reject(
                PlacementFailure.OVERLAP,
                f"Overlaps another ship at ({cell.row}, {cell.col}).",
                conflict=cell,
            )

    for cell in cells:
        grid.set_occupied(cell.row, cell.col)
    logger.info(
        "ship_placed row=%d col=%d orientation=%s length=%d",
        start_row,
        start_col,
        resolved.name,
        length,
    )
    return PlacementResult.placed(tuple(cells))


def place_spec(grid: Grid, spec: ShipSpec, default_length: int = SHIP_LENGTH) -> PlacementResult:
    """Place a ship described by a static spec, using ``default_length`` when it has none."""
    length = spec.length if spec.length is not None else default_length
    return place_ship(grid, spec.row, spec.col, spec.orientation, length)


def _reject(
    failure: PlacementFailure,
    reason: str,
    *,
    conflict: Coord | None = None,
) -> PlacementResult:
    logger.info(
        "ship_rejected failure=%s reason=%s",
        failure.value,
        reason,
        extra={"conflict": conflict},
    )
    return PlacementResult.rejected(failure, reason, conflict=conflict)
