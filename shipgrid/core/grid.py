"""Grid storage, mutation and text rendering."""

from __future__ import annotations

import sys
from types import TracebackType
from typing import TextIO

import numpy as np

from shipgrid.core.errors import GridAllocationError, GridReleasedError
from shipgrid.core.models import CellState, Coord
from shipgrid.infra.logging import get_logger

logger = get_logger(__name__)

OCCUPIED_SYMBOL = "X"
EMPTY_SYMBOL = "."


class Grid:
    """Numpy-backed rectangular board of cell states.

    Cell accessors do not bounds-check; callers validate coordinates with
    ``shipgrid.core.coords.is_valid`` first. Storage is released by
    ``destroy()`` or by leaving a ``with`` block.
    """

    __slots__ = ("_rows", "_cols", "_cells")

    def __init__(self, rows: int, cols: int, cells: np.ndarray) -> None:
        self._rows = rows
        self._cols = cols
        self._cells: np.ndarray | None = cells

    @classmethod
    def create(cls, rows: int, cols: int) -> Grid:
        """Allocate a ``rows`` x ``cols`` grid with every cell empty."""
        if rows <= 0 or cols <= 0:
            raise GridAllocationError(f"Grid dimensions must be positive, got {rows}x{cols}.")
        try:
            cells = np.full((rows, cols), CellState.EMPTY, dtype=np.int8)
        except (MemoryError, ValueError) as exc:
            raise GridAllocationError(f"Failed to allocate {rows}x{cols} grid: {exc}") from exc
        logger.debug("grid_created rows=%d cols=%d", rows, cols)
        return cls(rows, cols, cells)

    def __enter__(self) -> Grid:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.destroy()

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def released(self) -> bool:
        return self._cells is None

    def destroy(self) -> None:
        """Release grid storage. Releasing twice is a no-op."""
        if self._cells is None:
            return
        self._cells = None
        logger.debug("grid_released rows=%d cols=%d", self._rows, self._cols)

    def get(self, row: int, col: int) -> CellState:
        """Return the state of a cell."""
        return CellState(int(self._storage()[row, col]))

    def set_occupied(self, row: int, col: int) -> None:
        """Mark a cell occupied."""
        self._storage()[row, col] = CellState.OCCUPIED

    def occupied_cells(self) -> list[Coord]:
        """Return occupied cells in row-major order."""
        rows, cols = np.nonzero(self._storage() == CellState.OCCUPIED)
        return [Coord(int(r), int(c)) for r, c in zip(rows, cols)]

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._storage() == CellState.OCCUPIED))

    def render(self) -> str:
        """Render the grid as text with column and row index labels."""
        cells = self._storage()
        label_width = len(str(self._rows - 1))
        cell_width = len(str(self._cols - 1))
        header = " " * label_width + " " + " ".join(
            str(col).rjust(cell_width) for col in range(self._cols)
        )
        lines = [header]
        for row in range(self._rows):
            symbols = (
                (OCCUPIED_SYMBOL if value == CellState.OCCUPIED else EMPTY_SYMBOL).rjust(cell_width)
                for value in cells[row]
            )
            lines.append(f"{str(row).rjust(label_width)} {' '.join(symbols)}")
        return "\n".join(lines)

    def _storage(self) -> np.ndarray:
        if self._cells is None:
            raise GridReleasedError("Grid storage has already been released.")
        return self._cells


def print_grid(grid: Grid, stream: TextIO | None = None) -> None:
    """Write the rendered grid to ``stream`` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    out.write(grid.render() + "\n")
