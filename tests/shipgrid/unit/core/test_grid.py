import io

import pytest

from shipgrid.core.errors import GridAllocationError, GridReleasedError
from shipgrid.core.grid import Grid, print_grid
from shipgrid.core.models import CellState, Coord


def test_new_grid_is_all_empty(grid: Grid) -> None:
    assert grid.rows == 10
    assert grid.cols == 10
    assert all(grid.get(r, c) is CellState.EMPTY for r in range(10) for c in range(10))
    assert grid.occupied_count() == 0


def test_render_empty_grid_shows_only_water(grid: Grid) -> None:
    lines = grid.render().splitlines()
    assert lines[0] == "  0 1 2 3 4 5 6 7 8 9"
    assert len(lines) == 11
    for row, line in enumerate(lines[1:]):
        label, _, body = line.partition(" ")
        assert label == str(row)
        assert body == " ".join(["."] * 10)


def test_set_occupied_marks_single_cell(grid: Grid) -> None:
    grid.set_occupied(3, 4)
    assert grid.get(3, 4) is CellState.OCCUPIED
    assert grid.occupied_cells() == [Coord(3, 4)]
    assert grid.render().splitlines()[4] == "3 . . . . X . . . . ."


def test_set_occupied_twice_keeps_cell_occupied(grid: Grid) -> None:
    grid.set_occupied(0, 0)
    grid.set_occupied(0, 0)
    assert grid.get(0, 0) is CellState.OCCUPIED
    assert grid.occupied_count() == 1


def test_render_is_idempotent(grid: Grid) -> None:
    grid.set_occupied(9, 9)
    assert grid.render() == grid.render()


def test_render_aligns_wide_boards() -> None:
    with Grid.create(11, 12) as wide:
        lines = wide.render().splitlines()
    assert lines[0] == "    0  1  2  3  4  5  6  7  8  9 10 11"
    assert lines[1].startswith(" 0  .  .")
    assert lines[-1].startswith("10  .")


def test_print_grid_writes_render_to_stream(grid: Grid) -> None:
    stream = io.StringIO()
    print_grid(grid, stream)
    assert stream.getvalue() == grid.render() + "\n"


@pytest.mark.parametrize(("rows", "cols"), [(0, 10), (10, 0), (-1, 5)])
def test_create_rejects_non_positive_dimensions(rows: int, cols: int) -> None:
    with pytest.raises(GridAllocationError):
        Grid.create(rows, cols)


def test_destroy_releases_storage_and_is_idempotent() -> None:
    board = Grid.create(4, 4)
    board.destroy()
    board.destroy()
    assert board.released
    with pytest.raises(GridReleasedError):
        board.get(0, 0)
    with pytest.raises(GridReleasedError):
        board.render()


def test_context_manager_releases_on_error() -> None:
    board = Grid.create(4, 4)
    with pytest.raises(RuntimeError):
        with board:
            raise RuntimeError("boom")
    assert board.released
