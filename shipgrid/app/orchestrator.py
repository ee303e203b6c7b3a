"""Fixed-fleet placement run and its text report."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from shipgrid.core.grid import Grid
from shipgrid.core.models import Coord, Orientation, PlacementResult, ShipSpec, parse_orientation
from shipgrid.core.placement import place_spec
from shipgrid.infra.config import DEFAULT_CONFIG, GameConfig
from shipgrid.infra.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SHIPS: tuple[ShipSpec, ...] = (
    ShipSpec(row=2, col=3, orientation=Orientation.HORIZONTAL),
    ShipSpec(row=5, col=7, orientation=Orientation.VERTICAL),
    ShipSpec(row=0, col=0, orientation=Orientation.HORIZONTAL),
)

LEGEND = "Legend: X = Ship | . = Water"


@dataclass(frozen=True, slots=True)
class PlacementAttempt:
    """One ship placement attempt, numbered from 1."""

    number: int
    spec: ShipSpec
    result: PlacementResult


@dataclass(slots=True)
class RunReport:
    """Outcome of placing a fleet on a fresh grid."""

    config: GameConfig
    attempts: list[PlacementAttempt] = field(default_factory=list)
    board_text: str = ""
    occupied: list[Coord] = field(default_factory=list)

    @property
    def placed(self) -> int:
        return sum(1 for attempt in self.attempts if attempt.result.ok)

    @property
    def total(self) -> int:
        return len(self.attempts)


def run_placements(
    specs: tuple[ShipSpec, ...] = DEFAULT_SHIPS,
    config: GameConfig = DEFAULT_CONFIG,
) -> RunReport:
    """Place every spec in order on a fresh grid and capture the final board.

    The grid is released before returning, on success or error.
    """
    report = RunReport(config=config)
    if len(specs) != config.ship_count:
        logger.warning(
            "ship_count_mismatch configured=%d requested=%d",
            config.ship_count,
            len(specs),
        )
    with Grid.create(config.board_size, config.board_size) as grid:
        for number, spec in enumerate(specs, start=1):
            result = place_spec(grid, spec, default_length=config.ship_length)
            report.attempts.append(PlacementAttempt(number=number, spec=spec, result=result))
        report.board_text = grid.render()
        report.occupied = grid.occupied_cells()
    logger.info("placement_run_done placed=%d total=%d", report.placed, report.total)
    return report


def write_report(report: RunReport, stream: TextIO | None = None) -> None:
    """Write the human-readable run report."""
    out = stream if stream is not None else sys.stdout
    config = report.config
    out.write("=== NAVAL BATTLE ===\n")
    out.write(
        f"Board: {config.board_size}x{config.board_size} | "
        f"Ships: {config.ship_count} (length {config.ship_length})\n\n"
    )
    for attempt in report.attempts:
        spec = attempt.spec
        out.write(f"Placing ship {attempt.number}...\n")
        out.write(
            f"Coordinates: ({spec.row}, {spec.col}) | Orientation: {_orientation_label(spec.orientation)}\n"
        )
        if attempt.result.ok:
            out.write("Ship placed successfully!\n\n")
        else:
            out.write(f"Error: {attempt.result.reason}\n")
            out.write("Failed to place ship!\n\n")
    out.write("=== FINAL BOARD ===\n")
    out.write(f"Ships placed: {report.placed}/{report.total}\n\n")
    out.write(report.board_text + "\n")
    out.write(f"\n{LEGEND}\n")


def _orientation_label(value: Orientation | str) -> str:
    resolved = parse_orientation(value)
    if resolved is None:
        return str(value)
    return resolved.value
