"""Application entry point."""

from __future__ import annotations

import sys

from shipgrid.app.orchestrator import run_placements, write_report
from shipgrid.core.errors import GridAllocationError
from shipgrid.infra.config import load_default_env_files
from shipgrid.infra.logging import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_GRID_ALLOCATION_FAILED = 1


def main() -> int:
    """Run the fixed placement scenario and return the process exit status."""
    load_default_env_files()
    setup_logging()
    try:
        report = run_placements()
    except GridAllocationError as exc:
        logger.error("grid_allocation_failed error=%s", exc)
        sys.stderr.write(f"Error: failed to allocate board storage: {exc}\n")
        return EXIT_GRID_ALLOCATION_FAILED
    write_report(report)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
