from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from shipgrid.core.grid import Grid
from shipgrid.core.models import BOARD_SIZE


@pytest.fixture
def grid() -> Iterator[Grid]:
    with Grid.create(BOARD_SIZE, BOARD_SIZE) as board:
        yield board


@pytest.fixture
def restore_root_logging() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            if handler not in original_handlers:
                handler.close()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)
