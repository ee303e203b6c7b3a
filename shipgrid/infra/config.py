"""Game configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from shipgrid.core.models import BOARD_SIZE, SHIP_LENGTH

SHIP_COUNT = 3


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Board and fleet dimensions passed explicitly to a run."""

    board_size: int = BOARD_SIZE
    ship_length: int = SHIP_LENGTH
    ship_count: int = SHIP_COUNT

    def __post_init__(self) -> None:
        for name in ("board_size", "ship_length", "ship_count"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}.")


DEFAULT_CONFIG = GameConfig()


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    Missing files are ignored.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load ``.env`` then ``.env.local``; later files win."""
    to_load = tuple(paths) if paths is not None else (".env", ".env.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)
