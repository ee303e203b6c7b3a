from __future__ import annotations

import os

import pytest

from shipgrid.infra.config import DEFAULT_CONFIG, GameConfig, load_default_env_files, load_env_file


def test_default_config_matches_reference_board() -> None:
    assert DEFAULT_CONFIG == GameConfig(board_size=10, ship_length=3, ship_count=3)


@pytest.mark.parametrize("field_name", ["board_size", "ship_length", "ship_count"])
def test_game_config_rejects_non_positive_values(field_name: str) -> None:
    with pytest.raises(ValueError, match=field_name):
        GameConfig(**{field_name: 0})


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "SG_A=1\nSG_B='two'\n#comment\nINVALID\nSG_C=three\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("SG_C", "already")
    monkeypatch.delenv("SG_A", raising=False)
    monkeypatch.delenv("SG_B", raising=False)
    load_env_file(str(env_file))
    assert os.environ.get("SG_A") == "1"
    assert os.environ.get("SG_B") == "two"
    assert os.environ.get("SG_C") == "three"
    assert "INVALID" not in os.environ


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SG_C=three\n", encoding="utf-8")
    monkeypatch.setenv("SG_C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("SG_C") == "already"


def test_load_default_env_files_applies_local_override(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("SG_LEVEL=INFO\n", encoding="utf-8")
    (tmp_path / ".env.local").write_text("SG_LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SG_LEVEL", raising=False)
    load_default_env_files()
    assert os.environ.get("SG_LEVEL") == "DEBUG"


def test_load_env_file_ignores_missing_file(tmp_path) -> None:
    load_env_file(str(tmp_path / "missing.env"))
