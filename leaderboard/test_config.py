# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

from pathlib import Path
from pytest import raises
import sys

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

from leaderboard.config import config_filename, create_config, load_config


def test_config(tmp_path) -> None:
    create_config(tmp_path)
    assert Path(tmp_path / config_filename).exists()


def test_config_exists(tmp_path) -> None:
    create_config(tmp_path)
    raises(FileExistsError, lambda: create_config(tmp_path))


def test_config_template_is_valid_toml(tmp_path) -> None:
    cf = create_config(tmp_path)
    with open(cf, "rb") as f:
        cfg = tomllib.load(f)
    assert cfg["db_file"] == "leaderboard.db"
    assert cfg["LogLevel"] == "info"
    assert "db_name" not in cfg


def test_config_load(tmp_path) -> None:
    create_config(tmp_path)
    cfg = load_config(tmp_path)
    assert cfg["db_file"] == tmp_path / "leaderboard.db"
    assert cfg.get("db_name") is None


def test_config_alt_db(tmp_path) -> None:
    create_config(tmp_path, db_file="club.db", db_name="clubresults")
    cfg = load_config(tmp_path)
    assert cfg["db_file"] == tmp_path / "club.db"
    assert cfg["db_name"] == "clubresults"


def test_config_missing_uses_defaults(tmp_path) -> None:
    cfg = load_config(tmp_path)
    assert cfg["db_file"] == tmp_path / "leaderboard.db"
    assert cfg["LogLevel"] == "info"


def test_config_absolute_db_file_kept(tmp_path) -> None:
    elsewhere = (tmp_path / "elsewhere.db").resolve()
    (tmp_path / config_filename).write_text(f'db_file = "{elsewhere.as_posix()}"\n')
    cfg = load_config(tmp_path)
    assert cfg["db_file"] == elsewhere
