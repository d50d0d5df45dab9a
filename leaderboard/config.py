# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

"""Reading and creating the Leaderboard configuration file."""

import logging
from pathlib import Path
import sys

from importlib import resources

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

import leaderboard


config_filename = "leaderboardConfig.toml"

default_config = {
    "db_file": "leaderboard.db",
    "LogLevel": "info",
}


def create_config(dur=Path("."), *, db_file=None, db_name=None):
    """Create a default configuration file.

    args:
        dur (pathlib.Path/str): where to put the file.

    keyword args:
        db_file (str/None): name of the SQLite file, default
            "leaderboard.db".
        db_name (str/None): the name of a MySQL database, omitted if `None`.

    returns:
        pathlib.Path: the new file.

    raises:
        FileExistsError: file is already there.

    Note the toml file is manipulated with find-and-replace so as to
    preserve the comments in the template.
    """
    cf = Path(dur) / config_filename
    if cf.exists():
        raise FileExistsError("Config already exists in {}".format(cf))
    template = (resources.files(leaderboard) / config_filename).read_text()
    if db_file:
        template = template.replace('"leaderboard.db"', f'"{db_file}"')
    if db_name:
        template = template.replace("#db_name =", f'db_name = "{db_name}"')
    with open(cf, "w") as fh:
        fh.write(template)
    return cf


def load_config(dur=Path(".")):
    """Read the configuration, falling back to defaults if there is none.

    The returned ``db_file`` is made relative to `dur` unless it is
    absolute.

    returns:
        dict
    """
    log = logging.getLogger("leaderboard")
    dur = Path(dur)
    cfg = dict(default_config)
    try:
        with open(dur / config_filename, "rb") as f:
            cfg.update(tomllib.load(f))
        log.debug("Config loaded: %s", {k: v for k, v in cfg.items() if "pass" not in k})
    except FileNotFoundError:
        log.warning("Cannot find %s, using defaults", dur / config_filename)
    db_file = Path(cfg["db_file"])
    if not db_file.is_absolute():
        db_file = dur / db_file
    cfg["db_file"] = db_file
    return cfg
