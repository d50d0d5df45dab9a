# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

"""Read team results for one competition from a spreadsheet export.

The sheet is comma-separated text in blocks.  A line containing ``#``
starts a block of Advanced teams, a line containing ``~`` a block of
Novice teams.  Within a block each line is one team::

    col 0-2    ignored
    col 3, 4   member 1 name ("First Last"), email
    col 5, 6   member 2 name, email    (optional)
    col 7, 8   member 3 name, email    (optional)
    col 9      problems solved
    col 10     placement

A line with empty member 1 name and email ends the block.  Lines outside
a block, and lines of fewer than 5 columns, are ignored.
"""

import csv
import logging
from pathlib import Path

from .entities import ADVANCED, NOVICE
from .leaderboard_exceptions import ValidationError


log = logging.getLogger("leaderboard")

ADVANCED_MARKER = "#"
NOVICE_MARKER = "~"


def _parse_int(field, what, lineno):
    try:
        return int(field)
    except ValueError:
        raise ValidationError(
            f'Line {lineno}: non-numeric {what} "{field}"'
        ) from None


def read_team_spreadsheet(filename, competition, db):
    """Add every team in the sheet to the store as results in `competition`.

    Each team is its own transaction: if a team cannot be added it is
    logged and skipped, and teams already added stay added.

    Args:
        filename (pathlib.Path/str): a ``.csv`` file.
        competition (str): name of the competition these results are for.
        db (LeaderboardDB): where to put them.

    Returns:
        tuple: `(added, failures)`, the number of teams added and a list
        of `(line_number, message)` for teams that were rolled back.

    Raises:
        ValidationError: not a ``.csv`` file, not UTF-8, a team line with too few
            columns, or a non-numeric score.  Teams before the bad line
            have already been added.
        FileNotFoundError
    """
    filename = Path(filename)
    if filename.suffix.lower() != ".csv":
        raise ValidationError(f'Expected a ".csv" file, not "{filename.name}"')
    log.info('Reading results for "%s" from %s', competition, filename)
    level = None
    added = 0
    failures = []
    try:
        with open(filename, newline="", encoding="utf-8") as f:
            lines = f.readlines()
    except UnicodeDecodeError as e:
        raise ValidationError(f"{filename.name} is not UTF-8 text: {e}") from None
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if ADVANCED_MARKER in line:
            level = ADVANCED
            continue
        if NOVICE_MARKER in line:
            level = NOVICE
            continue
        if level is None:
            continue
        data = [x.strip() for x in next(csv.reader([line]), [])]
        if len(data) < 5:
            continue
        if not data[3] and not data[4]:
            log.debug("Line %d: end of %s block", lineno, level)
            level = None
            continue
        if len(data) < 11:
            raise ValidationError(
                f"Line {lineno}: expected at least 11 columns, found {len(data)}"
            )
        problems_solved = _parse_int(data[9], "problems solved", lineno)
        placement = _parse_int(data[10], "placement", lineno)
        ok, r = db.addTeamResult(
            level,
            (data[3], data[4]),
            (data[5], data[6]),
            (data[7], data[8]),
            problems_solved,
            placement,
            competition,
        )
        if ok:
            added += 1
        else:
            log.warning("Line %d: team not added: %s", lineno, r)
            failures.append((lineno, r))
    log.info('Added %d teams to "%s", %d failed', added, competition, len(failures))
    return added, failures
