# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

import logging

from .db import LeaderboardDB
from .entities import split_display_name
from .ingest import read_team_spreadsheet
from .readmodel import ReadModel


log = logging.getLogger("leaderboard")


class LeaderboardSession:
    """A store together with the read-model built from it.

    Every change goes through here: the change is written to the store
    and then the whole read-model is rebuilt, whether or not the write
    succeeded.  Reads go straight to :attr:`model`.

    Args:
        db (LeaderboardDB): an open store.
    """

    def __init__(self, db):
        self.db = db
        self.model = ReadModel(db)
        self.model.loadAll()

    @classmethod
    def from_config(cls, cfg):
        """Open the store described by a config dict, see :mod:`leaderboard.config`."""
        db = LeaderboardDB(
            cfg["db_file"],
            db_name=cfg.get("db_name"),
            db_host=cfg.get("db_host"),
            db_port=cfg.get("db_port"),
            db_username=cfg.get("db_username"),
            db_password=cfg.get("db_password"),
        )
        return cls(db)

    def _reload(self, r):
        log.debug("Store changed: rebuilding read-model")
        self.model.loadAll()
        return r

    def hasData(self):
        return not self.db.isEmpty()

    def addTeamResult(
        self, level, member1, member2, member3, problems_solved, placement, competition
    ):
        return self._reload(
            self.db.addTeamResult(
                level,
                member1,
                member2,
                member3,
                problems_solved,
                placement,
                competition,
            )
        )

    def addStudentResult(
        self, level, name, email, problems_solved, placement, competition
    ):
        return self._reload(
            self.db.addStudentResult(
                level, name, email, problems_solved, placement, competition
            )
        )

    def addCompetition(self, name):
        return self._reload(self.db.upsertCompetition(name))

    def removeStudent(self, display_name):
        """Remove by display name "first last..." split at the first space.

        Raises:
            ValidationError: no space in the name.
        """
        first_name, last_name = split_display_name(display_name)
        return self._reload(self.db.removeStudent(first_name, last_name))

    def removeCompetition(self, name):
        return self._reload(self.db.removeCompetition(name))

    def wipeAll(self):
        return self._reload(self.db.wipeAll())

    def loadSpreadsheet(self, filename, competition):
        """Ingest a team spreadsheet, see :func:`leaderboard.ingest.read_team_spreadsheet`.

        The read-model is rebuilt even if the file turns out to be bad
        part-way through, since earlier teams are already stored.
        """
        try:
            return read_team_spreadsheet(filename, competition, self.db)
        finally:
            self.model.loadAll()

    def close(self):
        self.db.close()
