# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

import logging

import peewee as pw
import pymysql

from leaderboard.leaderboard_exceptions import StoreConnectionError
from leaderboard.db.tables import Competition, Result, Student
from leaderboard.db.tables import database_proxy


log = logging.getLogger("DB")


class LeaderboardDB:
    """The store of students, competitions and results.

    Each public method takes the connection it needs and gives it back
    before returning; see :func:`leaderboard.db.db_utils.with_connection`.
    A SQLite file is used unless a MySQL ``db_name`` is given.
    """

    def __init__(
        self,
        dbfile_name="leaderboard.db",
        *,
        db_name=None,
        db_host=None,
        db_port=None,
        db_username=None,
        db_password=None,
    ):
        db = None
        try:
            if self.should_connect_to_mysql(db_name):
                log.info(f"Connecting to MySQL database: {db_name}...")
                db = self.connect_mysql(
                    db_name, db_host, db_port, db_username, db_password
                )
                log.info(f"Connected to MySQL database: {db_name}")
            else:
                log.info(f"Connecting to SQLite file {dbfile_name}...")
                db = self.connect_sqlite(dbfile_name)
                log.info("Connected to SQLite.")

            self._db = db
            database_proxy.initialize(self._db)

            with self._db:
                self._db.create_tables([Student, Competition, Result])
        except (pw.PeeweeException, pymysql.MySQLError, OSError) as e:
            log.critical("Cannot open the results store: %s", e)
            raise StoreConnectionError(f"Cannot open the results store: {e}") from e
        log.info("Database initialised.")

    def should_connect_to_mysql(self, db_name):
        return True if db_name else False

    def connect_mysql(self, db_name, db_host, db_port, db_username, db_password):
        mysql_connection = pymysql.connect(
            host=db_host,
            port=db_port,
            user=db_username,
            password=db_password,
        )

        mysql_connection.cursor().execute(f"CREATE DATABASE IF NOT EXISTS {db_name};")
        mysql_connection.close()

        return pw.MySQLDatabase(
            db_name,
            host=db_host,
            port=db_port,
            user=db_username,
            password=db_password,
        )

    def connect_sqlite(self, dbfile_name):
        db = pw.SqliteDatabase(None)
        # str for the Path from config
        db.init(str(dbfile_name))

        return db

    def close(self):
        """Close the connection if some caller left one open."""
        if not self._db.is_closed():
            self._db.close()

    def in_transaction(self):
        return self._db.in_transaction()

    from leaderboard.db.db_student import (
        upsertStudent,
        removeStudent,
        isEmpty,
    )

    from leaderboard.db.db_competition import (
        upsertCompetition,
        removeCompetition,
    )

    from leaderboard.db.db_result import (
        addResult,
        addStudentResult,
        addTeamResult,
        wipeAll,
    )

    from leaderboard.db.db_report import (
        RgetStudentRows,
        RgetResultRowsForStudent,
        RgetCompetitionName,
        RgetCompetitionRows,
        RgetResultRowsForCompetition,
        RgetStudentName,
        RgetCompetitionNames,
        RgetRowCounts,
        RgetAllResultRows,
    )
