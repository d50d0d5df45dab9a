# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

import logging

import peewee as pw

from leaderboard.db.tables import Competition, Result
from leaderboard.db.db_utils import with_connection


log = logging.getLogger("DB")


@with_connection
def upsertCompetition(self, name):
    """Find a competition by name, else create it.

    Returns:
        2-tuple: `(True, competition_id)` or `(False, msg)`.
    """
    cref = (
        Competition.select()
        .where(Competition.name == name)
        .order_by(Competition.id)
        .first()
    )
    if cref is not None:
        return (True, cref.id)
    try:
        cref = Competition.create(name=name)
    except pw.IntegrityError as e:
        log.error("Create competition %s error - %s", name, e)
        return (False, f"Cannot create competition {name}: {e}")
    if cref.id is None:
        return (False, f"No id was generated for competition {name}")
    log.info("Created competition %s with id %s", name, cref.id)
    return (True, cref.id)


@with_connection
def removeCompetition(self, name):
    """Remove a competition and every result recorded in it.

    Returns:
        2-tuple: `(True, competition_id)` or `(False, msg)` if there is
        no such competition, in which case nothing is changed.
    """
    cref = (
        Competition.select()
        .where(Competition.name == name)
        .order_by(Competition.id)
        .first()
    )
    if cref is None:
        log.info("Competition not found: %s", name)
        return (False, f"Competition not found: {name}")
    cid = cref.id
    with self._db.atomic():
        n = Result.delete().where(Result.competition_id == cid).execute()
        Competition.delete().where(Competition.id == cid).execute()
    log.info("Removed competition %s (id %s) and %d results", name, cid, n)
    return (True, cid)
