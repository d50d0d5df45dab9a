# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

import logging

import peewee as pw

from leaderboard.entities import split_display_name
from leaderboard.leaderboard_exceptions import (
    LeaderboardBenignException,
    StoreIntegrityError,
    ValidationError,
)
from leaderboard.db.tables import Competition, Result, Student
from leaderboard.db.db_utils import with_connection


log = logging.getLogger("DB")


def check_scores(problems_solved, placement):
    """Raise ValidationError unless solved >= 0 and placement >= 1 are ints."""
    for what, value, least in (
        ("problems solved", problems_solved, 0),
        ("placement", placement, 1),
    ):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f'Non-numeric {what}: "{value}"')
        if value < least:
            raise ValidationError(f"The {what} must be at least {least}, not {value}")


@with_connection
def addResult(self, student_id, competition_id, problems_solved, placement):
    """Record one result row.

    There is no check for an existing row with the same student and
    competition: adding twice gives two rows.

    Returns:
        2-tuple: `(True, result_id)` or `(False, msg)`.
    """
    try:
        check_scores(problems_solved, placement)
    except ValidationError as e:
        return (False, str(e))
    try:
        rref = Result.create(
            student_id=student_id,
            competition_id=competition_id,
            problems_solved=problems_solved,
            placement=placement,
        )
    except pw.IntegrityError as e:
        log.error(
            "Add result student=%s competition=%s error - %s",
            student_id,
            competition_id,
            e,
        )
        return (False, f"Cannot add result: {e}")
    return (True, rref.id)


def _present(member):
    if member is None:
        return False
    name, email = member
    return bool(name) and bool(email)


@with_connection
def addTeamResult(
    self, level, member1, member2, member3, problems_solved, placement, competition
):
    """Record the same score for every member of a team, all or nothing.

    Args:
        level (str): "Novice" or "Advanced", used for new students.
        member1 (tuple): `(display_name, email)` of the first member.
        member2 (tuple/None): as above; skipped if None or if either
            the name or the email is empty.
        member3 (tuple/None): likewise.
        problems_solved (int)
        placement (int)
        competition (str): name of the competition, created if needed.

    Returns:
        2-tuple: `(True, student_ids)` in member order, or `(False, msg)`
        in which case the store is exactly as it was before the call.
    """
    if member1 is None:
        return (False, "Team has no first member")
    members = [member1] + [m for m in (member2, member3) if _present(m)]
    try:
        with self._db.atomic():
            check_scores(problems_solved, placement)
            ok, cid = self.upsertCompetition(competition)
            if not ok:
                raise StoreIntegrityError(cid)
            student_ids = []
            for name, email in members:
                first_name, last_name = split_display_name(name)
                ok, sid = self.upsertStudent(first_name, last_name, email, level)
                if not ok:
                    raise StoreIntegrityError(sid)
                ok, rid = self.addResult(sid, cid, problems_solved, placement)
                if not ok:
                    raise StoreIntegrityError(rid)
                student_ids.append(sid)
    except (LeaderboardBenignException, pw.PeeweeException) as e:
        log.error("Team result in %s rolled back: %s", competition, e)
        return (False, str(e))
    log.info(
        "Added %s team of %d to %s: solved %s, placed %s",
        level,
        len(student_ids),
        competition,
        problems_solved,
        placement,
    )
    return (True, student_ids)


def addStudentResult(
    self, level, name, email, problems_solved, placement, competition
):
    """A team of one: add a single student's result, all or nothing."""
    return self.addTeamResult(
        level, (name, email), None, None, problems_solved, placement, competition
    )


@with_connection
def wipeAll(self):
    """Delete every student, competition and result in one transaction.

    Returns:
        2-tuple: `(True, counts)` where `counts` maps table name to the
        number of rows deleted, or `(False, msg)` after a rollback.
    """
    try:
        with self._db.atomic():
            counts = {
                "students": Student.delete().execute(),
                "competitions": Competition.delete().execute(),
                "results": Result.delete().execute(),
            }
    except pw.PeeweeException as e:
        log.error("Wipe rolled back: %s", e)
        return (False, f"Wipe failed: {e}")
    log.warning("Wiped database: %s", counts)
    return (True, counts)
