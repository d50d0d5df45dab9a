# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

"""Read-only queries used to build the read-model."""

import logging

from leaderboard.db.tables import Competition, Result, Student
from leaderboard.db.db_utils import with_connection


log = logging.getLogger("DB")


@with_connection
def RgetStudentRows(self):
    """All students in insertion order.

    Returns:
        list: of dicts with keys ``id``, ``firstname``, ``lastname``,
        ``email``, ``level``.
    """
    return [
        {
            "id": s.id,
            "firstname": s.firstname,
            "lastname": s.lastname,
            "email": s.email,
            "level": s.level,
        }
        for s in Student.select().order_by(Student.id)
    ]


@with_connection
def RgetResultRowsForStudent(self, student_id):
    """Results of one student, oldest first.

    Returns:
        list: of dicts with keys ``competition_id``, ``problems_solved``
        and ``placement``.
    """
    query = (
        Result.select().where(Result.student_id == student_id).order_by(Result.id)
    )
    return [
        {
            "competition_id": r.competition_id,
            "problems_solved": r.problems_solved,
            "placement": r.placement,
        }
        for r in query
    ]


@with_connection
def RgetCompetitionName(self, competition_id):
    """Name of a competition or None if no such id."""
    cref = Competition.get_or_none(Competition.id == competition_id)
    if cref is None:
        return None
    return cref.name


@with_connection
def RgetCompetitionRows(self):
    """All competitions in insertion order, as dicts with ``id`` and ``name``."""
    return [
        {"id": c.id, "name": c.name}
        for c in Competition.select().order_by(Competition.id)
    ]


@with_connection
def RgetResultRowsForCompetition(self, competition_id):
    """Results in one competition, oldest first.

    Returns:
        list: of dicts with keys ``student_id``, ``problems_solved``
        and ``placement``.
    """
    query = (
        Result.select()
        .where(Result.competition_id == competition_id)
        .order_by(Result.id)
    )
    return [
        {
            "student_id": r.student_id,
            "problems_solved": r.problems_solved,
            "placement": r.placement,
        }
        for r in query
    ]


@with_connection
def RgetStudentName(self, student_id):
    """Display name "first last" of a student or None if no such id."""
    sref = Student.get_or_none(Student.id == student_id)
    if sref is None:
        return None
    return f"{sref.firstname} {sref.lastname}"


@with_connection
def RgetCompetitionNames(self):
    return [c.name for c in Competition.select().order_by(Competition.id)]


@with_connection
def RgetRowCounts(self):
    """Number of rows in each table, keyed by table name."""
    return {
        "students": Student.select().count(),
        "competitions": Competition.select().count(),
        "results": Result.select().count(),
    }


@with_connection
def RgetAllResultRows(self):
    """Raw dump of the results table in insertion order."""
    return [
        {
            "id": r.id,
            "student_id": r.student_id,
            "competition_id": r.competition_id,
            "problems_solved": r.problems_solved,
            "placement": r.placement,
        }
        for r in Result.select().order_by(Result.id)
    ]
