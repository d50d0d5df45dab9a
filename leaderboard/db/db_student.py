# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

import logging

import peewee as pw

from leaderboard.entities import LEVELS
from leaderboard.db.tables import Result, Student
from leaderboard.db.db_utils import with_connection


log = logging.getLogger("DB")


@with_connection
def upsertStudent(self, first_name, last_name, email, level):
    """Find a student by first name, last name and email, else create one.

    Args:
        first_name (str)
        last_name (str)
        email (str)
        level (str): "Novice" or "Advanced".  Only used when a new
            row is created: an existing student keeps their stored
            level even if a different one is given here.

    Returns:
        2-tuple: `(True, student_id)` or `(False, msg)` if no row could
        be found or created.
    """
    if level not in LEVELS:
        return (False, f'Invalid level "{level}" for {first_name} {last_name}')
    sref = (
        Student.select()
        .where(
            Student.firstname == first_name,
            Student.lastname == last_name,
            Student.email == email,
        )
        .order_by(Student.id)
        .first()
    )
    if sref is not None:
        if sref.level != level:
            log.debug(
                "Student %s %s already stored as %s: ignoring level %s",
                first_name,
                last_name,
                sref.level,
                level,
            )
        return (True, sref.id)
    try:
        sref = Student.create(
            firstname=first_name, lastname=last_name, email=email, level=level
        )
    except pw.IntegrityError as e:
        log.error("Create student %s %s error - %s", first_name, last_name, e)
        return (False, f"Cannot create student {first_name} {last_name}: {e}")
    if sref.id is None:
        return (False, f"No id was generated for student {first_name} {last_name}")
    log.info("Created student %s %s with id %s", first_name, last_name, sref.id)
    return (True, sref.id)


@with_connection
def removeStudent(self, first_name, last_name):
    """Remove a student and all of their results.

    The student is found by first and last name only; email is not
    considered.  If several students share the name, the oldest goes.

    Returns:
        2-tuple: `(True, student_id)` or `(False, msg)` if there is no
        such student, in which case nothing is changed.
    """
    sref = (
        Student.select()
        .where(Student.firstname == first_name, Student.lastname == last_name)
        .order_by(Student.id)
        .first()
    )
    if sref is None:
        log.info("Student not found: %s %s", first_name, last_name)
        return (False, f"Student not found: {first_name} {last_name}")
    sid = sref.id
    with self._db.atomic():
        n = Result.delete().where(Result.student_id == sid).execute()
        Student.delete().where(Student.id == sid).execute()
    log.info("Removed student %s %s (id %s) and %d results", first_name, last_name, sid, n)
    return (True, sid)


@with_connection
def isEmpty(self):
    """True if no student has ever been loaded (or all were removed)."""
    return Student.select().count() == 0
