# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

"""The in-memory roster and competition catalog."""

import logging
from typing import List, Tuple

from .entities import Competition, Participation, Student, split_display_name
from .leaderboard_exceptions import NotFoundError
from . import ranking


log = logging.getLogger("leaderboard")


class ReadModel:
    """Roster of students and catalog of competitions built from a store.

    Nothing is ever patched in place: after any change to the store,
    call :meth:`loadAll` and everything is rebuilt from scratch.  This
    is simple and always consistent, at the cost of re-reading the whole
    store each time.

    Args:
        db (LeaderboardDB): the store to read from.
    """

    def __init__(self, db):
        self.db = db
        self.roster: List[Student] = []
        self.catalog: List[Competition] = []

    def loadAll(self) -> None:
        """Throw away the roster and catalog and rebuild both from the store."""
        self.roster.clear()
        self.catalog.clear()
        for row in self.db.RgetStudentRows():
            student = Student(
                row["id"], row["firstname"], row["lastname"], row["email"], row["level"]
            )
            for r in self.db.RgetResultRowsForStudent(student.id):
                name = self.db.RgetCompetitionName(r["competition_id"])
                if name is None:
                    log.warning(
                        "Result of student %s refers to missing competition %s: skipped",
                        student.id,
                        r["competition_id"],
                    )
                    continue
                student.add_participation(
                    Participation(
                        Competition(r["competition_id"], name),
                        r["problems_solved"],
                        r["placement"],
                    )
                )
            self.roster.append(student)
        for row in self.db.RgetCompetitionRows():
            self.catalog.append(Competition(row["id"], row["name"]))
        log.debug(
            "Read-model rebuilt: %d students, %d competitions",
            len(self.roster),
            len(self.catalog),
        )

    def getStudents(self) -> List[Student]:
        return list(self.roster)

    def getCompetitions(self) -> List[Competition]:
        return list(self.catalog)

    def findCompetition(self, name: str) -> Competition:
        """First competition in the catalog with this name.

        Raises:
            NotFoundError
        """
        for c in self.catalog:
            if c.name == name:
                return c
        raise NotFoundError(f"Competition not found: {name}")

    def findStudent(self, display_name: str) -> Student:
        """Roster student whose display name is "first last".

        Display names are not unique; when several students share one
        the first on the roster (lowest id) is returned and a warning
        logged.

        Raises:
            ValidationError: no space in the name.
            NotFoundError
        """
        first_name, last_name = split_display_name(display_name)
        wanted = f"{first_name} {last_name}"
        matches = [s for s in self.roster if s.name == wanted]
        if not matches:
            raise NotFoundError(f"Student not found: {display_name}")
        if len(matches) > 1:
            log.warning(
                '%d students share the name "%s": using the one with email %s',
                len(matches),
                wanted,
                matches[0].email,
            )
        return matches[0]

    def getCompetitionResults(self, name: str) -> List[Tuple[str, int, int]]:
        """Everyone's result in one competition, in the order they were added.

        Returns:
            list: of `(student_name, problems_solved, placement)`.

        Raises:
            NotFoundError: no competition of that name in the catalog.
        """
        comp = self.findCompetition(name)
        rows = []
        for r in self.db.RgetResultRowsForCompetition(comp.id):
            student_name = self.db.RgetStudentName(r["student_id"])
            if student_name is None:
                log.warning(
                    "Result in %s refers to missing student %s: skipped",
                    name,
                    r["student_id"],
                )
                continue
            rows.append((student_name, r["problems_solved"], r["placement"]))
        return rows

    def getStudentResults(self, display_name: str) -> List[Tuple[str, int, int]]:
        """One student's results, in the order they were added.

        Returns:
            list: of `(competition_name, problems_solved, placement)`.

        Raises:
            ValidationError: no space in the name.
            NotFoundError
        """
        student = self.findStudent(display_name)
        return [
            (e.competition.name, e.problems_solved, e.placement)
            for e in student.entries
        ]

    def getAllResults(self) -> List[Tuple[str, str, int, int]]:
        """Every result grouped by competition, in catalog order.

        Returns:
            list: of `(competition_name, student_name, problems_solved, placement)`.
        """
        rows = []
        for comp in self.catalog:
            for student_name, solved, placed in self.getCompetitionResults(comp.name):
                rows.append((comp.name, student_name, solved, placed))
        return rows

    @staticmethod
    def getSummaryRows(students) -> List[Tuple[str, int, int]]:
        """`(name, total problems solved, number of competitions)` per student."""
        return [
            (s.name, s.total_problems(), s.participation_count()) for s in students
        ]

    def sortByParticipationCount(self) -> List[Student]:
        """Reorder the roster, most competitions first, and return a copy."""
        ranking.sort_by_participation_count(self.roster)
        return self.getStudents()

    def sortByTotalProblems(self) -> List[Student]:
        """Reorder the roster, most problems solved first, and return a copy."""
        ranking.sort_by_total_problems(self.roster)
        return self.getStudents()

    def filterByLevel(self, level: str) -> List[Student]:
        return ranking.filter_by_level(self.roster, level)

    def all(self) -> List[Student]:
        return ranking.all_students(self.roster)
