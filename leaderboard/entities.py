# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

"""In-memory students, competitions and their participation entries.

These are the objects of the read-model.  They are built by
:class:`leaderboard.ReadModel` from the store and thrown away on every
rebuild; nothing here ever writes back to the store.
"""

from typing import List, NamedTuple, Tuple

from .leaderboard_exceptions import ValidationError


NOVICE = "Novice"
ADVANCED = "Advanced"
LEVELS = (NOVICE, ADVANCED)


def split_display_name(name: str) -> Tuple[str, str]:
    """Split a display name into first and last name.

    Only the first space separates: "Mary Ann de Vries" gives
    ``("Mary", "Ann de Vries")``.

    Raises:
        ValidationError: no space, or an empty first or last part.
    """
    parts = name.split(" ", 1)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise ValidationError(
            f'Name "{name}" must include both first and last name.'
        )
    return parts[0], parts[1]


class StudentKey(NamedTuple):
    """Identity of a student: the same triple the store upserts on."""

    first_name: str
    last_name: str
    email: str


class Competition:
    """A competition in the catalog.

    Two competitions are the same if their names match; the stored id
    plays no part in lookups.
    """

    def __init__(self, id, name):
        self.id = id
        self.name = name

    def __eq__(self, other):
        if not isinstance(other, Competition):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"Competition({self.id!r}, {self.name!r})"


class Participation(NamedTuple):
    """One student's result in one competition."""

    competition: Competition
    problems_solved: int
    placement: int


class Student:
    """A student on the roster with their participation history.

    Identity is the :class:`StudentKey` (first, last, email).  Different
    students can share a display name; anything that looks students up
    by :attr:`name` has to cope with that.
    """

    def __init__(self, id, first_name, last_name, email, level):
        self.id = id
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.level = level
        self.entries: List[Participation] = []

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def key(self) -> StudentKey:
        return StudentKey(self.first_name, self.last_name, self.email)

    def add_participation(self, entry: Participation) -> None:
        self.entries.append(entry)

    def participation_count(self) -> int:
        return len(self.entries)

    def total_problems(self) -> int:
        return sum(e.problems_solved for e in self.entries)

    def __eq__(self, other):
        if not isinstance(other, Student):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"Student({self.id!r}, {self.name!r}, {self.email!r}, {self.level!r})"
