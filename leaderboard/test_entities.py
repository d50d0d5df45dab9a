# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

from pytest import raises

from leaderboard import (
    ADVANCED,
    NOVICE,
    Competition,
    Participation,
    Student,
    StudentKey,
    split_display_name,
)
from leaderboard.leaderboard_exceptions import ValidationError


def test_split_simple() -> None:
    assert split_display_name("Ann Lee") == ("Ann", "Lee")


def test_split_keeps_multiword_last_name() -> None:
    assert split_display_name("Mary Ann de Vries") == ("Mary", "Ann de Vries")


def test_split_needs_a_space() -> None:
    with raises(ValidationError, match="first and last"):
        split_display_name("Cher")
    with raises(ValidationError):
        split_display_name("")


def test_split_rejects_empty_parts() -> None:
    with raises(ValidationError):
        split_display_name(" Lee")
    with raises(ValidationError):
        split_display_name("Ann ")


def test_student_display_name_and_key() -> None:
    s = Student(3, "Ann", "Lee", "ann@x.com", NOVICE)
    assert s.name == "Ann Lee"
    assert s.key == StudentKey("Ann", "Lee", "ann@x.com")
    assert s.entries == []


def test_students_same_name_different_email_are_different() -> None:
    a = Student(1, "Sam", "Park", "sam1@x.com", NOVICE)
    b = Student(2, "Sam", "Park", "sam2@x.com", ADVANCED)
    assert a.name == b.name
    assert a != b
    assert len({a, b}) == 2


def test_student_identity_ignores_stored_id() -> None:
    a = Student(1, "Sam", "Park", "sam@x.com", NOVICE)
    b = Student(99, "Sam", "Park", "sam@x.com", NOVICE)
    assert a == b


def test_totals() -> None:
    s = Student(1, "Ann", "Lee", "ann@x.com", NOVICE)
    assert s.participation_count() == 0
    assert s.total_problems() == 0
    spring = Competition(1, "Spring Cup")
    fall = Competition(2, "Fall Cup")
    s.add_participation(Participation(spring, 5, 2))
    s.add_participation(Participation(fall, 3, 7))
    s.add_participation(Participation(spring, 0, 9))
    assert s.participation_count() == 3
    assert s.total_problems() == 8


def test_competition_equality_by_name() -> None:
    assert Competition(1, "Spring Cup") == Competition(-1, "Spring Cup")
    assert Competition(1, "Spring Cup") != Competition(1, "Fall Cup")
