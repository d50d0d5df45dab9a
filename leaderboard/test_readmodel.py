# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

import logging

from pytest import raises

from leaderboard import ReadModel
from leaderboard.db import LeaderboardDB
from leaderboard.leaderboard_exceptions import NotFoundError, ValidationError


def loaded_model(tmp_path):
    db = LeaderboardDB(tmp_path / "test.db")
    db.addTeamResult(
        "Advanced",
        ("Ann Lee", "ann@x.com"),
        ("Ben Koh", "ben@x.com"),
        None,
        6,
        2,
        "Spring Cup",
    )
    db.addTeamResult("Novice", ("Cat Day", "cat@x.com"), None, None, 4, 1, "Spring Cup")
    db.addTeamResult("Advanced", ("Ann Lee", "ann@x.com"), None, None, 3, 5, "Fall Cup")
    model = ReadModel(db)
    model.loadAll()
    return db, model


def test_empty_store_gives_empty_model(tmp_path) -> None:
    model = ReadModel(LeaderboardDB(tmp_path / "test.db"))
    model.loadAll()
    assert model.getStudents() == []
    assert model.getCompetitions() == []
    assert model.sortByTotalProblems() == []
    assert model.sortByParticipationCount() == []


def test_model_matches_store(tmp_path) -> None:
    db, model = loaded_model(tmp_path)
    assert len(model.roster) == len({s["id"] for s in db.RgetStudentRows()})
    for s in model.roster:
        assert s.participation_count() == len(db.RgetResultRowsForStudent(s.id))
    assert [c.name for c in model.catalog] == ["Spring Cup", "Fall Cup"]


def test_roster_in_insertion_order_with_entries_in_order(tmp_path) -> None:
    _, model = loaded_model(tmp_path)
    assert [s.name for s in model.roster] == ["Ann Lee", "Ben Koh", "Cat Day"]
    ann = model.roster[0]
    assert [e.competition.name for e in ann.entries] == ["Spring Cup", "Fall Cup"]
    assert ann.level == "Advanced"
    assert model.roster[2].level == "Novice"


def test_every_entry_refers_to_catalog(tmp_path) -> None:
    _, model = loaded_model(tmp_path)
    names = {c.name for c in model.catalog}
    for s in model.roster:
        for e in s.entries:
            assert e.competition.name in names


def test_load_all_rebuilds_rather_than_appends(tmp_path) -> None:
    db, model = loaded_model(tmp_path)
    model.loadAll()
    model.loadAll()
    assert len(model.roster) == 3
    db.removeStudent("Ben", "Koh")
    # not reloaded yet: still the old picture
    assert len(model.roster) == 3
    model.loadAll()
    assert [s.name for s in model.roster] == ["Ann Lee", "Cat Day"]


def test_student_results(tmp_path) -> None:
    _, model = loaded_model(tmp_path)
    assert model.getStudentResults("Ann Lee") == [
        ("Spring Cup", 6, 2),
        ("Fall Cup", 3, 5),
    ]
    assert model.getStudentResults("Cat Day") == [("Spring Cup", 4, 1)]


def test_student_results_bad_name(tmp_path) -> None:
    _, model = loaded_model(tmp_path)
    with raises(ValidationError):
        model.getStudentResults("Ann")
    with raises(NotFoundError):
        model.getStudentResults("Zed Zulu")


def test_student_results_multiword_last_name(tmp_path) -> None:
    db = LeaderboardDB(tmp_path / "test.db")
    db.addTeamResult(
        "Novice", ("Mary Ann de Vries", "mary@x.com"), None, None, 2, 3, "Cup"
    )
    model = ReadModel(db)
    model.loadAll()
    (s,) = model.roster
    assert s.first_name == "Mary"
    assert s.last_name == "Ann de Vries"
    assert model.getStudentResults("Mary Ann de Vries") == [("Cup", 2, 3)]


def test_shared_display_name_uses_first_and_warns(tmp_path, caplog) -> None:
    db = LeaderboardDB(tmp_path / "test.db")
    db.addTeamResult("Novice", ("Sam Park", "sam1@x.com"), None, None, 1, 1, "A")
    db.addTeamResult("Novice", ("Sam Park", "sam2@x.com"), None, None, 9, 2, "B")
    model = ReadModel(db)
    model.loadAll()
    assert len(model.roster) == 2
    with caplog.at_level(logging.WARNING, logger="leaderboard"):
        r = model.getStudentResults("Sam Park")
    assert r == [("A", 1, 1)]
    assert "share the name" in caplog.text


def test_competition_results(tmp_path) -> None:
    _, model = loaded_model(tmp_path)
    assert model.getCompetitionResults("Spring Cup") == [
        ("Ann Lee", 6, 2),
        ("Ben Koh", 6, 2),
        ("Cat Day", 4, 1),
    ]
    assert model.getCompetitionResults("Fall Cup") == [("Ann Lee", 3, 5)]
    with raises(NotFoundError):
        model.getCompetitionResults("Winter Cup")


def test_competition_without_results(tmp_path) -> None:
    db, _ = loaded_model(tmp_path)
    db.upsertCompetition("Empty Cup")
    model = ReadModel(db)
    model.loadAll()
    assert model.getCompetitionResults("Empty Cup") == []


def test_all_results_grouped_by_competition(tmp_path) -> None:
    _, model = loaded_model(tmp_path)
    assert model.getAllResults() == [
        ("Spring Cup", "Ann Lee", 6, 2),
        ("Spring Cup", "Ben Koh", 6, 2),
        ("Spring Cup", "Cat Day", 4, 1),
        ("Fall Cup", "Ann Lee", 3, 5),
    ]


def test_sorts_and_filters(tmp_path) -> None:
    _, model = loaded_model(tmp_path)
    by_count = model.sortByParticipationCount()
    assert by_count[0].name == "Ann Lee"
    assert [s.participation_count() for s in by_count] == [2, 1, 1]
    by_total = model.sortByTotalProblems()
    assert [s.total_problems() for s in by_total] == [9, 6, 4]
    assert [s.name for s in model.roster] == [s.name for s in by_total]
    assert [s.name for s in model.filterByLevel("Novice")] == ["Cat Day"]
    assert len(model.filterByLevel("Advanced")) == 2
    assert len(model.filterByLevel("nonsense")) == 3
    assert len(model.all()) == 3


def test_summary_rows(tmp_path) -> None:
    _, model = loaded_model(tmp_path)
    rows = model.getSummaryRows(model.sortByTotalProblems())
    assert rows == [("Ann Lee", 9, 2), ("Ben Koh", 6, 1), ("Cat Day", 4, 1)]
