# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

import csv

from leaderboard import ReadModel
from leaderboard.db import LeaderboardDB
from leaderboard.export import write_all_results_csv, write_summary_csv


def loaded_model(tmp_path):
    db = LeaderboardDB(tmp_path / "test.db")
    db.addTeamResult(
        "Novice", ("Ann Lee", "ann@x.com"), ("Ben Koh", "ben@x.com"), None, 5, 2, "A"
    )
    db.addTeamResult("Novice", ("Ann Lee", "ann@x.com"), None, None, 1, 7, "B")
    model = ReadModel(db)
    model.loadAll()
    return model


def read_rows(f):
    with open(f, newline="") as fh:
        return list(csv.reader(fh))


def test_export_all(tmp_path) -> None:
    model = loaded_model(tmp_path)
    f = tmp_path / "all.csv"
    assert write_all_results_csv(model, f) == 3
    assert read_rows(f) == [
        ["Competition Name", "Student Name", "Problems Solved", "Placement"],
        ["A", "Ann Lee", "5", "2"],
        ["A", "Ben Koh", "5", "2"],
        ["B", "Ann Lee", "1", "7"],
    ]


def test_export_summary(tmp_path) -> None:
    model = loaded_model(tmp_path)
    f = tmp_path / "summary.csv"
    assert write_summary_csv(model.sortByParticipationCount(), f) == 2
    assert read_rows(f) == [
        ["Name", "Problems Solved", "# of competitions"],
        ["Ann Lee", "6", "2"],
        ["Ben Koh", "5", "1"],
    ]


def test_export_empty(tmp_path) -> None:
    model = ReadModel(LeaderboardDB(tmp_path / "test.db"))
    model.loadAll()
    f = tmp_path / "all.csv"
    assert write_all_results_csv(model, f) == 0
    assert len(read_rows(f)) == 1
