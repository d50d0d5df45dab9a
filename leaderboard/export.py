# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

import csv
import logging


log = logging.getLogger("leaderboard")

ALL_RESULTS_HEADER = ["Competition Name", "Student Name", "Problems Solved", "Placement"]
SUMMARY_HEADER = ["Name", "Problems Solved", "# of competitions"]


def write_all_results_csv(model, filename):
    """Write every result, grouped by competition, to a csv file.

    Arguments:
        model (ReadModel): a loaded read-model.
        filename (pathlib.Path/str): where to save the csv.

    Returns:
        int: the number of rows written, not counting the header.
    """
    rows = model.getAllResults()
    with open(filename, "w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=ALL_RESULTS_HEADER)
        writer.writeheader()
        for row in rows:
            writer.writerow(dict(zip(ALL_RESULTS_HEADER, row)))
    log.info("Exported %d results to %s", len(rows), filename)
    return len(rows)


def write_summary_csv(students, filename):
    """Write one line per student: name, total problems solved, competitions entered.

    Students are written in the order given, so sort or filter first.

    Returns:
        int: the number of rows written, not counting the header.
    """
    with open(filename, "w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=SUMMARY_HEADER)
        writer.writeheader()
        n = 0
        for s in students:
            writer.writerow(
                {
                    "Name": s.name,
                    "Problems Solved": s.total_problems(),
                    "# of competitions": s.participation_count(),
                }
            )
            n += 1
    log.info("Exported summary of %d students to %s", n, filename)
    return n
