#!/usr/bin/env python3

# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

"""Command line tool for the competition leaderboard.

Run '%(prog)s init' once in a directory to create a config file, then
'%(prog)s load' a spreadsheet of team results.  Other subcommands view,
change or export what has been loaded.
"""

__copyright__ = "Copyright (C) 2025 The Leaderboard Project Developers"
__credits__ = "The Leaderboard Project Developers"
__license__ = "AGPL-3.0-or-later"

import argparse
import logging
from pathlib import Path
import sys

from tabulate import tabulate

from leaderboard import __version__
from leaderboard import LEVELS, LeaderboardSession
from leaderboard.config import create_config, load_config
from leaderboard.export import write_all_results_csv, write_summary_csv
from leaderboard.leaderboard_exceptions import (
    LeaderboardBenignException,
    StoreConnectionError,
)


FILTERS = ("competitions", "problems") + LEVELS


def check_non_negative(arg):
    if int(arg) < 0:
        raise ValueError
    return int(arg)


def check_positive(arg):
    if int(arg) < 1:
        raise ValueError
    return int(arg)


def get_parser():
    parser = argparse.ArgumentParser(
        description=__doc__.split("\n")[0],
        epilog="Use '%(prog)s <subcommand> -h' for detailed help.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s " + __version__
    )
    parser.add_argument(
        "--dir",
        default=".",
        help="Directory holding the config file (default: current directory).",
    )
    parser.add_argument(
        "--logfile",
        help="Also write the log to this file.",
    )
    sub = parser.add_subparsers(
        dest="command", description="Perform various leaderboard tasks."
    )

    spI = sub.add_parser(
        "init",
        help="Create a config file",
        description="Write a default config file which you can then edit.",
    )
    spI.add_argument("--db-file", help="SQLite file name to use.")
    spI.add_argument("--db-name", help="Use this MySQL database instead of SQLite.")

    spL = sub.add_parser(
        "load",
        help="Load team results from a csv",
        description="""
            Read a spreadsheet of teams, "#" starting Advanced and "~"
            starting Novice blocks, adding every team's result to the
            named competition.
        """,
    )
    spL.add_argument("csvfile", help="The .csv file to read.")
    spL.add_argument("competition", help="Name of the competition.")

    sub.add_parser(
        "leaderboard",
        help="Show the leaderboard",
        description="Students by number of competitions entered, most first.",
    )
    sub.add_parser(
        "all-data",
        help="Show all results",
        description="Every result, grouped by competition.",
    )

    spAS = sub.add_parser(
        "add-student",
        help="Add a student's result",
        description="Add one result for one student, creating either as needed.",
    )
    spAS.add_argument("name", help='Full name, "First Last".')
    spAS.add_argument("email")
    spAS.add_argument("level", choices=LEVELS)
    spAS.add_argument("competition")
    spAS.add_argument("problems_solved", type=check_non_negative)
    spAS.add_argument("placement", type=check_positive)

    spRS = sub.add_parser("remove-student", help="Remove a student and their results")
    spRS.add_argument("name", help='Full name, "First Last".')

    spAC = sub.add_parser("add-competition", help="Add a competition")
    spAC.add_argument("competition")

    spRC = sub.add_parser(
        "remove-competition", help="Remove a competition and its results"
    )
    spRC.add_argument("competition")

    spF = sub.add_parser(
        "filter",
        help="Sort or filter students",
        description="""
            Sort by competitions entered or problems solved (most first),
            or show only Novice or Advanced students.
        """,
    )
    spF.add_argument("by", choices=FILTERS)

    spC = sub.add_parser("competition", help="Show results of one competition")
    spC.add_argument("competition")

    spS = sub.add_parser("student", help="Show results of one student")
    spS.add_argument("name", help='Full name, "First Last".')

    spEA = sub.add_parser("export-all", help="Write all results to a csv file")
    spEA.add_argument("csvfile")

    spES = sub.add_parser(
        "export-summary", help="Write a per-student summary to a csv file"
    )
    spES.add_argument("csvfile")
    spES.add_argument(
        "--by",
        choices=FILTERS,
        help="Sort or filter the students first.",
    )

    spW = sub.add_parser("wipe", help="Delete everything")
    spW.add_argument(
        "--yes", action="store_true", help="Do not ask for confirmation."
    )
    return parser


def setup_logging(level, logfile=None):
    # 5 is to keep debug/info lined up
    fmtstr = "%(asctime)s %(levelname)5s:%(name)s\t%(message)s"
    logging.basicConfig(
        format=fmtstr, datefmt="%b%d %H:%M:%S %Z", level=level.upper()
    )
    if logfile:
        h = logging.FileHandler(logfile)
        h.setFormatter(logging.Formatter(fmtstr, datefmt="%b%d %H:%M:%S %Z"))
        logging.getLogger().addHandler(h)


def select_students(model, by):
    if by == "competitions":
        return model.sortByParticipationCount()
    if by == "problems":
        return model.sortByTotalProblems()
    if by in LEVELS:
        return model.filterByLevel(by)
    return model.all()


def run_command(session, args):
    """Carry out one subcommand, printing what happened.

    returns:
        int: exit code.
    """
    model = session.model
    if args.command == "load":
        added, failures = session.loadSpreadsheet(Path(args.csvfile), args.competition)
        print(f'Loaded {added} teams into "{args.competition}".')
        for lineno, msg in failures:
            print(f"  line {lineno} not loaded: {msg}")
        return 0 if not failures else 1

    if args.command != "add-student" and not session.hasData():
        print("Please load data first.")
        return 1

    if args.command == "leaderboard":
        students = model.sortByParticipationCount()
        rows = [(s.name, s.participation_count(), s.total_problems()) for s in students]
        print(
            tabulate(
                rows,
                headers=["Name", "# of Competitions", "Total # of problems solved"],
            )
        )
    elif args.command == "all-data":
        print(
            tabulate(
                model.getAllResults(),
                headers=["Competition", "Student", "Problems solved", "Placement"],
            )
        )
    elif args.command == "add-student":
        ok, r = session.addStudentResult(
            args.level,
            args.name,
            args.email,
            args.problems_solved,
            args.placement,
            args.competition,
        )
        if not ok:
            print(f"No student added: {r}")
            return 1
        print("Student added.")
    elif args.command == "remove-student":
        ok, r = session.removeStudent(args.name)
        if not ok:
            print(f"No student removed: {r}")
            return 1
        print("Student removed.")
    elif args.command == "add-competition":
        ok, r = session.addCompetition(args.competition)
        if not ok:
            print(f"No competition added: {r}")
            return 1
        print("Competition added.")
    elif args.command == "remove-competition":
        ok, r = session.removeCompetition(args.competition)
        if not ok:
            print(f"No competition removed: {r}")
            return 1
        print("Competition removed.")
    elif args.command == "filter":
        students = select_students(model, args.by)
        print(
            tabulate(
                model.getSummaryRows(students),
                headers=["Name", "Problems Solved", "# of competitions"],
            )
        )
    elif args.command == "competition":
        print(
            tabulate(
                model.getCompetitionResults(args.competition),
                headers=["Name", "Problems Solved", "Placement"],
            )
        )
    elif args.command == "student":
        print(
            tabulate(
                model.getStudentResults(args.name),
                headers=["Competition", "Problems Solved", "Placed"],
            )
        )
    elif args.command == "export-all":
        n = write_all_results_csv(model, args.csvfile)
        print(f"Exported {n} results to {args.csvfile}.")
    elif args.command == "export-summary":
        n = write_summary_csv(select_students(model, args.by), args.csvfile)
        print(f"Exported {n} students to {args.csvfile}.")
    elif args.command == "wipe":
        if not args.yes:
            yn = input("Delete all students, competitions and results? [y/N] ")
            if yn.lower() not in ("y", "yes"):
                print("Nothing deleted.")
                return 1
        ok, r = session.wipeAll()
        if not ok:
            print(f"Nothing deleted: {r}")
            return 1
        print("Database wiped.")
    return 0


def main():
    """The leaderboard command line tool."""
    args = get_parser().parse_args()

    if args.command is None:
        get_parser().print_help()
        return 0

    if args.command == "init":
        try:
            cf = create_config(args.dir, db_file=args.db_file, db_name=args.db_name)
        except FileExistsError as e:
            print(e)
            return 1
        print(f"Created {cf}: edit it as you see fit.")
        return 0

    cfg = load_config(args.dir)
    setup_logging(cfg["LogLevel"], args.logfile)
    try:
        session = LeaderboardSession.from_config(cfg)
    except StoreConnectionError as e:
        print(e)
        return 2
    try:
        return run_command(session, args)
    except (LeaderboardBenignException, FileNotFoundError) as e:
        print(e)
        return 1
    finally:
        session.close()


if __name__ == "__main__":
    sys.exit(main())
