# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

"""Leaderboard tracks students, the competitions they enter and their results.

Results are kept in a small relational store.  An in-memory read-model
of the roster and competition catalog is rebuilt from the store after
every change and is what the leaderboards, filters and exports look at.
"""

__copyright__ = "Copyright (C) 2025 The Leaderboard Project Developers"
__credits__ = "The Leaderboard Project Developers"
__license__ = "AGPL-3.0-or-later"

from .version import __version__

from .entities import (
    NOVICE,
    ADVANCED,
    LEVELS,
    Competition,
    Participation,
    Student,
    StudentKey,
    split_display_name,
)
from .readmodel import ReadModel
from .session import LeaderboardSession

__all__ = [
    "NOVICE",
    "ADVANCED",
    "LEVELS",
    "Competition",
    "Participation",
    "Student",
    "StudentKey",
    "split_display_name",
    "ReadModel",
    "LeaderboardSession",
]
