# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

"""Leaderboard database stuff."""

__copyright__ = "Copyright (C) 2025 The Leaderboard Project Developers"
__credits__ = "The Leaderboard Project Developers"
__license__ = "AGPL-3.0-or-later"


from .leaderboardDB import LeaderboardDB

__all__ = [
    "LeaderboardDB",
]
