# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

"""Exceptions for the Leaderboard software.

Serious exceptions are for unexpected things that we probably cannot
sanely or safely recover from.  Benign are for signaling expected (or
at least not unexpected) situations, such as asking for a student who
is not on the roster.
"""


class LeaderboardException(Exception):
    """Catch-all parent of all Leaderboard-related exceptions."""

    pass


class LeaderboardSeriousException(LeaderboardException):
    """Serious or unexpected problems that are generally not recoverable."""

    pass


class LeaderboardBenignException(LeaderboardException):
    """A not-unexpected situation, often signaling an error condition."""

    pass


class NotFoundError(LeaderboardBenignException):
    """A student or competition looked up by name does not exist."""

    pass


class ValidationError(LeaderboardBenignException):
    """Input that cannot be used: a malformed name or a non-numeric score."""

    pass


class StoreIntegrityError(LeaderboardBenignException):
    """A store write failed part-way and was rolled back."""

    pass


class StoreConnectionError(LeaderboardSeriousException):
    """The store could not be opened or initialised."""

    pass
