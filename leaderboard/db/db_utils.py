# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

import functools


def with_connection(f):
    """Decorator: hold a database connection only for the length of the call.

    If the connection is already open (for example we are inside another
    decorated method, perhaps mid-transaction) just call the function.
    Otherwise open one and close it again on every exit path.

    Arguments:
        f (function): a method of :class:`LeaderboardDB` to be decorated.

    Returns:
        function: the original wrapped with connection handling.
    """

    @functools.wraps(f)
    def wrapped(self, *args, **kwargs):
        if not self._db.is_closed():
            return f(self, *args, **kwargs)
        self._db.connect()
        try:
            return f(self, *args, **kwargs)
        finally:
            self._db.close()

    return wrapped
