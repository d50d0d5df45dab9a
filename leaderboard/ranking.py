# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 The Leaderboard Project Developers

"""Orderings and filters over the roster.

The sorts are an in-place quicksort (middle pivot, two pointers working
in from both ends) putting larger keys first.  They are not stable:
students with equal keys come out in whatever order the swaps leave
them, which need not be their original order.
"""

from typing import Callable, List

from .entities import LEVELS, Student


def _quicksort_descending(roster: List[Student], key: Callable[[Student], int]):
    if len(roster) < 2:
        return roster
    ranges = [(0, len(roster) - 1)]
    while ranges:
        low, high = ranges.pop()
        left = low
        right = high
        pivot = key(roster[low + (high - low) // 2])
        while left <= right:
            while key(roster[left]) > pivot:
                left += 1
            while key(roster[right]) < pivot:
                right -= 1
            if left <= right:
                roster[left], roster[right] = roster[right], roster[left]
                left += 1
                right -= 1
        # pushed in reverse so the low range is done first
        if left < high:
            ranges.append((left, high))
        if low < right:
            ranges.append((low, right))
    return roster


def sort_by_participation_count(roster: List[Student]) -> List[Student]:
    """Sort in place, most competitions entered first."""
    return _quicksort_descending(roster, Student.participation_count)


def sort_by_total_problems(roster: List[Student]) -> List[Student]:
    """Sort in place, most problems solved (over all competitions) first."""
    return _quicksort_descending(roster, Student.total_problems)


def all_students(roster: List[Student]) -> List[Student]:
    return list(roster)


def filter_by_level(roster: List[Student], level: str) -> List[Student]:
    """Students of the given level, in roster order.

    An unknown level is not an error: it gives the whole roster.
    """
    if level not in LEVELS:
        return all_students(roster)
    return [s for s in roster if s.level == level]
