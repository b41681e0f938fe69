"""
Merit profile helpers for Majority Judgment.

A merit profile is the multiset of grades a candidate received, kept as a
sorted ascending ``int64`` array. Grades are only compared by their order,
so any integer scale works (``0..N``, ``-2..2``, ...).

All medians here are *lower* medians: for a profile of length ``n`` the
median is the element at index ``(n - 1) // 2`` of the sorted profile, so it
is always one of the grades actually given.
"""

import numpy as np

from ._base import validate_grades, validate_poll
from ._types import Candidate, MeritProfile, Poll


def _median(profile: MeritProfile) -> int:
    return int(profile[(profile.size - 1) // 2])


def merit_profile(grades) -> MeritProfile:
    """Return grades as a new sorted ``int64`` array (see ``validate_grades``)."""
    return validate_grades(grades)


def lower_median(grades) -> int:
    """
    Lower median grade of a merit profile.

    Args:
        grades: Sequence of integer grades, in any order.

    Returns:
        The grade at index ``(n - 1) // 2`` of the sorted profile.

    Raises:
        ValueError: If the profile is empty (no median is defined).

    Examples:
        >>> lower_median([3, 0, 2, 1])
        1
        >>> lower_median([2, 0, 1])
        1
    """
    profile = merit_profile(grades)
    if profile.size == 0:
        raise ValueError("Cannot take the median of an empty merit profile")
    return _median(profile)


def grade_tally(grades) -> dict[int, int]:
    """
    Count how many times each grade was given.

    Args:
        grades: Sequence of integer grades, in any order.

    Returns:
        Dict ``{grade: count}`` with keys in ascending order. Grades that
        were never given are absent.
    """
    values, counts = np.unique(merit_profile(grades), return_counts=True)
    return {int(g): int(c) for g, c in zip(values, counts)}


def _lower_median_slot(counts: np.ndarray, total: int) -> int:
    # Lower median index in the sorted profile is (total-1)//2
    target = (total - 1) // 2
    cum = 0
    for slot, c_ in enumerate(counts):
        cum += int(c_)
        if cum > target:
            return slot
    return int(len(counts) - 1)


def majority_values(grades) -> np.ndarray:
    """
    Consecutive lower medians obtained by withdrawing the median each time.

    Method context:
        The first value is the median grade. It is then removed once from
        the profile and the median of what remains is the second value, and
        so on until the profile is exhausted. Comparing two candidates'
        majority values lexicographically (higher first) is exactly the
        Majority Judgment tie-break.

    Args:
        grades: Sequence of integer grades, in any order.

    Returns:
        ``int64`` array with one value per grade; empty for an empty profile.

    Examples:
        >>> majority_values([0, 0, 3, 0, 2, 0, 3, 1, 2, 3]).tolist()
        [1, 2, 0, 2, 0, 3, 0, 3, 0, 3]

    Notes:
        The sequence is a permutation of the profile, so two candidates have
        equal majority values if and only if they have equal profiles.
    """
    profile = merit_profile(grades)
    grades_seen, counts = np.unique(profile, return_counts=True)

    values = np.empty(profile.size, dtype=np.int64)
    for step, total in enumerate(range(profile.size, 0, -1)):
        slot = _lower_median_slot(counts, total)
        values[step] = grades_seen[slot]
        counts[slot] -= 1
    return values


def median_grades(poll: Poll) -> dict[Candidate, int | None]:
    """
    Lower median grade of every candidate in a poll.

    Args:
        poll: Mapping from candidate to grades.

    Returns:
        Dict ``{candidate: median}``; candidates with an empty profile map
        to ``None``.

    Raises:
        EmptyPollError: If the poll has no candidates.
    """
    return {
        cand: _median(profile) if profile.size else None
        for cand, profile in validate_poll(poll).items()
    }


__all__ = [
    "merit_profile",
    "lower_median",
    "grade_tally",
    "majority_values",
    "median_grades",
]
