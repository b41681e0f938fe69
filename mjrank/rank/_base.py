"""
Base utilities for Majority Judgment ranking.

This module normalises caller data into private merit profiles and defines
the error raised when there is nothing to rank.
"""

import logging
from collections.abc import Iterable, Mapping
from numbers import Integral

import numpy as np

from ._types import Candidate, MeritProfile, Poll

logger = logging.getLogger(__name__)

INT64 = np.iinfo(np.int64)


class EmptyPollError(ValueError):
    """Raised when a poll holds no candidates at all."""


def validate_grades(grades: Iterable[int], name: str = "grades") -> MeritProfile:
    """
    Validate grades and convert them to a sorted merit profile.

    Args:
        grades: Sequence (or any finite iterable) of integer grades. The
            order is irrelevant. Integral floats such as ``2.0`` are
            accepted; booleans and fractional values are not.
        name: Label used in error messages.

    Returns:
        New 1D ``int64`` array sorted ascending. The caller's container is
        never shared with the result.

    Raises:
        ValueError: If grades are not a flat sequence of integers, or a grade
            does not fit in a 64-bit signed integer.
    """
    if not isinstance(grades, np.ndarray):
        try:
            grades = list(grades)
        except TypeError as e:
            raise ValueError(
                f"{name} must be an iterable of integer grades, "
                f"got {type(grades).__name__}"
            ) from e
    arr = np.asarray(grades)

    if arr.ndim != 1:
        raise ValueError(f"{name} must be a 1D sequence of grades, got shape {arr.shape}")
    if arr.size == 0:
        return np.zeros(0, dtype=np.int64)

    if arr.dtype == object:
        # Python ints beyond int64 end up here
        if not all(
            isinstance(g, Integral) and not isinstance(g, (bool, np.bool_)) for g in arr
        ):
            raise ValueError(f"{name} must be numeric, got dtype {arr.dtype}")
        if any(g < INT64.min or g > INT64.max for g in arr):
            raise ValueError(
                f"{name} must fit in 64-bit signed integers, got {min(arr)} to {max(arr)}"
            )
        arr = arr.astype(np.int64)

    if np.issubdtype(arr.dtype, np.bool_):
        raise ValueError(f"{name} must contain integer grades, got booleans")
    if not np.issubdtype(arr.dtype, np.number):
        raise ValueError(f"{name} must be numeric, got dtype {arr.dtype}")
    if np.issubdtype(arr.dtype, np.complexfloating):
        raise ValueError(f"{name} must contain real-valued grades")
    if np.issubdtype(arr.dtype, np.floating):
        if not np.isfinite(arr).all():
            raise ValueError(f"{name} must not contain NaN or Inf values")
        if not np.all(arr == np.round(arr)):
            raise ValueError(
                f"{name} must contain integer grades, got fractional values"
            )
        if (arr < -(2.0**63)).any() or (arr >= 2.0**63).any():
            raise ValueError(
                f"{name} must fit in 64-bit signed integers, "
                f"got {arr.min()} to {arr.max()}"
            )
    elif np.issubdtype(arr.dtype, np.unsignedinteger) and arr.max() > INT64.max:
        raise ValueError(
            f"{name} must fit in 64-bit signed integers, got up to {arr.max()}"
        )

    return np.sort(arr.astype(np.int64))


def validate_poll(poll: Poll) -> dict[Candidate, MeritProfile]:
    """
    Validate a poll and build a private merit profile per candidate.

    Args:
        poll: Mapping from candidate identifier to its grades.

    Returns:
        Dict with the same candidates mapped to sorted ``int64`` profiles.

    Raises:
        EmptyPollError: If the poll has no candidates.
        ValueError: If the poll is not a mapping or a profile is malformed.
    """
    if not isinstance(poll, Mapping):
        raise ValueError(
            f"poll must be a mapping of candidate to grades, got {type(poll).__name__}"
        )
    if len(poll) == 0:
        raise EmptyPollError("Need at least 1 candidate to rank, got an empty poll")

    profiles = {
        cand: validate_grades(grades, name=f"grades of {cand!r}")
        for cand, grades in poll.items()
    }

    lengths = {profile.size for profile in profiles.values()}
    if len(lengths) > 1:
        # Ranking still proceeds; shorter profiles exhaust first.
        logger.warning(
            "profiles have unequal lengths (%d to %d grades), "
            "the poll may not be fair",
            min(lengths),
            max(lengths),
        )

    return profiles


__all__ = [
    "EmptyPollError",
    "validate_grades",
    "validate_poll",
]
