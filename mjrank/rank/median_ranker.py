"""
Majority Judgment ranking of a poll.

Each candidate is judged by its merit profile, the grades it received from
all voters. Candidates are ordered by their lower median grade; candidates
sharing a median are separated by repeatedly withdrawing one occurrence of
the shared median from each of them and comparing the new medians.

References:
    Balinski, M., & Laraki, R. (2011).
    Majority Judgment: Measuring, Ranking, and Electing. MIT Press.
"""

import logging

import numpy as np

from mjrank.utils import rank_scores

from ._base import validate_poll
from ._types import Candidate, MeritProfile, Poll, RankedResult, RankMethod
from .median import _median, majority_values

logger = logging.getLogger(__name__)


def _withdraw_median(profile: MeritProfile) -> MeritProfile:
    return np.delete(profile, (profile.size - 1) // 2)


def _resolve_order(profiles: dict[Candidate, MeritProfile]) -> list[Candidate]:
    """
    Order candidates best first, consuming the given profiles.

    The pending stack holds blocks of candidates ordered among themselves;
    the block on top is always the best one not yet emitted. Settled blocks
    are emitted as they are. A contested block is split by median, and each
    of its tie groups is pushed back with the median withdrawn from every
    member.
    """
    order: list[Candidate] = []
    pending: list[tuple[int, list[Candidate], bool]] = [(0, list(profiles), True)]

    while pending:
        round_idx, members, contested = pending.pop()
        if not contested:
            order.extend(members)
            continue

        exhausted = sorted(cand for cand in members if profiles[cand].size == 0)
        groups: dict[int, list[Candidate]] = {}
        for cand in members:
            if profiles[cand].size:
                groups.setdefault(_median(profiles[cand]), []).append(cand)

        # Exhausted profiles rank below everything still contested.
        if exhausted:
            if len(exhausted) > 1:
                logger.info(
                    "%s cannot be separated by their grades, ordering by identifier",
                    exhausted,
                )
            pending.append((round_idx, exhausted, False))

        for grade in sorted(groups):
            tied = groups[grade]
            if len(tied) == 1:
                pending.append((round_idx, tied, False))
                continue
            logger.debug(
                "round %d: %s tied at median %d, withdrawing it",
                round_idx,
                sorted(tied),
                grade,
            )
            for cand in tied:
                profiles[cand] = _withdraw_median(profiles[cand])
            pending.append((round_idx + 1, tied, True))

    return order


def majority_judgment(poll: Poll) -> RankedResult:
    """
    Rank candidates with Majority Judgment, resolving every tie.

    Method context:
        Candidates are grouped by lower median grade, higher medians first.
        Within a tie group, one occurrence of the shared median is removed
        from each member's (private) profile and the group is regrouped by
        the new medians, until every member is separated.

    Args:
        poll: Mapping from candidate identifier to its integer grades.
            Profiles may differ in length and may be empty. The poll is
            not modified.

    Returns:
        List of ``(candidate, rank)`` pairs, best first, with zero-based
        ranks ``0..len(poll)-1``. No two candidates share a rank.

    Raises:
        EmptyPollError: If the poll has no candidates.
        ValueError: If a profile is not a flat sequence of integers.

    Formula:
        Candidates are ordered by their majority values (see
        :func:`mjrank.rank.median.majority_values`) compared
        lexicographically, higher first; a sequence that runs out while
        equal to a longer one ranks below it.

    Examples:
        >>> from mjrank import rank
        >>> rank.majority_judgment({"A": [1, 2, 3], "B": [0, 2, 2], "C": []})
        [('A', 0), ('B', 1), ('C', 2)]

    Notes:
        - Empty profiles have no median and rank below every candidate with
          at least one grade.
        - Candidates with identical profiles (or profiles that run out
          together) are equally meritorious; they are placed next to each
          other in the natural order of their identifiers.
    """
    profiles = validate_poll(poll)
    order = _resolve_order(profiles)
    return [(cand, position) for position, cand in enumerate(order)]


def merit_levels(
    poll: Poll,
    method: RankMethod = "competition",
) -> dict[Candidate, int | float]:
    """
    Tie-aware Majority Judgment ranks.

    Method context:
        Same order as :func:`majority_judgment`, but candidates that Majority
        Judgment cannot separate (identical merit profiles, or several empty
        profiles) share a level instead of being split by identifier.

    Args:
        poll: Mapping from candidate identifier to its integer grades.
        method: Tie-handling rule passed to :func:`mjrank.utils.rank_scores`.

    Returns:
        Dict ``{candidate: rank}`` with one-based ranks (1 is best), iterating
        in the order of :func:`majority_judgment`; floats for
        ``method="avg"``, integers otherwise.

    Raises:
        EmptyPollError: If the poll has no candidates.
        ValueError: If ``method`` is unknown.
    """
    profiles = validate_poll(poll)
    values = {cand: majority_values(profile) for cand, profile in profiles.items()}
    order = _resolve_order(profiles)

    L = len(order)
    scores = np.zeros(L, dtype=float)
    current_score = float(L)
    for i, cand in enumerate(order):
        if i > 0 and not np.array_equal(values[order[i - 1]], values[cand]):
            current_score -= 1.0
        scores[i] = current_score

    ranks = rank_scores(scores, method=method)
    if method == "avg":
        return {cand: float(r) for cand, r in zip(order, ranks)}
    return {cand: int(r) for cand, r in zip(order, ranks)}


__all__ = [
    "majority_judgment",
    "merit_levels",
]
