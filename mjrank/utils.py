"""Rank variants shared by the ranking helpers."""

import numpy as np
from scipy.stats import rankdata

# Public method name -> scipy.stats.rankdata method
RANK_VARIANTS = {
    "competition": "min",  # 1,2,2,4,5
    "competition_max": "max",  # 1,3,3,4,5
    "dense": "dense",  # 1,2,2,3,4
    "avg": "average",  # 1.0,2.5,2.5,4.0,5.0
}


def rank_scores(scores_in_id_order, method: str = "competition") -> np.ndarray:
    """
    Convert scores into one-based ranks, equal scores sharing a rank.

    Args:
        scores_in_id_order: 1D scores aligned by ID order, higher is better.
        method: One of ``"competition"``, ``"competition_max"``, ``"dense"``
            or ``"avg"``.

    Returns:
        Ranks aligned with the input (1 is best); float for ``"avg"``.

    Raises:
        ValueError: If scores are not a finite 1D sequence or the method is
            unknown.
    """
    try:
        variant = RANK_VARIANTS[method]
    except KeyError as e:
        raise ValueError(
            f'unknown method "{method}", expected one of {", ".join(RANK_VARIANTS)}'
        ) from e

    scores = np.asarray(scores_in_id_order, dtype=float)
    if scores.ndim != 1:
        raise ValueError(f"scores must be a 1D sequence, got shape {scores.shape}")
    if not np.isfinite(scores).all():
        raise ValueError("scores must not contain NaN or Inf values")

    return rankdata(-scores, method=variant)


__all__ = ["RANK_VARIANTS", "rank_scores"]
