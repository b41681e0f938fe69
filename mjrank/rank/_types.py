"""Shared type aliases for polls, profiles and rank variants."""

from collections.abc import Hashable, Iterable, Mapping
from typing import Literal, TypeAlias

import numpy as np

Candidate: TypeAlias = Hashable
Poll: TypeAlias = Mapping[Candidate, Iterable[int]]
MeritProfile: TypeAlias = np.ndarray
RankedResult: TypeAlias = list[tuple[Candidate, int]]
RankMethod: TypeAlias = Literal["competition", "competition_max", "dense", "avg"]
