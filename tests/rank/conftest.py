from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key

import numpy as np
import pytest

from mjrank import rank


@dataclass
class RankAssertionHelper:
    def assert_total_ranking(self, result: list, poll: dict) -> None:
        assert isinstance(result, list)
        assert len(result) == len(poll)
        assert sorted(cand for cand, _ in result) == sorted(poll)
        assert [position for _, position in result] == list(range(len(poll)))

    def oracle_order(self, poll: dict) -> list:
        """Sort by majority values, higher first; a proper prefix is lower."""
        values = {cand: rank.majority_values(g).tolist() for cand, g in poll.items()}

        def compare(a, b) -> int:
            va, vb = values[a], values[b]
            for x, y in zip(va, vb):
                if x != y:
                    return -1 if x > y else 1
            if len(va) != len(vb):
                return -1 if len(va) > len(vb) else 1
            return -1 if a < b else (1 if a > b else 0)

        return sorted(poll, key=cmp_to_key(compare))


@pytest.fixture(scope="session")
def rank_assertions() -> RankAssertionHelper:
    return RankAssertionHelper()


@pytest.fixture(scope="session")
def random_polls() -> list[dict[str, list[int]]]:
    rng = np.random.default_rng(20240607)
    polls = []
    for _ in range(60):
        n_candidates = int(rng.integers(1, 7))
        n_voters = int(rng.integers(1, 12))
        polls.append(
            {
                f"c{i}": rng.integers(0, 4, size=n_voters).tolist()
                for i in range(n_candidates)
            }
        )
    return polls


@pytest.fixture(scope="session")
def ragged_polls() -> list[dict[str, list[int]]]:
    rng = np.random.default_rng(7)
    polls = []
    for _ in range(40):
        n_candidates = int(rng.integers(2, 6))
        polls.append(
            {
                f"c{i}": rng.integers(0, 3, size=int(rng.integers(0, 6))).tolist()
                for i in range(n_candidates)
            }
        )
    return polls
