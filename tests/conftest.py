from __future__ import annotations

import pytest

FOOD_POLL = {
    "Pizza": [0, 0, 3, 0, 2, 0, 3, 1, 2, 3],
    "Chips": [0, 1, 0, 2, 1, 2, 2, 3, 2, 3],
    "Pasta": [0, 1, 0, 1, 2, 1, 3, 2, 3, 3],
    "Bread": [0, 1, 2, 1, 1, 2, 1, 2, 2, 3],
}

# Uneven spread over 0..8, used as a regression profile.
WIDE_GRADES = [0, 0, 3, 0, 2, 0, 3, 1, 2, 3, 3, 3, 3, 3, 2, 1, 7, 8]


@pytest.fixture
def food_poll() -> dict[str, list[int]]:
    return {cand: list(grades) for cand, grades in FOOD_POLL.items()}


@pytest.fixture
def wide_grades() -> list[int]:
    return list(WIDE_GRADES)
