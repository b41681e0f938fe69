"""
Majority Judgment ranking.

Input Format
------------
A poll is a mapping from candidate identifier (usually a string) to the
grades that candidate received, one per voter:

    {"Pizza": [0, 0, 3, 0, 2], "Chips": [0, 1, 0, 2, 1], ...}

Grades are integers on an ordinal scale shared by the whole poll (for
example 0 = Reject up to 3 = Excellent). Only their order matters; the
scale bounds are not checked. Profiles may be given in any order, may
differ in length, and may be empty.

Output Format
-------------
- `majority_judgment` returns a list of `(candidate, rank)` pairs, best
  first, with zero-based ranks and no ties.
- `merit_levels` returns `{candidate: rank}` with one-based ranks in which
  candidates that Majority Judgment cannot separate share a rank.

Available Methods
-----------------

**Ranking:**
- `majority_judgment`: total Majority Judgment order of a poll
- `merit_levels`: tie-aware Majority Judgment ranks

**Merit profiles:**
- `merit_profile`: sorted copy of a candidate's grades
- `lower_median`: lower median grade of a profile
- `grade_tally`: number of times each grade was given
- `majority_values`: consecutive medians when withdrawing the median
- `median_grades`: lower median of every candidate in a poll

Examples
--------
>>> from mjrank import rank
>>> poll = {
...     "Pizza": [0, 0, 3, 0, 2, 0, 3, 1, 2, 3],
...     "Chips": [0, 1, 0, 2, 1, 2, 2, 3, 2, 3],
...     "Pasta": [0, 1, 0, 1, 2, 1, 3, 2, 3, 3],
...     "Bread": [0, 1, 2, 1, 1, 2, 1, 2, 2, 3],
... }
>>> rank.majority_judgment(poll)
[('Chips', 0), ('Pasta', 1), ('Bread', 2), ('Pizza', 3)]
>>> rank.median_grades(poll)
{'Pizza': 1, 'Chips': 2, 'Pasta': 1, 'Bread': 1}
"""

from ._base import EmptyPollError
from .median import (
    grade_tally,
    lower_median,
    majority_values,
    median_grades,
    merit_profile,
)
from .median_ranker import majority_judgment, merit_levels

__all__ = [
    "EmptyPollError",
    # Ranking
    "majority_judgment",
    "merit_levels",
    # Merit profiles
    "merit_profile",
    "lower_median",
    "grade_tally",
    "majority_values",
    "median_grades",
]
