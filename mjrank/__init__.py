"""mjrank package for ranking candidates by Majority Judgment.

Modules
------------------
- ``mjrank.rank`` provides the Majority Judgment ranking of a poll, the
  tie-aware merit levels, and the merit profile helpers it is built from.
- ``mjrank.utils`` provides rank-variant utilities shared across modules.

"""

__version__ = "0.1.0"

from . import rank, utils

__all__ = ["rank", "utils"]
