"""Eloquent.

Rank a list of ideas by repeated pairwise comparison, converging on an
ordering with Elo ratings.
"""

from eloquent.models.idea import IdGenerator, Idea, create_idea
from eloquent.ranking.elo import K_FACTOR, update_ratings
from eloquent.ranking.preference import Preference

__version__ = "0.1.0"
__all__ = [
    "K_FACTOR",
    "IdGenerator",
    "Idea",
    "Preference",
    "__version__",
    "create_idea",
    "update_ratings",
]
