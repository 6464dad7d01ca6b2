"""Ranking module for Eloquent.

Provides the Elo rating engine, the preference signal and round pairing.
"""

from eloquent.ranking.elo import K_FACTOR, expectation, leaderboard, rate, update_ratings
from eloquent.ranking.pairing import pair_key, pair_round
from eloquent.ranking.preference import Preference, parse_preference, swap_sides, win_score

__all__ = [
    "K_FACTOR",
    "Preference",
    "expectation",
    "leaderboard",
    "pair_key",
    "pair_round",
    "parse_preference",
    "rate",
    "swap_sides",
    "update_ratings",
    "win_score",
]
