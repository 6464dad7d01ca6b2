"""Elo rating calculations for Eloquent."""

from __future__ import annotations

from collections.abc import Iterable

from eloquent.models.idea import Idea
from eloquent.ranking.preference import Preference, swap_sides, win_score

K_FACTOR = 32.0


def expectation(rating: float, other_rating: float) -> float:
    """Calculate the probability that an item is preferred over another.

    Uses the standard Elo formula:
    E = 1 / (1 + 10^((R_other - R) / 400))

    Args:
        rating: Rating of the item.
        other_rating: Rating of its opponent.

    Returns:
        Expected score (0.0 to 1.0).
    """
    return 1.0 / (1.0 + 10.0 ** ((other_rating - rating) / 400))


def rate(
    first_elo: float,
    second_elo: float,
    preference: Preference,
    k_factor: float = K_FACTOR,
) -> tuple[float, float]:
    """Compute new ratings for a compared pair.

    Args:
        first_elo: Current rating of the first item.
        second_elo: Current rating of the second item.
        preference: Outcome of the comparison.
        k_factor: Maximum rating swing per comparison.

    Returns:
        Tuple of (new_first_elo, new_second_elo).
    """
    expected_first = expectation(first_elo, second_elo)
    expected_second = expectation(second_elo, first_elo)

    # Each side scores the preference from its own point of view
    score_first = win_score(preference)
    score_second = win_score(swap_sides(preference))

    new_first = first_elo + k_factor * (score_first - expected_first)
    new_second = second_elo + k_factor * (score_second - expected_second)

    return new_first, new_second


def update_ratings(
    first: Idea,
    second: Idea,
    preference: Preference,
    k_factor: float = K_FACTOR,
) -> None:
    """Apply one comparison to both ideas in place.

    Both new ratings are computed from the pre-update snapshot before either
    idea is modified. Each idea's comparison count goes up by one.

    Args:
        first: First idea shown.
        second: Second idea shown.
        preference: Which idea was preferred.
        k_factor: Maximum rating swing per comparison.
    """
    new_first, new_second = rate(first.elo, second.elo, preference, k_factor=k_factor)

    first.elo = new_first
    second.elo = new_second

    first.comparisons += 1
    second.comparisons += 1


def leaderboard(ideas: Iterable[Idea]) -> list[Idea]:
    """Get ideas sorted by rating, highest first.

    Ties are broken by creation order (lower id first).
    """
    return sorted(ideas, key=lambda idea: (-idea.elo, idea.id))
