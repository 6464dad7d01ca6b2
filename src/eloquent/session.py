"""Ranking session: owns a list of ideas and applies comparisons to it."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from eloquent.core.config import SessionConfig
from eloquent.core.errors import UnknownIdeaError
from eloquent.models.idea import IdGenerator, Idea, create_idea
from eloquent.ranking.elo import leaderboard, update_ratings
from eloquent.ranking.pairing import pair_key, pair_round
from eloquent.ranking.preference import Preference

logger = structlog.get_logger()


@dataclass(frozen=True)
class Comparison:
    """Outcome of a single comparison, with ratings before and after."""

    first_id: int
    second_id: int
    preference: Preference
    first_elo_before: float
    second_elo_before: float
    first_elo_after: float
    second_elo_after: float


class RankingSession:
    """Holds the ideas being ranked and the comparisons made so far.

    Each session draws ids from its own generator unless one is passed in,
    so ids are unique within the session.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        ids: IdGenerator | None = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            config: Session configuration. Defaults are used if None.
            ids: Id source for new ideas. A fresh generator if None.
        """
        self.config = config or SessionConfig()
        self.ids = ids or IdGenerator()
        self.ideas: list[Idea] = []
        self.history: list[Comparison] = []
        self._by_id: dict[int, Idea] = {}
        self._compared: set[frozenset[int]] = set()

    @classmethod
    def from_config(cls, config: SessionConfig, ids: IdGenerator | None = None) -> RankingSession:
        """Create a session seeded with the ideas listed in the config."""
        session = cls(config, ids=ids)
        for idea in config.ideas:
            session.add_idea(idea.name, idea.cost)
        return session

    def add_idea(self, name: str, cost: float | None = None) -> Idea:
        """Create an idea at the configured initial rating and add it to the session."""
        idea = create_idea(name, cost, ids=self.ids, elo=self.config.ranking.initial_elo)
        self.ideas.append(idea)
        self._by_id[idea.id] = idea
        logger.debug("idea_added", id=idea.id, name=name)
        return idea

    def get(self, idea_id: int) -> Idea:
        """Look up an idea by id.

        Raises:
            UnknownIdeaError: If the session holds no such idea.
        """
        try:
            return self._by_id[idea_id]
        except KeyError:
            raise UnknownIdeaError(idea_id) from None

    @property
    def total_comparisons(self) -> int:
        return len(self.history)

    @property
    def rounds(self) -> int:
        """Number of rounds to run for the current idea count."""
        return self.config.resolve_rounds(len(self.ideas))

    def next_round(self, round_num: int) -> list[tuple[Idea, Idea]]:
        """Pair up ideas for a round, preferring pairs not compared yet.

        Args:
            round_num: Current round number (used for seed offset).

        Returns:
            Pairs to present, in order.
        """
        pairs, bye = pair_round(
            self.ideas,
            compared=self._compared,
            seed=self.config.seed + round_num,
            bucket_width_ratio=self.config.ranking.bucket_width_ratio,
        )
        logger.info(
            "round_pairs",
            round=round_num,
            count=len(pairs),
            bye=bye.id if bye else None,
        )
        return pairs

    def record(self, first: Idea, second: Idea, preference: Preference) -> Comparison:
        """Apply a preference between two ideas and remember it.

        Args:
            first: Idea shown first.
            second: Idea shown second.
            preference: Which one was preferred.

        Returns:
            The recorded comparison.
        """
        first_before, second_before = first.elo, second.elo
        update_ratings(first, second, preference, k_factor=self.config.ranking.k_factor)

        comparison = Comparison(
            first_id=first.id,
            second_id=second.id,
            preference=preference,
            first_elo_before=first_before,
            second_elo_before=second_before,
            first_elo_after=first.elo,
            second_elo_after=second.elo,
        )
        self.history.append(comparison)
        self._compared.add(pair_key(first, second))

        logger.debug(
            "comparison_recorded",
            first=first.id,
            second=second.id,
            preference=str(preference),
            first_elo=round(first.elo, 2),
            second_elo=round(second.elo, 2),
        )
        return comparison

    def leaderboard(self) -> list[Idea]:
        """Get the session's ideas sorted by rating, highest first."""
        return leaderboard(self.ideas)
