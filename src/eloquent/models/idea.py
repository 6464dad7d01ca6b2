"""Idea records and their factory."""

from __future__ import annotations

import threading
from dataclasses import dataclass

INITIAL_ELO = 1000.0


@dataclass
class Idea:
    """A single item being ranked.

    Attributes:
        id: Unique identifier, assigned at creation.
        name: Display label.
        elo: Current Elo rating. Only the rating engine changes it.
        comparisons: Number of pairwise comparisons this idea took part in.
        cost: Optional numeric attribute carried alongside the idea.
    """

    id: int
    name: str
    elo: float = INITIAL_ELO
    comparisons: int = 0
    cost: float | None = None


class IdGenerator:
    """Hands out increasing integer ids, starting at ``start``."""

    def __init__(self, start: int = 0) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the next unused id."""
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        """Return the id the next call to ``next_id`` will hand out."""
        with self._lock:
            return self._next


# Lives for the whole process, never reset.
_default_ids = IdGenerator()


def create_idea(
    name: str,
    cost: float | None = None,
    *,
    ids: IdGenerator | None = None,
    elo: float = INITIAL_ELO,
) -> Idea:
    """Create a fresh idea with the next unused id.

    Args:
        name: Display label. Callers are expected to reject empty names.
        cost: Optional cost carried alongside the idea.
        ids: Id source to draw from. Defaults to the process-wide generator.
        elo: Starting rating.

    Returns:
        New idea with zero comparisons.
    """
    source = ids if ids is not None else _default_ids
    return Idea(id=source.next_id(), name=name, elo=elo, comparisons=0, cost=cost)
