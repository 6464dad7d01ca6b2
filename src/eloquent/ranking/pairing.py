"""Swiss-style pairing of ideas for comparison rounds."""

from __future__ import annotations

import random
from collections.abc import Collection

from eloquent.models.idea import Idea


def pair_key(a: Idea, b: Idea) -> frozenset[int]:
    """Order-independent key identifying a pair of ideas."""
    return frozenset((a.id, b.id))


def pair_round(
    ideas: list[Idea],
    compared: Collection[frozenset[int]] | None = None,
    seed: int | None = None,
    bucket_width_ratio: float = 0.05,
) -> tuple[list[tuple[Idea, Idea]], Idea | None]:
    """Generate pairs for one round of comparisons.

    Ideas of similar rating are matched while avoiding pairs that were
    already compared:

    1. Ideas are sorted by rating (descending)
    2. They are grouped into "buckets" of similar ratings
    3. Ideas within each bucket are shuffled randomly
    4. Adjacent ideas in the shuffled list are paired

    With an odd number of ideas one sits the round out. The idea with the
    most comparisons so far is chosen, so ideas that have been seen less
    often catch up.

    Args:
        ideas: Ideas to pair. The list itself is not modified.
        compared: Keys (see ``pair_key``) of pairs already compared.
        seed: Random seed for reproducible shuffling.
        bucket_width_ratio: Bucket width as fraction of rating spread.

    Returns:
        Tuple of (pairs, bye). bye is None if the count is even.
    """
    min_pair_size = 2
    if len(ideas) < min_pair_size:
        return [], None

    rng = random.Random(seed)  # noqa: S311
    seen = set(compared or ())

    pool = list(ideas)
    bye: Idea | None = None
    if len(pool) % 2 == 1:
        bye = _pick_bye(pool)

    sorted_ideas = sorted(pool, key=lambda i: i.elo, reverse=True)

    ratings = [i.elo for i in sorted_ideas]
    spread = max(ratings) - min(ratings)
    bucket_width = max(spread * bucket_width_ratio, 1.0)

    buckets = _group_into_buckets(sorted_ideas, bucket_width)
    for bucket in buckets:
        rng.shuffle(bucket)

    shuffled = [i for bucket in buckets for i in bucket]
    pairs, unpaired = _pair_adjacent(shuffled, seen, allow_repeats=False)

    if len(unpaired) > 1:
        fallback_pairs, _ = _pair_adjacent(unpaired, seen, allow_repeats=True)
        pairs.extend(fallback_pairs)

    return pairs, bye


def _group_into_buckets(sorted_ideas: list[Idea], bucket_width: float) -> list[list[Idea]]:
    """Group ideas (sorted by rating, descending) into contiguous rating bands.

    A new bucket starts when an idea's rating differs from the bucket's
    anchor rating by more than bucket_width.
    """
    buckets: list[list[Idea]] = []
    current: list[Idea] = []
    anchor: float | None = None

    for idea in sorted_ideas:
        if anchor is None or abs(idea.elo - anchor) <= bucket_width:
            current.append(idea)
            if anchor is None:
                anchor = idea.elo
        else:
            buckets.append(current)
            current = [idea]
            anchor = idea.elo

    if current:
        buckets.append(current)

    return buckets


def _pick_bye(pool: list[Idea]) -> Idea:
    """Remove and return the idea that sits out (most comparisons, then lowest id)."""
    pool.sort(key=lambda i: (-i.comparisons, i.id))
    return pool.pop(0)


def _pair_adjacent(
    shuffled: list[Idea], seen: set[frozenset[int]], allow_repeats: bool
) -> tuple[list[tuple[Idea, Idea]], list[Idea]]:
    """Pair each idea with the next free one.

    Returns:
        Tuple of (pairs, unpaired_ideas)
    """
    pairs: list[tuple[Idea, Idea]] = []
    used: set[int] = set()

    for i, idea_a in enumerate(shuffled):
        if idea_a.id in used:
            continue

        for idea_b in shuffled[i + 1 :]:
            if idea_b.id in used:
                continue
            if not allow_repeats and pair_key(idea_a, idea_b) in seen:
                continue

            pairs.append((idea_a, idea_b))
            used.add(idea_a.id)
            used.add(idea_b.id)
            break

    unpaired = [i for i in shuffled if i.id not in used]
    return pairs, unpaired
