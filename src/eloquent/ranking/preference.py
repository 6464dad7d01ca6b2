"""Preference signal for a single pairwise judgment."""

from __future__ import annotations

from enum import StrEnum


class Preference(StrEnum):
    """Which of two items is preferred: the first, the second, or neither."""

    FIRST = "first"
    SECOND = "second"
    NO_PREFERENCE = "none"


_ALIASES: dict[str, Preference] = {
    "1": Preference.FIRST,
    "a": Preference.FIRST,
    "2": Preference.SECOND,
    "b": Preference.SECOND,
    "0": Preference.NO_PREFERENCE,
    "=": Preference.NO_PREFERENCE,
    "tie": Preference.NO_PREFERENCE,
}


def swap_sides(preference: Preference) -> Preference:
    """Mirror a preference as seen from the other item."""
    if preference is Preference.FIRST:
        return Preference.SECOND
    if preference is Preference.SECOND:
        return Preference.FIRST
    return preference


def win_score(preference: Preference) -> float:
    """Score of the first item: 1.0 for a win, 0.0 for a loss, 0.5 for a tie."""
    if preference is Preference.FIRST:
        return 1.0
    if preference is Preference.SECOND:
        return 0.0
    return 0.5


def parse_preference(value: str) -> Preference:
    """Parse user input into a Preference.

    Accepts the enum values ("first", "second", "none") as well as the
    shorthands "1"/"a", "2"/"b" and "0"/"="/"tie". Case-insensitive.

    Raises:
        ValueError: If the input is not recognized.
    """
    key = value.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Preference(key)
    except ValueError:
        msg = f"Unrecognized preference: {value!r}"
        raise ValueError(msg) from None
