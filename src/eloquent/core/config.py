"""Configuration schemas and loading for Eloquent."""

from __future__ import annotations

import math
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from eloquent.core.errors import EmptyIdeaNameError, ValidationError
from eloquent.models.idea import INITIAL_ELO
from eloquent.ranking.elo import K_FACTOR

COST_SEPARATOR = "|"


class IdeaConfig(BaseModel):
    """An idea listed up front in a session config."""

    name: str
    cost: float | None = None

    @field_validator("name")
    @classmethod
    def validate_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "Idea names cannot be empty"
            raise ValueError(msg)
        return v.strip()


class RankingConfig(BaseModel):
    """Rating and pairing configuration.

    Attributes:
        k_factor: Maximum rating swing per comparison.
        initial_elo: Starting rating for new ideas.
        rounds: Number of comparison rounds. If None, auto-calculated as
            ceil(log2(ideas)) + 1 (minimum 3).
        bucket_width_ratio: Pairing bucket width as fraction of rating spread.
    """

    k_factor: float = Field(default=K_FACTOR, gt=0)
    initial_elo: float = INITIAL_ELO
    rounds: int | None = Field(default=None, ge=1)
    bucket_width_ratio: float = Field(default=0.05, ge=0)


class SessionConfig(BaseModel):
    """Complete ranking session configuration."""

    ideas: list[IdeaConfig] = Field(default_factory=list)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    seed: int = 42

    def resolve_rounds(self, num_ideas: int | None = None) -> int:
        """Get the configured round count, or the recommended one for the idea count."""
        if self.ranking.rounds is not None:
            return self.ranking.rounds
        return calculate_nr_rounds(len(self.ideas) if num_ideas is None else num_ideas)


def load_config(path: str | Path) -> SessionConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Validated SessionConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with config_path.open() as f:
        data = yaml.safe_load(f)

    return SessionConfig.model_validate(data or {})


def load_ideas_file(path: str | Path) -> list[IdeaConfig]:
    """Read ideas from a plain text file.

    One idea per line. Blank lines and lines starting with '#' are skipped.
    A cost may follow the name after a '|', e.g. ``Repaint the shed | 120``.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        EmptyIdeaNameError: If a line has a cost but no name.
        ValidationError: If a cost is not a number.
    """
    ideas_path = Path(path)
    if not ideas_path.exists():
        msg = f"Ideas file not found: {ideas_path}"
        raise FileNotFoundError(msg)

    ideas: list[IdeaConfig] = []
    lines = ideas_path.read_text(encoding="utf-8").splitlines()
    for line_no, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        name, sep, cost_text = line.rpartition(COST_SEPARATOR)
        if not sep:
            name, cost_text = cost_text, ""

        if not name.strip():
            raise EmptyIdeaNameError(line_no)

        cost: float | None = None
        if cost_text.strip():
            try:
                cost = float(cost_text)
            except ValueError:
                raise ValidationError(
                    "cost", f"'{cost_text.strip()}' is not a number (line: {line!r})"
                ) from None

        ideas.append(IdeaConfig(name=name, cost=cost))

    return ideas


def calculate_nr_rounds(num_ideas: int) -> int:
    """Calculate recommended number of comparison rounds.

    Uses ceil(log2(N)) + 1 heuristic to ensure stable rankings:
    - log2(N) rounds needed to find a clear winner
    - +1 extra round for ranking stability

    Args:
        num_ideas: Number of ideas being ranked.

    Returns:
        Recommended number of rounds (minimum 3).
    """
    if num_ideas <= 1:
        return 1
    min_rounds = 3
    return max(min_rounds, math.ceil(math.log2(num_ideas)) + 1)
