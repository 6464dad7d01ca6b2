"""Core configuration and errors for Eloquent."""

from eloquent.core.config import (
    IdeaConfig,
    RankingConfig,
    SessionConfig,
    calculate_nr_rounds,
    load_config,
    load_ideas_file,
)
from eloquent.core.errors import (
    ConfigurationError,
    EmptyIdeaNameError,
    UnknownIdeaError,
    ValidationError,
)

__all__ = [
    "IdeaConfig",
    "RankingConfig",
    "SessionConfig",
    "calculate_nr_rounds",
    "load_config",
    "load_ideas_file",
    "ConfigurationError",
    "EmptyIdeaNameError",
    "UnknownIdeaError",
    "ValidationError",
]
