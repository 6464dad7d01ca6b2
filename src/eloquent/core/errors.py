"""Custom exceptions for configuration and session errors."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base exception for configuration errors with optional suggestions."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"[Configuration Error] {self.message}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class EmptyIdeaNameError(ConfigurationError):
    """Error when an idea has a blank name."""

    def __init__(self, line: int) -> None:
        super().__init__(
            f"Empty idea name on line {line}",
            "Give every idea a non-empty name.",
        )


class ValidationError(ConfigurationError):
    """Error when a value in a config or ideas file is invalid."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            f"Invalid value for '{field}'",
            f"{reason}",
        )


class UnknownIdeaError(KeyError):
    """Error when a session is asked for an idea id it does not hold."""

    def __init__(self, idea_id: int) -> None:
        self.idea_id = idea_id
        super().__init__(f"No idea with id {idea_id} in this session")
