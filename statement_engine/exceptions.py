"""Exception hierarchy raised by the statement engine."""
from __future__ import annotations


class StatementEngineError(Exception):
    """Base class for every error raised by the engine."""


class InvalidParametersError(StatementEngineError):
    """Raised when generation parameters are degenerate or inconsistent."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        base = super().__str__()
        return f"{self.field}: {base}" if self.field else base


class ConfigurationError(StatementEngineError):
    """Raised when an environment variable cannot be parsed."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"{name}={value!r} is not a valid {expected}")
        self.name = name
        self.value = value
