"""Core error hierarchy for introspect."""

from __future__ import annotations


class IntrospectError(Exception):
    """Base exception for all introspect errors."""


class QueryValidationError(IntrospectError):
    """Raised when inspection parameters fail validation."""


class PersistenceError(IntrospectError):
    """Raised when the history log cannot be written or read."""


class CorruptHistoryError(IntrospectError):
    """Raised for an unparsable line in the persisted history log."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class ToolRegistrationError(IntrospectError):
    """Raised when a tool name is registered twice."""


class ToolNotFoundError(IntrospectError):
    """Raised when looking up a tool that is not registered."""
