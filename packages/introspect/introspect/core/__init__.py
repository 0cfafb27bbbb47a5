"""Introspect core — identifiers and the error hierarchy."""

from introspect.core.errors import (
    CorruptHistoryError,
    IntrospectError,
    PersistenceError,
    QueryValidationError,
    ToolNotFoundError,
    ToolRegistrationError,
)
from introspect.core.identifiers import (
    SessionId,
    generate_id,
    generate_session_id,
)

__all__ = [
    "CorruptHistoryError",
    "IntrospectError",
    "PersistenceError",
    "QueryValidationError",
    "SessionId",
    "ToolNotFoundError",
    "ToolRegistrationError",
    "generate_id",
    "generate_session_id",
]
