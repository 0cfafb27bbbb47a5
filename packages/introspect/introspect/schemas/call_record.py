"""Call record schemas — one persisted fact per completed tool invocation."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator


def _utc_now() -> datetime:
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with stored timestamps."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class ToolCall(BaseModel):
    """A finished tool invocation, before the store assigns its sequence id.

    ``category`` may be left unset; the store derives it from ``tool_name``.
    """

    tool_name: str = Field(min_length=1)
    category: str | None = None
    arguments: JsonValue = None
    output: JsonValue = None
    succeeded: bool
    timestamp: datetime = Field(default_factory=_utc_now)
    session_id: str = ""
    duration_ms: int | None = Field(default=None, ge=0)

    @field_validator("timestamp")
    @classmethod
    def _timestamp_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class CallRecord(BaseModel):
    """Immutable record of a single tool invocation as stored in the history log."""

    model_config = ConfigDict(frozen=True)

    sequence_id: int = Field(ge=1, description="Append order; authoritative for chronology")
    tool_name: str = Field(min_length=1)
    category: str
    arguments: JsonValue = None
    output: JsonValue = None
    succeeded: bool
    timestamp: datetime
    session_id: str = ""
    duration_ms: int | None = Field(default=None, ge=0)

    @field_validator("timestamp")
    @classmethod
    def _timestamp_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)
