"""Query parameter and result schemas for the tool-call history."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, StrictInt, field_validator

from introspect.schemas.call_record import CallRecord, ensure_utc

DEFAULT_MAX_RESULTS = 50
MAX_PAGE_SIZE = 500


class ToolCallQuery(BaseModel):
    """Filter and pagination options for a history query.

    A negative ``offset`` counts back from the most recent match, so
    ``offset=-20`` selects the last twenty matching calls. ``max_results``
    above ``MAX_PAGE_SIZE`` is clamped rather than rejected.
    """

    tool_name: str | None = None
    since: datetime | None = None
    offset: StrictInt = 0
    max_results: StrictInt = Field(default=DEFAULT_MAX_RESULTS, ge=0)

    @field_validator("since")
    @classmethod
    def _since_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return ensure_utc(value)

    @field_validator("max_results")
    @classmethod
    def _clamp_page_size(cls, value: int) -> int:
        return min(value, MAX_PAGE_SIZE)


class QueryPage(BaseModel):
    """One page of matching call records in chronological order."""

    records: list[CallRecord] = Field(default_factory=list)
    total_matches: int = Field(ge=0, default=0)
    has_more: bool = False
    start_index: int = Field(ge=0, default=0)
    offset: int = 0
    max_results: int = Field(ge=0, default=DEFAULT_MAX_RESULTS)
    tool_name: str | None = None
    since: datetime | None = None
    total_in_memory: int = Field(ge=0, default=0)
