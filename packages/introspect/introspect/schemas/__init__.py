"""Introspect schemas — Pydantic v2 models for records, queries, and statistics."""

from introspect.schemas.call_record import CallRecord, ToolCall
from introspect.schemas.query import (
    DEFAULT_MAX_RESULTS,
    MAX_PAGE_SIZE,
    QueryPage,
    ToolCallQuery,
)
from introspect.schemas.usage import LiveUsage, TimeSpan, ToolUsageStats, UsageSnapshot

__all__ = [
    "DEFAULT_MAX_RESULTS",
    "MAX_PAGE_SIZE",
    "CallRecord",
    "LiveUsage",
    "QueryPage",
    "TimeSpan",
    "ToolCall",
    "ToolCallQuery",
    "ToolUsageStats",
    "UsageSnapshot",
]
