"""Introspect runtime — history store, query engine, and tool categories."""

from introspect.runtime.categories import ToolCategory, categorize
from introspect.runtime.history_store import (
    DEFAULT_MAX_ENTRIES,
    HistoryStore,
    JsonlHistoryStore,
    LoadReport,
)
from introspect.runtime.query import query, resolve_start

__all__ = [
    "DEFAULT_MAX_ENTRIES",
    "HistoryStore",
    "JsonlHistoryStore",
    "LoadReport",
    "ToolCategory",
    "categorize",
    "query",
    "resolve_start",
]
