"""Introspect observability — usage aggregation and live counters."""

from introspect.observability.tracker import UsageTracker
from introspect.observability.usage import aggregate

__all__ = [
    "UsageTracker",
    "aggregate",
]
