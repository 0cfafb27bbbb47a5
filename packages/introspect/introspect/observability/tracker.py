"""Live usage tracker — running counters since process start."""

from __future__ import annotations

import threading
from collections import Counter
from datetime import UTC, datetime

from introspect.schemas.call_record import CallRecord
from introspect.schemas.usage import LiveUsage


class UsageTracker:
    """Thread-safe counters for calls recorded during this process.

    Unlike the history window these counters are never evicted, so they keep
    counting after the store starts dropping old records.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._started_at = datetime.now(UTC)
        self._total = 0
        self._successes = 0
        self._by_tool: Counter[str] = Counter()
        self._first_call_at: datetime | None = None
        self._last_call_at: datetime | None = None

    @property
    def started_at(self) -> datetime:
        return self._started_at

    def record(self, record: CallRecord) -> None:
        """Count one committed call."""
        with self._lock:
            self._total += 1
            if record.succeeded:
                self._successes += 1
            self._by_tool[record.tool_name] += 1
            if self._first_call_at is None:
                self._first_call_at = record.timestamp
            self._last_call_at = record.timestamp

    def snapshot(self) -> LiveUsage:
        with self._lock:
            return LiveUsage(
                started_at=self._started_at,
                total_calls=self._total,
                successes=self._successes,
                failures=self._total - self._successes,
                by_tool=dict(self._by_tool),
                first_call_at=self._first_call_at,
                last_call_at=self._last_call_at,
            )

    def reset(self) -> None:
        with self._lock:
            self._started_at = datetime.now(UTC)
            self._total = 0
            self._successes = 0
            self._by_tool.clear()
            self._first_call_at = None
            self._last_call_at = None
