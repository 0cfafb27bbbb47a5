"""Tests for usage aggregation and the live usage tracker."""

from datetime import timedelta

import pytest

from introspect.observability.tracker import UsageTracker
from introspect.observability.usage import aggregate
from introspect.runtime.history_store import JsonlHistoryStore
from introspect.tools.recording import HistoryRecorder
from tests.conftest import BASE_TIME, make_record


class TestAggregate:
    def test_empty_snapshot(self) -> None:
        stats = aggregate(())
        assert stats.total_calls == 0
        assert stats.successes == 0
        assert stats.failures == 0
        assert stats.success_rate == 0.0
        assert stats.by_category == {}
        assert stats.by_tool == {}
        assert stats.session_ids == []
        assert stats.time_span is None
        assert stats.live is None

    def test_two_successes_one_failure(self) -> None:
        snapshot = (
            make_record(1, succeeded=True),
            make_record(2, succeeded=True),
            make_record(3, succeeded=False),
        )
        stats = aggregate(snapshot)
        assert stats.total_calls == 3
        assert stats.successes == 2
        assert stats.failures == 1
        assert stats.success_rate == pytest.approx(0.667, abs=1e-3)

    def test_breakdowns_sum_to_total(self) -> None:
        snapshot = (
            make_record(1, "read_file", category="filesystem"),
            make_record(2, "run_command", category="terminal", succeeded=False),
            make_record(3, "read_file", category="filesystem"),
            make_record(4, "grep", category="search"),
            make_record(5, "edit_block", category="edit", succeeded=False),
        )
        stats = aggregate(snapshot)
        assert stats.by_tool == {"read_file": 2, "run_command": 1, "grep": 1, "edit_block": 1}
        assert stats.by_category == {"filesystem": 2, "terminal": 1, "search": 1, "edit": 1}
        assert sum(stats.by_tool.values()) == stats.total_calls
        assert sum(stats.by_category.values()) == stats.total_calls
        assert stats.successes + stats.failures == stats.total_calls
        assert stats.tools_used == 4

    def test_tool_stats(self) -> None:
        snapshot = (
            make_record(1, "read_file", duration_ms=10),
            make_record(2, "read_file", duration_ms=30, succeeded=False),
            make_record(3, "read_file"),
            make_record(4, "grep", duration_ms=5),
        )
        stats = aggregate(snapshot)
        first, second = stats.tool_stats
        assert first.tool_name == "read_file"
        assert first.call_count == 3
        assert first.successes == 2
        assert first.failures == 1
        assert first.total_duration_ms == 40
        assert first.avg_duration_ms == pytest.approx(20.0)
        assert second.tool_name == "grep"
        assert second.avg_duration_ms == pytest.approx(5.0)

    def test_tool_stats_ties_sorted_by_name(self) -> None:
        snapshot = (make_record(1, "zeta"), make_record(2, "alpha"))
        stats = aggregate(snapshot)
        assert [s.tool_name for s in stats.tool_stats] == ["alpha", "zeta"]

    def test_session_ids_distinct_and_sorted(self) -> None:
        snapshot = (
            make_record(1, session_id="s2"),
            make_record(2, session_id="s1"),
            make_record(3, session_id="s2"),
            make_record(4, session_id=""),
        )
        assert aggregate(snapshot).session_ids == ["s1", "s2"]

    def test_time_span(self) -> None:
        snapshot = (
            make_record(1, timestamp=BASE_TIME + timedelta(seconds=30)),
            make_record(2, timestamp=BASE_TIME),
            make_record(3, timestamp=BASE_TIME + timedelta(seconds=10)),
        )
        span = aggregate(snapshot).time_span
        assert span is not None
        assert span.earliest == BASE_TIME
        assert span.latest == BASE_TIME + timedelta(seconds=30)
        assert span.duration_ms == 30_000
        assert span.model_dump()["duration_ms"] == 30_000

    def test_pure_function_of_snapshot(self) -> None:
        snapshot = tuple(make_record(i, succeeded=i % 3 != 0) for i in range(1, 40))
        assert aggregate(snapshot) == aggregate(snapshot)

    def test_matches_store_recount(self, store) -> None:
        recorder = HistoryRecorder(store, "session-a")
        for i in range(12):
            recorder.record("read_file" if i % 2 else "grep", {}, {}, succeeded=i % 5 != 0)
        snapshot = store.snapshot()
        stats = aggregate(snapshot)
        assert stats.total_calls == len(snapshot)
        assert stats.successes == sum(1 for r in snapshot if r.succeeded)


class TestUsageTracker:
    def test_counts(self) -> None:
        tracker = UsageTracker()
        tracker.record(make_record(1, "read_file"))
        tracker.record(make_record(2, "grep", succeeded=False))
        tracker.record(make_record(3, "read_file"))

        live = tracker.snapshot()
        assert live.total_calls == 3
        assert live.successes == 2
        assert live.failures == 1
        assert live.by_tool == {"read_file": 2, "grep": 1}
        assert live.first_call_at == BASE_TIME + timedelta(seconds=1)
        assert live.last_call_at == BASE_TIME + timedelta(seconds=3)

    def test_reset(self) -> None:
        tracker = UsageTracker()
        tracker.record(make_record(1))
        tracker.reset()
        live = tracker.snapshot()
        assert live.total_calls == 0
        assert live.first_call_at is None

    def test_live_block_outlives_eviction(self) -> None:
        store = JsonlHistoryStore(max_entries=2)
        tracker = UsageTracker()
        recorder = HistoryRecorder(store, "s", tracker)
        for _ in range(5):
            recorder.record("read_file", {}, {}, succeeded=True)

        stats = aggregate(store.snapshot(), tracker)
        assert stats.total_calls == 2
        assert stats.live is not None
        assert stats.live.total_calls == 5
