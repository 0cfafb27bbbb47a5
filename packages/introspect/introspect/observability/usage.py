"""Usage aggregation — summary statistics over a history snapshot."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from introspect.observability.tracker import UsageTracker
from introspect.schemas.call_record import CallRecord
from introspect.schemas.usage import TimeSpan, ToolUsageStats, UsageSnapshot


def _tool_stats(records: Sequence[CallRecord]) -> list[ToolUsageStats]:
    stats: dict[str, ToolUsageStats] = {}
    timed: Counter[str] = Counter()
    for r in records:
        entry = stats.get(r.tool_name)
        if entry is None:
            entry = stats[r.tool_name] = ToolUsageStats(tool_name=r.tool_name)
        entry.call_count += 1
        if r.succeeded:
            entry.successes += 1
        else:
            entry.failures += 1
        if r.duration_ms is not None:
            entry.total_duration_ms += r.duration_ms
            timed[r.tool_name] += 1

    for name, entry in stats.items():
        if timed[name]:
            entry.avg_duration_ms = entry.total_duration_ms / timed[name]

    return sorted(stats.values(), key=lambda s: (-s.call_count, s.tool_name))


def aggregate(
    snapshot: Sequence[CallRecord],
    tracker: UsageTracker | None = None,
) -> UsageSnapshot:
    """Compute usage statistics for every record in the snapshot.

    Pure function of its input: no filtering, and the same snapshot always
    yields the same result. ``tracker`` only adds the ``live`` block.
    """
    live = tracker.snapshot() if tracker is not None else None
    if not snapshot:
        return UsageSnapshot(live=live)

    total = len(snapshot)
    successes = sum(1 for r in snapshot if r.succeeded)
    by_category = Counter(r.category for r in snapshot)
    by_tool = Counter(r.tool_name for r in snapshot)
    timestamps = [r.timestamp for r in snapshot]

    return UsageSnapshot(
        total_calls=total,
        successes=successes,
        failures=total - successes,
        success_rate=successes / total,
        by_category=dict(by_category),
        by_tool=dict(by_tool),
        tool_stats=_tool_stats(snapshot),
        tools_used=len(by_tool),
        session_ids=sorted({r.session_id for r in snapshot if r.session_id}),
        time_span=TimeSpan(earliest=min(timestamps), latest=max(timestamps)),
        live=live,
    )
