"""InspectUsageStatsTool — aggregate statistics over the tool-call history."""

from __future__ import annotations

from pydantic import BaseModel

from introspect.observability.tracker import UsageTracker
from introspect.observability.usage import aggregate
from introspect.runtime.history_store import HistoryStore
from introspect.schemas.usage import UsageSnapshot
from introspect.tools.base import BaseTool, SideEffect


class InspectUsageStatsInput(BaseModel):
    """No parameters."""


class InspectUsageStatsOutput(UsageSnapshot):
    success: bool = True
    summary: str = ""


def summarize_usage(stats: UsageSnapshot) -> str:
    return (
        f"Usage Statistics · Total: {stats.total_calls} · Success: {stats.successes}"
        f" · Failed: {stats.failures} · Rate: {stats.success_rate * 100:.1f}%"
    )


class InspectUsageStatsTool(BaseTool):
    """Summarize calls, success rate, and per-tool/per-category counts."""

    def __init__(self, store: HistoryStore, tracker: UsageTracker | None = None) -> None:
        self._store = store
        self._tracker = tracker

    @property
    def name(self) -> str:
        return "inspect_usage_stats"

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def description(self) -> str:
        return (
            "Get aggregated usage statistics for recorded tool calls: total "
            "calls, successes, failures, success rate, counts by category and "
            "by tool, per-tool durations, sessions seen, and the time span "
            "covered by the retained history."
        )

    @property
    def input_schema(self) -> type[BaseModel]:
        return InspectUsageStatsInput

    @property
    def output_schema(self) -> type[BaseModel]:
        return InspectUsageStatsOutput

    @property
    def side_effect(self) -> SideEffect:
        return SideEffect.READ

    @property
    def idempotent(self) -> bool:
        return True

    def execute(self, input_data: BaseModel) -> BaseModel:
        assert isinstance(input_data, InspectUsageStatsInput)
        stats = aggregate(self._store.snapshot(), self._tracker)
        return InspectUsageStatsOutput(
            summary=summarize_usage(stats),
            **stats.model_dump(exclude={"time_span"}),
            time_span=stats.time_span,
        )
