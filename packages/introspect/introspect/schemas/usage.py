"""Usage statistics schemas derived from call records."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, computed_field


class ToolUsageStats(BaseModel):
    """Per-tool counters and timing."""

    tool_name: str
    call_count: int = Field(ge=0, default=0)
    successes: int = Field(ge=0, default=0)
    failures: int = Field(ge=0, default=0)
    total_duration_ms: int = Field(ge=0, default=0)
    avg_duration_ms: float = Field(ge=0, default=0.0)


class TimeSpan(BaseModel):
    """Earliest and latest call timestamps in a record set."""

    earliest: datetime
    latest: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def duration_ms(self) -> int:
        return max(0, int((self.latest - self.earliest).total_seconds() * 1000))


class LiveUsage(BaseModel):
    """Counters accumulated since the tracker was created (process lifetime)."""

    started_at: datetime
    total_calls: int = Field(ge=0, default=0)
    successes: int = Field(ge=0, default=0)
    failures: int = Field(ge=0, default=0)
    by_tool: dict[str, int] = Field(default_factory=dict)
    first_call_at: datetime | None = None
    last_call_at: datetime | None = None


class UsageSnapshot(BaseModel):
    """Summary statistics over the retained history window."""

    total_calls: int = Field(ge=0, default=0)
    successes: int = Field(ge=0, default=0)
    failures: int = Field(ge=0, default=0)
    success_rate: float = Field(ge=0.0, le=1.0, default=0.0)
    by_category: dict[str, int] = Field(default_factory=dict)
    by_tool: dict[str, int] = Field(default_factory=dict)
    tool_stats: list[ToolUsageStats] = Field(default_factory=list)
    tools_used: int = Field(ge=0, default=0)
    session_ids: list[str] = Field(default_factory=list)
    time_span: TimeSpan | None = None
    live: LiveUsage | None = None
