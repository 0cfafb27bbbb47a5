"""InspectToolCallsTool — paginated view of the tool-call history."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from introspect.runtime.history_store import HistoryStore
from introspect.runtime.query import query
from introspect.schemas.call_record import CallRecord
from introspect.schemas.query import DEFAULT_MAX_RESULTS, QueryPage, ToolCallQuery
from introspect.tools.base import BaseTool, SideEffect


class InspectToolCallsOutput(BaseModel):
    """Page of recorded calls plus pagination bookkeeping."""

    success: bool = True
    summary: str = ""
    calls: list[CallRecord] = Field(default_factory=list)
    count: int = Field(ge=0, default=0)
    total_matches: int = Field(ge=0, default=0)
    has_more: bool = False
    total_entries_in_memory: int = Field(ge=0, default=0)
    start_index: int = Field(ge=0, default=0)
    offset: int = 0
    max_results: int = Field(ge=0, default=DEFAULT_MAX_RESULTS)
    filter_tool_name: str | None = None
    filter_since: datetime | None = None


def summarize_page(page: QueryPage) -> str:
    """One-line human summary of a result page."""
    if not page.records:
        return f"Tool Call History · Calls: 0 of {page.total_matches} · No calls matching criteria"
    return (
        f"Tool Call History · Calls: {len(page.records)} of {page.total_matches}"
        f" · Latest: {page.records[-1].tool_name}"
    )


class InspectToolCallsTool(BaseTool):
    """Return recorded tool calls with their arguments and outputs."""

    def __init__(self, store: HistoryStore, default_page_size: int = DEFAULT_MAX_RESULTS) -> None:
        self._store = store
        self._default_page_size = default_page_size

    @property
    def name(self) -> str:
        return "inspect_tool_calls"

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def description(self) -> str:
        return (
            "Get tool call history with arguments and outputs, in chronological "
            "order. Filter by tool_name or since (ISO-8601). Paginate with offset "
            "and max_results; a negative offset returns the most recent calls "
            "(offset=-20 is the last 20). Calls to the inspection tools "
            "themselves are not recorded."
        )

    @property
    def input_schema(self) -> type[BaseModel]:
        return ToolCallQuery

    @property
    def output_schema(self) -> type[BaseModel]:
        return InspectToolCallsOutput

    @property
    def side_effect(self) -> SideEffect:
        return SideEffect.READ

    @property
    def idempotent(self) -> bool:
        return True

    def execute(self, input_data: BaseModel) -> BaseModel:
        assert isinstance(input_data, ToolCallQuery)
        if "max_results" not in input_data.model_fields_set:
            input_data = input_data.model_copy(update={"max_results": self._default_page_size})

        page = query(self._store.snapshot(), input_data)
        return InspectToolCallsOutput(
            summary=summarize_page(page),
            calls=page.records,
            count=len(page.records),
            total_matches=page.total_matches,
            has_more=page.has_more,
            total_entries_in_memory=page.total_in_memory,
            start_index=page.start_index,
            offset=page.offset,
            max_results=page.max_results,
            filter_tool_name=page.tool_name,
            filter_since=page.since,
        )
