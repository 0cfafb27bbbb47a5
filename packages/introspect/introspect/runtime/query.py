"""Query engine — filtered, paginated slices of a history snapshot."""

from __future__ import annotations

from collections.abc import Sequence

from introspect.schemas.call_record import CallRecord
from introspect.schemas.query import QueryPage, ToolCallQuery


def resolve_start(offset: int, total: int) -> int:
    """Map an offset onto a start index over ``total`` matches.

    Non-negative offsets count from the earliest match; negative offsets
    count back from the latest and clamp at zero.
    """
    if offset < 0:
        return max(0, total + offset)
    return offset


def query(snapshot: Sequence[CallRecord], params: ToolCallQuery | None = None) -> QueryPage:
    """Return one page of matching records in ascending sequence order.

    The snapshot is expected in ascending ``sequence_id`` order, which is
    what ``HistoryStore.snapshot()`` returns.
    """
    params = params or ToolCallQuery()

    matches: list[CallRecord] = list(snapshot)
    if params.tool_name is not None:
        matches = [r for r in matches if r.tool_name == params.tool_name]
    if params.since is not None:
        matches = [r for r in matches if r.timestamp >= params.since]

    total = len(matches)
    start = resolve_start(params.offset, total)
    page = matches[start : start + params.max_results] if start < total else []

    return QueryPage(
        records=page,
        total_matches=total,
        has_more=start + len(page) < total,
        start_index=min(start, total),
        offset=params.offset,
        max_results=params.max_results,
        tool_name=params.tool_name,
        since=params.since,
        total_in_memory=len(snapshot),
    )
