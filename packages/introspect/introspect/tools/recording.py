"""Bridge between tool execution and the tool-call history."""

from __future__ import annotations

import logging
import time
from typing import Any

from pydantic import JsonValue

from introspect.core.identifiers import SessionId, generate_session_id
from introspect.observability.tracker import UsageTracker
from introspect.runtime.categories import ToolCategory, categorize
from introspect.runtime.history_store import HistoryStore
from introspect.schemas.call_record import CallRecord, ToolCall
from introspect.tools.base import BaseTool

logger = logging.getLogger(__name__)


class HistoryRecorder:
    """Records finished tool invocations for one agent session.

    Calls to introspection tools are not recorded, so inspecting the history
    never changes it.
    """

    def __init__(
        self,
        store: HistoryStore,
        session_id: SessionId | None = None,
        tracker: UsageTracker | None = None,
    ) -> None:
        self._store = store
        self._session_id = session_id or generate_session_id()
        self._tracker = tracker

    @property
    def session_id(self) -> SessionId:
        return self._session_id

    def should_record(self, tool_name: str, category: str | None = None) -> bool:
        label = category or categorize(tool_name)
        return label != ToolCategory.INTROSPECTION

    def record(
        self,
        tool_name: str,
        arguments: JsonValue,
        output: JsonValue,
        succeeded: bool,
        duration_ms: int | None = None,
        category: str | None = None,
    ) -> CallRecord | None:
        """Append one call. Returns None when the tool is excluded.

        Raises PersistenceError if the store cannot commit the call.
        """
        if not self.should_record(tool_name, category):
            logger.debug("Not recording introspection call to %s", tool_name)
            return None
        record = self._store.append(
            ToolCall(
                tool_name=tool_name,
                category=category,
                arguments=arguments,
                output=output,
                succeeded=succeeded,
                session_id=self._session_id,
                duration_ms=duration_ms,
            )
        )
        if self._tracker is not None:
            self._tracker.record(record)
        return record

    def execute(self, tool: BaseTool, raw: dict[str, Any] | None = None) -> dict[str, Any]:
        """Invoke a tool and record its outcome.

        Tool errors are recorded as an error payload and re-raised.
        """
        arguments = raw or {}
        started = time.monotonic()
        try:
            result = tool.invoke(arguments)
        except Exception as exc:
            self.record(
                tool.name,
                arguments,
                {"error": str(exc), "error_type": type(exc).__name__},
                succeeded=False,
                duration_ms=_elapsed_ms(started),
            )
            raise
        self.record(
            tool.name,
            arguments,
            result,
            succeeded=True,
            duration_ms=_elapsed_ms(started),
        )
        return result


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)
