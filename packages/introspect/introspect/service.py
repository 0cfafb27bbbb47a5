"""Introspection service — owns the history store and the tools that read it."""

from __future__ import annotations

import logging
from types import TracebackType

from introspect.core.identifiers import SessionId
from introspect.observability.tracker import UsageTracker
from introspect.runtime.history_store import HistoryStore, JsonlHistoryStore
from introspect.settings import IntrospectSettings, SettingsManager
from introspect.tools.inspect_tool_calls import InspectToolCallsTool
from introspect.tools.inspect_usage_stats import InspectUsageStatsTool
from introspect.tools.recording import HistoryRecorder
from introspect.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class IntrospectionService:
    """Single owner of the history store for a process.

    The store is loaded on construction and closed by ``close()``; both
    inspection tools and every recorder share it.

    Args:
        settings: Loaded settings (defaults from ``SettingsManager`` if None).
        store: Pre-built store, mainly for tests. Overrides the settings path.
    """

    def __init__(
        self,
        settings: IntrospectSettings | None = None,
        *,
        store: HistoryStore | None = None,
    ) -> None:
        self._settings = settings or SettingsManager().load()
        self._store = store or JsonlHistoryStore.from_settings(self._settings)
        self._tracker = UsageTracker()
        self._registry = ToolRegistry()
        self._registry.register(
            InspectToolCallsTool(self._store, self._settings.default_page_size)
        )
        self._registry.register(InspectUsageStatsTool(self._store, self._tracker))
        logger.debug("Introspection service ready with %d retained call(s)", len(self._store))

    @property
    def settings(self) -> IntrospectSettings:
        return self._settings

    @property
    def store(self) -> HistoryStore:
        return self._store

    @property
    def tracker(self) -> UsageTracker:
        return self._tracker

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def recorder(self, session_id: SessionId | None = None) -> HistoryRecorder:
        """Create a recorder that appends to this service's store."""
        return HistoryRecorder(self._store, session_id, self._tracker)

    def close(self) -> None:
        self._store.close()

    def __enter__(self) -> IntrospectionService:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
