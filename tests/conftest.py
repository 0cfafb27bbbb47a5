"""Shared test fixtures for introspect."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from pydantic import BaseModel

from introspect.runtime.history_store import JsonlHistoryStore
from introspect.schemas.call_record import CallRecord, ToolCall
from introspect.tools.base import BaseTool, SideEffect

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


# ── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture()
def store():
    """Memory-only JsonlHistoryStore."""
    s = JsonlHistoryStore()
    yield s
    s.close()


@pytest.fixture()
def history_path(tmp_path):
    return tmp_path / "tool-history.jsonl"


@pytest.fixture()
def store_file(history_path):
    """File-backed JsonlHistoryStore."""
    s = JsonlHistoryStore(history_path)
    yield s
    s.close()


# ── Builders ───────────────────────────────────────────────────────


def make_call(
    tool_name: str = "read_file",
    *,
    succeeded: bool = True,
    seconds: int = 0,
    **overrides: Any,
) -> ToolCall:
    """Build a ToolCall timestamped ``seconds`` after BASE_TIME."""
    data: dict[str, Any] = {
        "tool_name": tool_name,
        "arguments": {"path": f"/tmp/{tool_name}.txt"},
        "output": {"ok": succeeded},
        "succeeded": succeeded,
        "timestamp": BASE_TIME + timedelta(seconds=seconds),
        "session_id": "session-a",
    }
    data.update(overrides)
    return ToolCall(**data)


def make_record(
    sequence_id: int,
    tool_name: str = "read_file",
    *,
    succeeded: bool = True,
    category: str = "filesystem",
    **overrides: Any,
) -> CallRecord:
    """Build a CallRecord whose timestamp advances one second per sequence id."""
    data: dict[str, Any] = {
        "sequence_id": sequence_id,
        "tool_name": tool_name,
        "category": category,
        "arguments": {"n": sequence_id},
        "output": {"ok": succeeded},
        "succeeded": succeeded,
        "timestamp": BASE_TIME + timedelta(seconds=sequence_id),
        "session_id": "session-a",
    }
    data.update(overrides)
    return CallRecord(**data)


def make_snapshot(count: int, tool_name: str = "read_file") -> tuple[CallRecord, ...]:
    return tuple(make_record(i, tool_name) for i in range(1, count + 1))


def fill(store: JsonlHistoryStore, count: int, tool_name: str = "read_file") -> None:
    for i in range(count):
        store.append(make_call(tool_name, seconds=i))


# ── Dummy tools ────────────────────────────────────────────────────


class EchoInput(BaseModel):
    text: str


class EchoOutput(BaseModel):
    text: str


class EchoTool(BaseTool):
    """Uppercases its input; fails on the text ``"boom"``."""

    def __init__(self, tool_name: str = "echo") -> None:
        self._name = tool_name

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> str:
        return "0.1.0"

    @property
    def input_schema(self) -> type[BaseModel]:
        return EchoInput

    @property
    def output_schema(self) -> type[BaseModel]:
        return EchoOutput

    @property
    def side_effect(self) -> SideEffect:
        return SideEffect.PURE

    def execute(self, input_data: BaseModel) -> BaseModel:
        assert isinstance(input_data, EchoInput)
        if input_data.text == "boom":
            raise ValueError("echo exploded")
        return EchoOutput(text=input_data.text.upper())
