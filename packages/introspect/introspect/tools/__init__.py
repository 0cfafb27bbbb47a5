"""Introspect tools — the inspection tools, registry, and history recorder."""

from introspect.tools.base import BaseTool, SideEffect
from introspect.tools.descriptions import build_tool_descriptions, describe_tools
from introspect.tools.inspect_tool_calls import InspectToolCallsOutput, InspectToolCallsTool
from introspect.tools.inspect_usage_stats import (
    InspectUsageStatsInput,
    InspectUsageStatsOutput,
    InspectUsageStatsTool,
)
from introspect.tools.recording import HistoryRecorder
from introspect.tools.registry import ToolRegistry

__all__ = [
    "BaseTool",
    "HistoryRecorder",
    "InspectToolCallsOutput",
    "InspectToolCallsTool",
    "InspectUsageStatsInput",
    "InspectUsageStatsOutput",
    "InspectUsageStatsTool",
    "SideEffect",
    "ToolRegistry",
    "build_tool_descriptions",
    "describe_tools",
]
