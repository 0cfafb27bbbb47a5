"""Tool description builder — format tool schemas for an agent runtime."""

from __future__ import annotations

import json
from typing import Any

from introspect.tools.registry import ToolRegistry


def describe_tools(registry: ToolRegistry) -> list[dict[str, Any]]:
    """Return one machine-readable descriptor per registered tool."""
    return [
        {
            "name": tool.name,
            "version": tool.version,
            "description": tool.description,
            "input_schema": tool.input_schema.model_json_schema(),
            "annotations": {
                "read_only": tool.read_only,
                "idempotent": tool.idempotent,
                "side_effect": tool.side_effect.value,
            },
        }
        for tool in registry.list_tools()
    ]


def build_tool_descriptions(registry: ToolRegistry) -> str:
    """Build a formatted string describing all tools in the registry.

    Each tool includes its name, description, side effect classification,
    and input/output JSON schemas.
    """
    tools = registry.list_tools()
    if not tools:
        return "No tools available."

    sections: list[str] = []
    for tool in tools:
        input_schema = json.dumps(
            tool.input_schema.model_json_schema(), indent=2, sort_keys=True
        )
        output_schema = json.dumps(
            tool.output_schema.model_json_schema(), indent=2, sort_keys=True
        )
        section = (
            f"## {tool.name} (v{tool.version})\n"
            f"{tool.description}\n"
            f"Side effect: {tool.side_effect.value}\n"
            f"Input schema:\n```json\n{input_schema}\n```\n"
            f"Output schema:\n```json\n{output_schema}\n```"
        )
        sections.append(section)

    return "\n\n".join(sections)
