"""Introspection demo — record a few tool calls, then inspect them.

Usage:
    python examples/introspection_demo.py
"""

from __future__ import annotations

import json
import tempfile

from pydantic import BaseModel

from introspect.service import IntrospectionService
from introspect.settings import IntrospectSettings
from introspect.tools.base import BaseTool, SideEffect


# --- Define a simple tool ---

class ReadFileInput(BaseModel):
    path: str

class ReadFileOutput(BaseModel):
    content: str

class FakeReadFileTool(BaseTool):
    @property
    def name(self) -> str:
        return "read_file"

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def input_schema(self) -> type[BaseModel]:
        return ReadFileInput

    @property
    def output_schema(self) -> type[BaseModel]:
        return ReadFileOutput

    @property
    def side_effect(self) -> SideEffect:
        return SideEffect.READ

    def execute(self, input_data: BaseModel) -> BaseModel:
        assert isinstance(input_data, ReadFileInput)
        if input_data.path.endswith(".missing"):
            raise FileNotFoundError(f"File not found: {input_data.path}")
        return ReadFileOutput(content=f"contents of {input_data.path}")


def main() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        settings = IntrospectSettings(config_dir=tmpdir)
        with IntrospectionService(settings) as service:
            recorder = service.recorder()
            tool = FakeReadFileTool()

            # 1. Run some tools through the recorder
            for path in ("README.md", "setup.cfg", "notes.missing"):
                try:
                    recorder.execute(tool, {"path": path})
                except FileNotFoundError as exc:
                    print(f"Tool failed (recorded): {exc}")
            recorder.record("run_command", {"cmd": "ls"}, {"exit_code": 0}, succeeded=True)

            # 2. Inspect usage statistics
            stats = service.registry.invoke("inspect_usage_stats")
            print(stats["summary"])

            # 3. Inspect the last two calls
            page = service.registry.invoke("inspect_tool_calls", {"offset": -2})
            print(page["summary"])
            print(json.dumps(page["calls"], indent=2))

        print(f"History persisted to {settings.history_path}")


if __name__ == "__main__":
    main()
