"""Integration tests — service lifecycle across restarts and the CLI."""

import json

import pytest

from introspect.__main__ import run
from introspect.service import IntrospectionService
from introspect.settings import IntrospectSettings
from tests.conftest import EchoTool


@pytest.fixture()
def settings(tmp_path) -> IntrospectSettings:
    return IntrospectSettings(config_dir=str(tmp_path), max_entries=5)


class TestServiceLifecycle:
    def test_history_survives_restart(self, settings) -> None:
        with IntrospectionService(settings) as service:
            recorder = service.recorder()
            for text in ("a", "b", "c"):
                recorder.execute(EchoTool(), {"text": text})
            first_session = recorder.session_id

        with IntrospectionService(settings) as service:
            recorder = service.recorder()
            recorder.execute(EchoTool(), {"text": "d"})

            page = service.registry.invoke("inspect_tool_calls", {"offset": -10})
            assert [c["sequence_id"] for c in page["calls"]] == [1, 2, 3, 4]

            stats = service.registry.invoke("inspect_usage_stats")
            assert stats["total_calls"] == 4
            assert sorted(stats["session_ids"]) == sorted([first_session, recorder.session_id])
            # Live counters only cover this process
            assert stats["live"]["total_calls"] == 1

    def test_retention_window_after_restart(self, settings) -> None:
        with IntrospectionService(settings) as service:
            recorder = service.recorder()
            for i in range(8):
                recorder.record("grep", {"i": i}, {}, succeeded=True)

        with IntrospectionService(settings) as service:
            page = service.registry.invoke("inspect_tool_calls")
            assert [c["sequence_id"] for c in page["calls"]] == [4, 5, 6, 7, 8]
        assert len(settings.history_path.read_text().splitlines()) == 8

    def test_inspection_does_not_grow_history(self, settings) -> None:
        with IntrospectionService(settings) as service:
            recorder = service.recorder()
            recorder.execute(EchoTool(), {"text": "x"})
            inspect = service.registry.lookup("inspect_tool_calls")
            for _ in range(3):
                recorder.execute(inspect, {"offset": -1})
            assert len(service.store.snapshot()) == 1


class TestCli:
    def _seed(self, tmp_path) -> None:
        with IntrospectionService(IntrospectSettings(config_dir=str(tmp_path))) as service:
            recorder = service.recorder("cli-session")
            recorder.record("read_file", {"path": "a"}, {"ok": True}, succeeded=True)
            recorder.record("read_file", {"path": "b"}, {"ok": False}, succeeded=False)
            recorder.record("run_command", {"cmd": "ls"}, {"exit": 0}, succeeded=True)

    def test_calls(self, tmp_path, capsys) -> None:
        self._seed(tmp_path)
        code = run(["--config-dir", str(tmp_path), "calls", "--tool-name", "read_file", "--offset", "-1"])
        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert [c["sequence_id"] for c in result["calls"]] == [2]
        assert result["total_matches"] == 2

    def test_stats(self, tmp_path, capsys) -> None:
        self._seed(tmp_path)
        assert run(["--config-dir", str(tmp_path), "stats"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["total_calls"] == 3
        assert result["failures"] == 1
        assert result["session_ids"] == ["cli-session"]

    def test_compact(self, tmp_path, capsys) -> None:
        self._seed(tmp_path)
        assert run(["--config-dir", str(tmp_path), "compact"]) == 0
        assert json.loads(capsys.readouterr().out)["records_written"] == 3

    def test_invalid_since_exits_2(self, tmp_path, capsys) -> None:
        code = run(["--config-dir", str(tmp_path), "calls", "--since", "not-a-date"])
        assert code == 2
        assert "Error:" in capsys.readouterr().err
