"""Tests for static tool categorization."""

import pytest

from introspect.runtime.categories import ToolCategory, categorize


class TestCategorize:
    @pytest.mark.parametrize(
        ("tool_name", "expected"),
        [
            ("read_file", ToolCategory.FILESYSTEM),
            ("fs_list", ToolCategory.FILESYSTEM),
            ("run_command", ToolCategory.TERMINAL),
            ("terminal_start", ToolCategory.TERMINAL),
            ("edit_block", ToolCategory.EDIT),
            ("grep", ToolCategory.SEARCH),
            ("search_files", ToolCategory.SEARCH),
            ("git_commit", ToolCategory.GIT),
            ("http_request", ToolCategory.NETWORK),
            ("kill_process", ToolCategory.PROCESS),
            ("inspect_tool_calls", ToolCategory.INTROSPECTION),
        ],
    )
    def test_known_tools(self, tool_name: str, expected: ToolCategory) -> None:
        assert categorize(tool_name) == expected

    def test_case_insensitive(self) -> None:
        assert categorize("Read_File") == ToolCategory.FILESYSTEM

    def test_unknown_is_other(self) -> None:
        assert categorize("summon_dragon") == ToolCategory.OTHER

    def test_values_are_plain_labels(self) -> None:
        assert categorize("grep").value == "search"
