"""Static tool-name classification into coarse categories."""

from __future__ import annotations

from enum import StrEnum


class ToolCategory(StrEnum):
    """Coarse labels grouping related tools."""

    FILESYSTEM = "filesystem"
    TERMINAL = "terminal"
    EDIT = "edit"
    SEARCH = "search"
    GIT = "git"
    NETWORK = "network"
    PROCESS = "process"
    INTROSPECTION = "introspection"
    OTHER = "other"


_EXACT: dict[str, ToolCategory] = {
    "read_file": ToolCategory.FILESYSTEM,
    "read_multiple_files": ToolCategory.FILESYSTEM,
    "write_file": ToolCategory.FILESYSTEM,
    "file_read": ToolCategory.FILESYSTEM,
    "file_write": ToolCategory.FILESYSTEM,
    "file_list": ToolCategory.FILESYSTEM,
    "list_directory": ToolCategory.FILESYSTEM,
    "create_directory": ToolCategory.FILESYSTEM,
    "move_file": ToolCategory.FILESYSTEM,
    "delete_file": ToolCategory.FILESYSTEM,
    "get_file_info": ToolCategory.FILESYSTEM,
    "run_command": ToolCategory.TERMINAL,
    "execute_command": ToolCategory.TERMINAL,
    "code_execute": ToolCategory.TERMINAL,
    "edit_block": ToolCategory.EDIT,
    "apply_patch": ToolCategory.EDIT,
    "str_replace": ToolCategory.EDIT,
    "grep": ToolCategory.SEARCH,
    "web_search": ToolCategory.SEARCH,
    "http_request": ToolCategory.NETWORK,
    "fetch": ToolCategory.NETWORK,
    "list_processes": ToolCategory.PROCESS,
    "kill_process": ToolCategory.PROCESS,
    "inspect_tool_calls": ToolCategory.INTROSPECTION,
    "inspect_usage_stats": ToolCategory.INTROSPECTION,
}

# First matching prefix wins.
_PREFIXES: tuple[tuple[str, ToolCategory], ...] = (
    ("fs_", ToolCategory.FILESYSTEM),
    ("file_", ToolCategory.FILESYSTEM),
    ("terminal_", ToolCategory.TERMINAL),
    ("shell_", ToolCategory.TERMINAL),
    ("edit_", ToolCategory.EDIT),
    ("search_", ToolCategory.SEARCH),
    ("find_", ToolCategory.SEARCH),
    ("git_", ToolCategory.GIT),
    ("http_", ToolCategory.NETWORK),
    ("browser_", ToolCategory.NETWORK),
    ("process_", ToolCategory.PROCESS),
    ("inspect_", ToolCategory.INTROSPECTION),
)


def categorize(tool_name: str) -> ToolCategory:
    """Return the category for a tool name, ``OTHER`` when nothing matches."""
    name = tool_name.strip().lower()
    if name in _EXACT:
        return _EXACT[name]
    for prefix, category in _PREFIXES:
        if name.startswith(prefix):
            return category
    return ToolCategory.OTHER
