"""Entry point: python -m introspect."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from introspect.core.errors import IntrospectError, QueryValidationError
from introspect.service import IntrospectionService
from introspect.settings import SettingsManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="introspect", description="Inspect the recorded tool-call history"
    )
    parser.add_argument("--config-dir", default=None, help="Configuration directory")
    sub = parser.add_subparsers(dest="command", required=True)

    calls = sub.add_parser("calls", help="List recorded tool calls")
    calls.add_argument("--tool-name", default=None, help="Exact tool name filter")
    calls.add_argument("--since", default=None, help="ISO-8601 lower bound, inclusive")
    calls.add_argument("--offset", type=int, default=None, help="Start index; negative for the last N")
    calls.add_argument("--max-results", type=int, default=None, help="Page size")

    sub.add_parser("stats", help="Show usage statistics")
    sub.add_parser("compact", help="Rewrite the log to the retained window")
    return parser


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = SettingsManager(args.config_dir).load()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    with IntrospectionService(settings) as service:
        try:
            if args.command == "calls":
                raw: dict[str, Any] = {
                    k: v
                    for k, v in {
                        "tool_name": args.tool_name,
                        "since": args.since,
                        "offset": args.offset,
                        "max_results": args.max_results,
                    }.items()
                    if v is not None
                }
                result: dict[str, Any] = service.registry.invoke("inspect_tool_calls", raw)
            elif args.command == "stats":
                result = service.registry.invoke("inspect_usage_stats")
            else:
                written = service.store.compact()
                result = {"success": True, "records_written": written}
        except QueryValidationError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2
        except IntrospectError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    print(json.dumps(result, indent=2))
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
