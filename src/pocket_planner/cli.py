from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

import orjson

from .bootstrap import configure_logging
from .core import month_key, today_utc

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pocket Planner command line interface.")
    parser.add_argument("--log-level", default=None, help="Override POCKET_PLANNER_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server exposing calendar functions.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)
    api_parser.add_argument("--no-poll", action="store_true", help="Do not refresh from Supabase in the background.")

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server for tool-using clients.")
    mcp_parser.add_argument("--host", default="127.0.0.1")
    mcp_parser.add_argument("--port", type=int, default=8765)

    this_year, this_month = month_key(today_utc())
    for name, help_text in (
        ("grid", "Print the month grid as JSON."),
        ("list", "Print every occurrence of a month as JSON."),
    ):
        month_parser = subparsers.add_parser(name, help=help_text)
        month_parser.add_argument("--year", type=int, default=this_year)
        month_parser.add_argument(
            "--month",
            type=int,
            default=this_month + 1,
            help="Calendar month 1-12 (converted to the 0-indexed form internally).",
        )

    day_parser = subparsers.add_parser("day", help="Print one day's events and tasks as JSON.")
    day_parser.add_argument("date", nargs="?", default=None, help="ISO date, defaults to today (UTC).")

    return parser


def _emit(payload: Any) -> None:
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")


def _zero_indexed(month: int) -> int:
    if not 1 <= month <= 12:
        raise SystemExit(f"--month must be between 1 and 12, got {month}")
    return month - 1


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logger.info("Pocket Planner CLI starting: %s", args.command)

    from .api import api_state, call_api

    if args.command == "api":
        from .services.http import run_local_server

        api_state.sync.refresh_all()
        if not args.no_poll:
            api_state.sync.start_polling()
        try:
            run_local_server(host=args.host, port=args.port)
        finally:
            api_state.sync.stop_polling()
        return

    if args.command == "mcp":
        from .services.mcp import run_mcp_server

        api_state.sync.refresh_all()
        run_mcp_server(host=args.host, port=args.port)
        return

    api_state.sync.refresh_all()
    if args.command == "grid":
        _emit(call_api("calendar_month_grid", year=args.year, month=_zero_indexed(args.month)))
    elif args.command == "list":
        _emit(call_api("calendar_month_list", year=args.year, month=_zero_indexed(args.month)))
    elif args.command == "day":
        _emit(call_api("calendar_day_detail", day=args.date or today_utc().isoformat()))
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
