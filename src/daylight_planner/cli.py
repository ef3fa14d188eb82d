"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from daylight_planner import __version__
from daylight_planner.config import get_settings
from daylight_planner.errors import ValidationError
from daylight_planner.facade import build_service
from daylight_planner.flows.warm import warm_cache
from daylight_planner.store import RecordStore
from daylight_planner.validation import build_response, parse_date, validate_request


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="daylight-planner",
        description="Sunrise, sunset, twilight and golden hour for any place and date range",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'fetch' command - one place, one date range
    fetch_parser = subparsers.add_parser("fetch", help="Get solar data for a place")
    fetch_parser.add_argument("location", help="Place name, e.g. 'Lisbon, Portugal'")
    fetch_parser.add_argument("start", help="First date (YYYY-MM-DD)")
    fetch_parser.add_argument("end", help="Last date (YYYY-MM-DD)")
    fetch_parser.add_argument(
        "--compact",
        action="store_true",
        help="Print JSON on a single line",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    # 'init-db' command
    subparsers.add_parser("init-db", help="Create the record store tables")

    # 'warm' command - pre-fetch several places
    warm_parser = subparsers.add_parser("warm", help="Pre-fetch a date range for several places")
    warm_parser.add_argument("start", help="First date (YYYY-MM-DD)")
    warm_parser.add_argument("end", help="Last date (YYYY-MM-DD)")
    warm_parser.add_argument("places", nargs="+", help="Place names")

    return parser


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the 'fetch' command."""
    try:
        location, start, end = validate_request(
            args.location, parse_date(args.start), parse_date(args.end)
        )
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    settings = get_settings()
    store = RecordStore.from_url(settings.database_url)
    store.create_schema()
    service = build_service(settings, store=store)

    result = service.get_solar_data(location, start, end)
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    response = build_response(location, start, end, result)
    indent = None if args.compact else 2
    print(json.dumps(response.to_wire(), indent=indent))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Database: {settings.database_url}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_init_db(_args: argparse.Namespace) -> int:
    """Handle the 'init-db' command."""
    settings = get_settings()
    RecordStore.from_url(settings.database_url).create_schema()
    print(f"Record store ready at {settings.database_url}")
    return 0


def cmd_warm(args: argparse.Namespace) -> int:
    """Handle the 'warm' command: run the warm-cache flow."""
    start = parse_date(args.start)
    end = parse_date(args.end)
    if start is None or end is None:
        print("Error: dates must be YYYY-MM-DD", file=sys.stderr)
        return 2

    settings = get_settings()
    RecordStore.from_url(settings.database_url).create_schema()

    summary = warm_cache(places=args.places, start=start, end=end)
    print(f"Warmed {summary['warmed']} of {summary['places']} places.")
    return 0 if not summary["failed"] and not summary["skipped"] else 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug or get_settings().debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "fetch": cmd_fetch,
        "info": cmd_info,
        "init-db": cmd_init_db,
        "warm": cmd_warm,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
