"""Command-line entrypoint for solar_events."""

from __future__ import annotations

import argparse
import json
import logging
import os
from collections.abc import Sequence
from datetime import date
from math import isfinite

from solar_events.astro.solar import solar_day
from solar_events.contracts import (
    InvalidDateError,
    NeverReachesDepression,
    UnknownTimezoneError,
)

logger = logging.getLogger(__name__)


def _parse_iso_date(value: str) -> date:
    """Parse an ISO calendar date string."""
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {value}") from exc


def _parse_finite_float(value: str) -> float:
    """Parse a finite decimal coordinate."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value}") from exc
    if not isfinite(parsed):
        raise argparse.ArgumentTypeError(f"coordinate must be finite: {value}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="solar_events",
        description="Sunrise, sunset, solar noon and twilight times.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command")
    events = subparsers.add_parser(
        "events",
        help="Print all solar events in UTC for a date and location.",
    )
    events.add_argument("--date", type=_parse_iso_date, required=True)
    events.add_argument("--lat", type=_parse_finite_float, required=True)
    events.add_argument("--lon", type=_parse_finite_float, required=True)
    events.add_argument(
        "--timezone",
        default=os.getenv("SOLAR_EVENTS_DEFAULT_TIMEZONE", ""),
        help="IANA timezone identifier (default: UTC).",
    )
    events.add_argument("--json", action="store_true", help="Emit a JSON payload.")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    level = os.getenv("SOLAR_EVENTS_LOG_LEVEL", "WARNING").strip().upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "events":
        timezone_id = args.timezone.strip() or None
        try:
            result = solar_day(args.date, args.lat, args.lon, timezone_id)
        except (InvalidDateError, UnknownTimezoneError) as exc:
            parser.error(str(exc))

        logger.info("computed %d events for %s", len(result.events), result.date.isoformat())
        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
            return 0

        for event, outcome in result.events.items():
            if isinstance(outcome, NeverReachesDepression):
                print(f"{event.value:<28} never ({outcome.extreme.value})")
            else:
                print(f"{event.value:<28} {outcome.strftime('%Y-%m-%d %H:%M:%S')}Z")
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
