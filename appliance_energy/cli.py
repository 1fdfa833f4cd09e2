#!/usr/bin/env python3
"""
Command-line energy metrics for an appliance state profile.

Usage:
    appliance-energy usage profile.json             # minutes ON in one day
    appliance-energy savings profile.json           # minutes saved by auto-off
    appliance-energy day month.json --day 3         # minutes ON on day 3
    cat profile.json | appliance-energy usage -     # read from stdin

A profile file holds ``{"initial": "on", "events": [{"timestamp": 50, "state": "off"}]}``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

from .core.log import configure_logging
from .domain.errors import ProfileValidationError
from .domain.metrics import (
    calculate_energy_savings,
    calculate_energy_usage_for_day,
    calculate_energy_usage_simple,
)
from .domain.models import Profile

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT = 1
EXIT_INVALID = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_profile(path: str) -> Profile:
    """Read a profile record from ``path`` (``-`` = stdin). Raises ValueError on bad shape."""
    if path == "-":
        data: Any = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)

    if not isinstance(data, dict) or "initial" not in data:
        raise ValueError("profile must be an object with an 'initial' key")
    events = data.get("events", [])
    if not isinstance(events, list) or not all(
        isinstance(e, dict) and "timestamp" in e and "state" in e for e in events
    ):
        raise ValueError("'events' must be a list of {timestamp, state} objects")
    return Profile.from_dict(data)


def _add_sort(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--sort", action="store_true", default=None,
                        help="Sort out-of-order events instead of rejecting them")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="appliance-energy", description="Appliance energy usage and savings")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                   help="Override configured log level")

    sub = p.add_subparsers(dest="command", required=True)

    u = sub.add_parser("usage", help="Minutes ON during a single day")
    u.add_argument("file", help="Profile JSON file, or - for stdin")
    _add_sort(u)

    s = sub.add_parser("savings", help="Minutes saved by automatic shutoff during a single day")
    s.add_argument("file", help="Profile JSON file, or - for stdin")
    _add_sort(s)

    d = sub.add_parser("day", help="Minutes ON during one day of a month profile")
    d.add_argument("file", help="Month profile JSON file, or - for stdin")
    # float so that a non-integer day reaches the validator
    d.add_argument("--day", type=float, required=True, help="Day number, 1-365")
    _add_sort(d)

    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        profile = load_profile(args.file)
    except (OSError, ValueError) as e:
        print(f"error: cannot read profile: {e}", file=sys.stderr)
        return EXIT_INPUT

    try:
        if args.command == "usage":
            minutes = calculate_energy_usage_simple(profile, sort_events=args.sort)
        elif args.command == "savings":
            minutes = calculate_energy_savings(profile, sort_events=args.sort)
        else:
            day = int(args.day) if args.day.is_integer() else args.day
            minutes = calculate_energy_usage_for_day(profile, day, sort_events=args.sort)
    except ProfileValidationError as e:
        log.info("Rejected profile: %s (%s)", e.message, e.code)
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_INVALID

    print(minutes)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
