#!/usr/bin/env python3
"""
Hearing replay

Replays a scripted sequence of speaking turns on a manual clock and prints
the resulting speaking-time report. Handy for checking report layout
without sitting through a real hearing.

Usage:
    python scripts/replay_hearing.py --turn Court=2 --turn State=15 --turn Defense=12
    python scripts/replay_hearing.py --case-number 123-2024 --turn State=5 --chart
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path

# Ensure project root is on sys.path for ``hearing_tracker`` imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from hearing_tracker.core.logging import configure_logging  # noqa: E402
from hearing_tracker.services.reporting import (  # noqa: E402
    generate_chart_data,
    generate_text_report,
)
from hearing_tracker.services.tracking import (  # noqa: E402
    ManualClock,
    initialize_speaking_time,
    start_speaking,
    stop_tracking,
)

logger = logging.getLogger(__name__)


def _parse_turn(raw: str) -> tuple[str, float]:
    """Parse ``PARTY=MINUTES`` into a (party, minutes) pair."""
    party, sep, minutes = raw.partition("=")
    if not sep or not party.strip():
        raise argparse.ArgumentTypeError(f"Expected PARTY=MINUTES, got {raw!r}")
    try:
        return party.strip(), float(minutes)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid minutes in {raw!r}") from exc


def main() -> int:
    parser = argparse.ArgumentParser(description="Replay a scripted hearing and print its report")
    parser.add_argument("--parties", nargs="*", default=None, help="Participants registered up front")
    parser.add_argument("--turn", action="append", type=_parse_turn, default=[], help="PARTY=MINUTES")
    parser.add_argument("--case-number", default=None)
    parser.add_argument("--client-name", default=None)
    parser.add_argument("--division", default=None)
    parser.add_argument("--chart", action="store_true", help="Also print chart data as JSON")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()

    configure_logging(args.log_level)

    clock = ManualClock(start_ms=time.time() * 1000)
    state = initialize_speaking_time(args.parties)
    for party, minutes in args.turn:
        state = start_speaking(state, party, clock=clock)
        clock.advance_minutes(minutes)
    state = stop_tracking(state, clock=clock)
    logger.info("Replayed %d turns", len(state.timeline))

    metadata = {
        "Case Number": args.case_number,
        "Client Name": args.client_name,
        "Division": args.division,
    }
    print(generate_text_report(state, metadata))
    if args.chart:
        print(json.dumps(generate_chart_data(state).model_dump(by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
