#!/usr/bin/env python3

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from ticketgate.adapters.actions import ActionsOutcomeSink
from ticketgate.app import run_check
from ticketgate.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check that a pull request references an existing JIRA ticket"
    )
    parser.add_argument(
        "--event-path",
        type=Path,
        help="Path to the pull_request event payload (defaults to $GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the body update and comments instead of sending them to GitHub",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    sink = ActionsOutcomeSink()
    asyncio.run(
        run_check(
            sink=sink,
            event_path=parsed_args.event_path,
            dry_run=parsed_args.dry_run,
        )
    )
    if sink.failed:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
