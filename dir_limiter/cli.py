from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from .errors import FatalIOError
from .eviction import enforce_size_limit
from .models import LimitConfig
from .scheduler import LimitScheduler
from .units import parse_size


ENV_LOG_LEVEL = "DIR_LIMITER_LOG_LEVEL"
ENV_INTERVAL_SECONDS = "DIR_LIMITER_INTERVAL_SECONDS"
APSCHEDULER_EXECUTOR_LOGGER = "apscheduler.executors.default"


def _size_arg(value: str) -> int:
    try:
        return parse_size(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _interval_arg(value: str) -> int:
    try:
        seconds = int(str(value).strip() or "0")
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid interval '{value}'") from exc
    if seconds < 0:
        raise argparse.ArgumentTypeError("interval must be >= 0")
    return seconds


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dir-limiter",
        description="Delete least-recently modified files to limit a directory to a specified size.",
    )
    parser.add_argument("-d", "--dry-run", action="store_true", help="Don't actually delete anything")
    parser.add_argument(
        "-k",
        "--keep-parents",
        action="store_true",
        help="Don't delete parent directories if they become empty",
    )
    parser.add_argument(
        "-s",
        "--size",
        required=True,
        type=_size_arg,
        help="The size to limit the directory to, e.g. 500MB or 2GiB",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=_interval_arg,
        default=os.getenv(ENV_INTERVAL_SECONDS, "0"),
        help=f"Re-run every N seconds instead of once (default from {ENV_INTERVAL_SECONDS}, 0 = once)",
    )
    parser.add_argument("directory", type=Path, help="The directory to process")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_level = str(os.getenv(ENV_LOG_LEVEL, "INFO")).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    config = LimitConfig(
        dry_run=bool(args.dry_run),
        keep_parents=bool(args.keep_parents),
        goal_size=int(args.size),
        root_directory=args.directory,
    )

    try:
        if args.interval > 0:
            # Job failures are reported once, by the scheduler listener and the exit message.
            logging.getLogger(APSCHEDULER_EXECUTOR_LOGGER).setLevel(logging.CRITICAL)
            LimitScheduler(config=config, interval_seconds=args.interval).run_forever()
        else:
            enforce_size_limit(config)
    except FatalIOError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
