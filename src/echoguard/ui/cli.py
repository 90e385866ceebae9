# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from echoguard.adapters.snapshot import SnapshotError
from echoguard.app import analyze_snapshot
from echoguard.config import ConfigurationError, configure_logging, get_detection_policy
from echoguard.domain.platforms import registered_platforms

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Detect echoed calendar imports")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-event scoring details",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser(
        "analyze",
        help="Classify the incoming events of a unit snapshot (JSON)",
    )
    analyze.add_argument("snapshot", type=Path, help="Path to the snapshot JSON file")

    subparsers.add_parser("platforms", help="List the registered platform profiles")

    return parser.parse_args(list(argv))


def _print_platforms() -> None:
    for source, config in registered_platforms().items():
        re_exports = "unknown" if config.re_exports is None else str(config.re_exports).lower()
        line = (
            f"{source:<14} {config.type.value:<14} priority={config.priority:<3} "
            f"re_exports={re_exports:<8} shift={config.date_shift_days}"
        )
        if config.opt_out_param:
            line += f" opt_out={config.opt_out_param}"
        print(line)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "platforms":
            _print_platforms()
            return
        policy = get_detection_policy()
        results = analyze_snapshot(parsed_args.snapshot, policy=policy)
    except (SnapshotError, ConfigurationError):
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during echo analysis")
        sys.exit(1)

    for result in results:
        print(json.dumps(result.to_dict(), ensure_ascii=False))


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
