from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .bootstrap import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Personal work calendar with per-category time breakdown.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override WORK_CALENDAR_LOG_LEVEL.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("gui", help="Launch the desktop calendar (default).")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)
    logging.getLogger(__name__).info("Work calendar CLI starting")

    if args.command in (None, "gui"):
        from .ui.app import run_gui

        run_gui(log_level=args.log_level)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
