"""Application entry point."""

from __future__ import annotations

import argparse
import sys

from ucchess.engine.protocol import DEFAULT_SEARCH_DEPTH
from ucchess.ui.playback import PlaybackScheduler


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ucchess",
        description="Step through a chess game with a UCI engine suggesting moves.",
    )
    parser.add_argument(
        "--engine",
        default="stockfish",
        help="command line used to launch the UCI engine (default: %(default)s)",
    )
    parser.add_argument(
        "--depth",
        type=_positive_int,
        default=DEFAULT_SEARCH_DEPTH,
        help="search depth for every query (default: %(default)s)",
    )
    parser.add_argument(
        "--delay-ms",
        type=_positive_int,
        default=PlaybackScheduler.DEFAULT_DELAY_MS,
        help="autoplay step interval in milliseconds (default: %(default)s)",
    )
    parser.add_argument("--fen", default=None, help="start from this position")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
    )
    parser.add_argument(
        "--analyze-on-navigation",
        action="store_true",
        help="also query the engine when browsing history",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Launch the UCChess application."""
    args = build_parser().parse_args(argv)

    from ucchess.ui.bootstrap import configure_logging, run_application
    from ucchess.ui.dialogs.settings_dialog import AppSettings

    configure_logging(args.log_level)
    settings = AppSettings(
        engine_path=args.engine,
        engine_depth=args.depth,
        playback_delay_ms=args.delay_ms,
        analyze_on_navigation=args.analyze_on_navigation,
    )
    qt_argv = [sys.argv[0]]
    sys.exit(run_application(qt_argv, settings=settings, start_fen=args.fen))


if __name__ == "__main__":
    main()
