# Command-line launcher for the Snake window.
from __future__ import annotations

import argparse
import logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake on a 30x20 wrapping grid")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for food placement; omit to seed from system entropy.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=LOG_LEVELS,
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)
    if args.seed is not None and args.seed < 0:
        parser.error("--seed must be a non-negative integer.")
    return args


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Imported late so argument parsing works without a display.
    try:
        from .snake_gui import run_player_gui
    except ImportError:
        from snake_gui import run_player_gui

    run_player_gui(seed=args.seed)


if __name__ == "__main__":
    main()
