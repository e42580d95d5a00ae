"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from termchess.ui.config import LOG_LEVELS, TerminalConfig
from termchess.ui.session import TerminalSession
from termchess.ui.text import t


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termchess", description="Two-player chess in the terminal"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    parser.add_argument(
        "--unicode", action="store_true", help="Draw pieces as Unicode glyphs"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        help="Log level for messages written to stderr",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> TerminalConfig:
    config = TerminalConfig.from_env(
        unicode_pieces=args.unicode, log_level=args.log_level
    )
    if args.no_color:
        config = replace(config, color=False)
    return config


def main(argv: list[str] | None = None) -> int:
    """Launch a two-player game on stdin/stdout."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = TerminalSession(config=config)
    winner = session.run()
    if winner is None:
        print(t().game_left)
    return 0


if __name__ == "__main__":
    sys.exit(main())
