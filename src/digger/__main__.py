from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .core.settings import Settings
from .engine.game import Game
from .engine.loop import CommandLoop, LoopConfig
from .exceptions import DiggerError
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="digger",
        description="Digger - dig your way through a dungeon of rooms, one command at a time",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--seed", type=int, default=None, help="Seed for room generation (reproducible digs)")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("--max-steps", type=int, default=None, help="Stop after N input lines (for testing)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(level=_log_level(args.verbose))

    try:
        settings = Settings.load(user_path=args.settings_path)
        game = Game.from_settings(settings, seed=args.seed)
        CommandLoop(game, config=LoopConfig(max_steps=args.max_steps)).run()
        return 0
    except DiggerError as exc:
        logger.error("%s", exc)
        return 1
    except Exception as exc:
        logger.exception("Unhandled exception in command loop: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
