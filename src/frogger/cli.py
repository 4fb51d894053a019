from __future__ import annotations

import argparse
import curses
import logging
import random
from collections.abc import Sequence

from frogger.app.exceptions import TerminalError
from frogger.app.game_app import FroggerApp
from frogger.domain.settings import DIFFICULTIES, GameSettings
from frogger.ui.curses_surface import CursesSurface
from frogger.ui.input_mapper import CursesInputMapper

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frogger",
        description="Guide the frog across the grid without touching the obstacles.",
    )
    parser.add_argument(
        "-d",
        "--difficulty",
        choices=DIFFICULTIES,
        default="medium",
        help="Sets the difficulty level: easy, medium, hard",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the obstacle layout (random when omitted)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write diagnostics to this file instead of stderr",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Diagnostic log level (default: WARNING)",
    )
    return parser


def configure_logging(level: str, log_file: str | None) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        filename=log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    return GameSettings(difficulty=args.difficulty)


def _play(stdscr: curses.window, settings: GameSettings, seed: int | None) -> None:
    app = FroggerApp(
        surface=CursesSurface(stdscr),
        input_source=CursesInputMapper(stdscr),
        settings=settings,
        rng=random.Random(seed),
    )
    app.run()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    settings = settings_from_args(args)
    logger.info("seed=%s difficulty=%s", args.seed, settings.difficulty)

    try:
        # wrapper restores cbreak/echo/keypad even if the game raises.
        curses.wrapper(_play, settings, args.seed)
    except TerminalError as e:
        logger.error("terminal could not be set up: %s", e)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0
