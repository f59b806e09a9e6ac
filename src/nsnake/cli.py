"""Command line entry point for nsnake."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nsnake.config import GameConfig

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nsnake",
        description="Snake in the terminal, drawn with half-block characters.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write log records here; otherwise only warnings reach stderr.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--preview", action="store_true",
        help="Print the opening frame as text and exit.",
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file, level=args.log_level, format=_LOG_FORMAT,
        )
    else:
        # Anything chattier would scribble over the curses screen.
        logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT)


def _load_config(args: argparse.Namespace) -> GameConfig:
    from nsnake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "width": "board_width",
        "height": "board_height",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _run_preview(config: GameConfig) -> int:
    import numpy as np

    from nsnake.engine import GameEngine
    from nsnake.pixels import PixelField, paint_game
    from nsnake.render import HalfBlockRenderer

    rng = np.random.default_rng(config.seed)
    engine = GameEngine(config.board_size, rng, config.initial_length)
    field = paint_game(PixelField(engine.board_size), engine)
    print(f"Score: {engine.score}")  # noqa: T201
    for line in HalfBlockRenderer().to_text(field):
        print(f"|{line}|")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``nsnake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    try:
        config = _load_config(args)
    except (OSError, ValueError, TypeError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    logger.info("Using config %s", config.to_dict())
    if args.preview:
        return _run_preview(config)

    from nsnake.terminal import TerminalError, play

    try:
        score = play(config)
    except TerminalError as exc:
        print(str(exc), file=sys.stderr)  # noqa: T201
        return 1

    print(f"Final score: {score}")  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
