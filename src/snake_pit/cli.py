"""CLI launcher for Snake Pit."""

from __future__ import annotations

import argparse
import logging
import sys

from snake_pit.config import GameConfig

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-pit",
        description="Terminal snake game played in a walled pit.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Play a game in this terminal.")
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument("--tick-rate", type=int, default=None)
    play_p.add_argument("--initial-length", type=int, default=None)
    play_p.add_argument(
        "--log-file", type=str, default=None,
        help="Write debug logs here (the screen is owned by the game).",
    )

    # --- dump-config ---
    dump_p = sub.add_parser(
        "dump-config", help="Write the effective config as JSON.",
    )
    dump_p.add_argument("output", help="Path for the JSON file.")

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "seed": "seed",
        "tick_rate": "tick_rate",
        "initial_length": "initial_length",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        if "tick_rate" in overrides:
            # Re-derive the slowest speed from the new clock.
            d["ticks_per_move_max"] = None
        config = GameConfig(**d)
    return config


def _run_play(args: argparse.Namespace) -> int:
    from snake_pit.terminal import play

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file, level=logging.DEBUG, format=_LOG_FORMAT,
        )
    else:
        logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT)

    config = _load_config(args)
    try:
        result = play(config)
    except ValueError as exc:
        print(f"Cannot start game: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    print(f"Game over: {result.value}")  # noqa: T201
    return 0


def _run_dump_config(args: argparse.Namespace) -> int:
    logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT)
    _load_config(args).save(args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-pit`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "dump-config": _run_dump_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
