"""Command-line tools for running and configuring the snake engine."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from classic_snake.config import EngineConfig
from classic_snake.engine import GameEngine
from classic_snake.grid import Grid, WallMode
from classic_snake.snake import Direction
from classic_snake.state import GameStatus

logger = logging.getLogger(__name__)

_MOVE_CODES: dict[str, Direction | None] = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
    ".": None,
}

_BOARD_GLYPHS = ".oO*"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classic-snake",
        description="Classic Snake headless simulation and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a scripted game and print the final state.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON engine config.",
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--mode", type=str, default=WallMode.WALLS.value,
        choices=[m.value for m in WallMode],
    )
    sim_p.add_argument(
        "--moves", type=str, default="",
        help="One tick per character: U/D/L/R turn first, '.' keeps going.",
    )
    sim_p.add_argument(
        "--board", action="store_true",
        help="Also print the final board.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Print or write an engine config.")
    cfg_p.add_argument(
        "--load", type=str, default=None,
        help="Validate and print an existing config file.",
    )
    cfg_p.add_argument(
        "--output", type=str, default=None,
        help="Write the config to this path instead of stdout.",
    )

    return parser


def _load_config(path: str | None) -> EngineConfig:
    return EngineConfig.load(path) if path else EngineConfig()


def _run_simulate(args: argparse.Namespace) -> int:
    moves = args.moves.upper()
    unknown = sorted(set(moves) - set(_MOVE_CODES))
    if unknown:
        logger.error("Unknown move codes: %s", "".join(unknown))
        return 2

    engine = GameEngine(
        _load_config(args.config), mode=WallMode(args.mode), seed=args.seed,
    )
    engine.start()
    for code in moves:
        direction = _MOVE_CODES[code]
        if direction is not None:
            engine.set_direction(direction)
        engine.tick()
        if engine.status == GameStatus.GAME_OVER:
            break

    print(json.dumps(engine.get_state()))  # noqa: T201
    if args.board:
        state = engine.state
        board = Grid(engine.config.grid_size).paint(state.snake, state.food)
        for row in board.tolist():
            print("".join(_BOARD_GLYPHS[v] for v in row))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _load_config(args.load)
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``classic-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
