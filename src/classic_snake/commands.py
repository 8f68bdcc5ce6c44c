"""Mapping of raw input events onto engine operations."""

from __future__ import annotations

import enum
import logging

from classic_snake.engine import GameEngine
from classic_snake.grid import WallMode
from classic_snake.snake import Direction
from classic_snake.state import GameStatus

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """Abstract player commands, independent of the input device."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    START = "start"
    MODE_WALLS = "mode_walls"
    MODE_PASS_THROUGH = "mode_pass_through"


_DIRECTION_COMMANDS: dict[Command, Direction] = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}

_MODE_COMMANDS: dict[Command, WallMode] = {
    Command.MODE_WALLS: WallMode.WALLS,
    Command.MODE_PASS_THROUGH: WallMode.PASS_THROUGH,
}

# Keyboard names as reported by browsers and most terminal toolkits.
KEY_BINDINGS: dict[str, Command] = {
    "arrowup": Command.UP,
    "arrowdown": Command.DOWN,
    "arrowleft": Command.LEFT,
    "arrowright": Command.RIGHT,
    "w": Command.UP,
    "s": Command.DOWN,
    "a": Command.LEFT,
    "d": Command.RIGHT,
    " ": Command.START,
    "space": Command.START,
    "enter": Command.START,
}


def parse_command(raw: str) -> Command | None:
    """Resolve a command name or key name; ``None`` if unknown."""
    # A bare space is the start key, so only strip around real names.
    key = raw.lower().strip() or raw.lower()
    try:
        return Command(key)
    except ValueError:
        return KEY_BINDINGS.get(key)


def dispatch(engine: GameEngine, command: Command) -> bool:
    """Apply *command* to *engine*. Returns True if the command took effect.

    The start key starts an idle game and resets a finished one back to
    IDLE; it never starts a fresh run straight from GAME_OVER.
    """
    if command in _DIRECTION_COMMANDS:
        return engine.set_direction(_DIRECTION_COMMANDS[command])

    if command in _MODE_COMMANDS:
        return engine.set_mode(_MODE_COMMANDS[command])

    if command == Command.START:
        status = engine.status
        if status == GameStatus.IDLE:
            return engine.start()
        if status == GameStatus.GAME_OVER:
            engine.reset()
            return True
        return False

    logger.debug("Unhandled command %s.", command)
    return False
