"""Classic Snake — deterministic single-player game engine."""

from classic_snake.commands import Command, dispatch, parse_command
from classic_snake.config import EngineConfig
from classic_snake.engine import GameEngine
from classic_snake.food import RandomFoodSampler
from classic_snake.grid import Grid, WallMode
from classic_snake.motion import CollisionResult, next_head, resolve_collision
from classic_snake.scheduler import TickScheduler
from classic_snake.snake import Direction
from classic_snake.state import GameState, GameStatus

__all__ = [
    "CollisionResult",
    "Command",
    "Direction",
    "EngineConfig",
    "GameEngine",
    "GameState",
    "GameStatus",
    "Grid",
    "RandomFoodSampler",
    "TickScheduler",
    "WallMode",
    "dispatch",
    "next_head",
    "parse_command",
    "resolve_collision",
]
