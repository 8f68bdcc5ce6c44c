"""Immutable game state snapshots."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from classic_snake.grid import Cell, WallMode
from classic_snake.snake import Direction, body_to_list


class GameStatus(str, enum.Enum):
    """Lifecycle states of a single game."""

    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """A complete, read-only view of the game at one instant.

    The engine replaces its state object wholesale on every change, so a
    reference held by a renderer or score display never changes under it.
    ``food`` is ``None`` only after the snake has filled the whole board.
    """

    snake: tuple[Cell, ...]
    food: Cell | None
    direction: Direction
    speed: int
    score: int
    status: GameStatus
    mode: WallMode

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def evolve(self, **changes) -> GameState:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict of the snapshot."""
        return {
            "snake": body_to_list(self.snake),
            "food": list(self.food) if self.food is not None else None,
            "direction": self.direction.value,
            "speed": self.speed,
            "score": self.score,
            "status": self.status.value,
            "mode": self.mode.value,
        }
