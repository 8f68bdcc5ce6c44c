"""Engine configuration constants."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from classic_snake.grid import DEFAULT_GRID_SIZE, Cell
from classic_snake.motion import next_head
from classic_snake.snake import Direction, is_contiguous

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_SNAKE: tuple[Cell, ...] = ((10, 10), (10, 9), (10, 8))
MIN_SNAKE_LENGTH = 3


@dataclass(frozen=True)
class EngineConfig:
    """Construction-time settings for :class:`~classic_snake.engine.GameEngine`.

    Speeds are tick intervals in milliseconds; a smaller value is faster.
    Invalid combinations raise ``ValueError`` at construction so that a
    misconfigured engine never reaches play.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    initial_speed: int = 180
    speed_step: int = 10
    min_speed: int = 50
    initial_snake: tuple[Cell, ...] = DEFAULT_INITIAL_SNAKE

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError("grid_size must be positive.")
        if self.min_speed <= 0:
            raise ValueError("min_speed must be positive.")
        if self.initial_speed < self.min_speed:
            raise ValueError("initial_speed must be at least min_speed.")
        if self.speed_step < 0:
            raise ValueError("speed_step must be >= 0.")

        # Normalise list-of-lists input (e.g. from JSON) to tuples.
        snake = tuple((int(r), int(c)) for r, c in self.initial_snake)
        object.__setattr__(self, "initial_snake", snake)

        if len(snake) < MIN_SNAKE_LENGTH:
            raise ValueError(
                f"initial_snake must have at least {MIN_SNAKE_LENGTH} segments."
            )
        if len(set(snake)) != len(snake):
            raise ValueError("initial_snake contains duplicate cells.")
        for r, c in snake:
            if not (0 <= r < self.grid_size and 0 <= c < self.grid_size):
                raise ValueError(
                    f"initial_snake cell ({r}, {c}) does not fit a "
                    f"{self.grid_size}x{self.grid_size} grid."
                )
        if not is_contiguous(snake):
            raise ValueError("initial_snake segments must be adjacent.")
        # Every game starts heading RIGHT, so the neck may not sit there.
        if next_head(snake[0], Direction.RIGHT) == snake[1]:
            raise ValueError(
                "initial_snake must not extend to the right of its head; "
                "the first move would run into the body."
            )
        if len(snake) >= self.grid_size * self.grid_size:
            raise ValueError("initial_snake leaves no free cell for food.")

    @classmethod
    def for_grid(cls, grid_size: int, **kwargs) -> EngineConfig:
        """Build a config with a rightward snake centred on the grid."""
        row = col = grid_size // 2
        snake = tuple((row, col - i) for i in range(MIN_SNAKE_LENGTH))
        return cls(grid_size=grid_size, initial_snake=snake, **kwargs)

    def to_dict(self) -> dict:
        """Serialize to a plain dict (cells become lists)."""
        d = asdict(self)
        d["initial_snake"] = [list(seg) for seg in self.initial_snake]
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> EngineConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
