"""Directions and snake body helpers."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from classic_snake.grid import Cell


class Direction(enum.Enum):
    """Cardinal movement directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Cell:
        """Return the (row_delta, col_delta) of one step."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, Cell] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_reversal(current: Direction, requested: Direction) -> bool:
    """Return True if *requested* points straight back along *current*."""
    return _OPPOSITES.get(requested) == current


def is_contiguous(body: Sequence[Cell]) -> bool:
    """Check that consecutive segments are orthogonal neighbours."""
    for (r1, c1), (r2, c2) in zip(body, body[1:]):
        if abs(r1 - r2) + abs(c1 - c2) != 1:
            return False
    return True


def body_to_list(body: Sequence[Cell]) -> list[list[int]]:
    """Serialize a snake body to nested lists."""
    return [list(seg) for seg in body]
