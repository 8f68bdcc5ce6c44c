"""Grid geometry and wall handling for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

DEFAULT_GRID_SIZE = 20

Cell = tuple[int, int]


class WallMode(enum.Enum):
    """Defines behavior when the snake reaches the grid boundary."""

    WALLS = "walls"
    PASS_THROUGH = "pass_through"


class CellType(enum.IntEnum):
    """Integer codes stored in a painted board array."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3


class Grid:
    """Square game grid of ``size`` x ``size`` cells.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    """

    def __init__(self, size: int = DEFAULT_GRID_SIZE) -> None:
        if size <= 0:
            raise ValueError("Grid size must be positive.")
        self.size = size

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= row < self.size and 0 <= col < self.size

    def wrap(self, row: int, col: int) -> Cell:
        """Wrap coordinates around the grid edges.

        Python's ``%`` already yields the non-negative remainder for a
        positive modulus, so ``-1`` maps to ``size - 1``.
        """
        return row % self.size, col % self.size

    def paint(self, snake: Iterable[Cell], food: Cell | None = None) -> np.ndarray:
        """Return an int8 board with snake, head and food cells marked."""
        board = np.zeros((self.size, self.size), dtype=np.int8)
        segments = list(snake)
        for r, c in segments[1:]:
            board[r, c] = CellType.SNAKE
        if segments:
            r, c = segments[0]
            board[r, c] = CellType.HEAD
        if food is not None:
            board[food[0], food[1]] = CellType.FOOD
        return board
