"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from classic_snake.grid import DEFAULT_GRID_SIZE, Cell, Grid

logger = logging.getLogger(__name__)


class RandomFoodSampler:
    """Picks a food cell uniformly among cells not covered by the snake.

    Uses rejection sampling over the whole grid with a NumPy generator, so
    passing a seeded ``rng`` makes placement reproducible.
    """

    def __init__(
        self,
        grid_size: int = DEFAULT_GRID_SIZE,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = Grid(grid_size)
        self.rng = rng if rng is not None else np.random.default_rng()

    def sample(self, snake: Iterable[Cell]) -> Cell:
        """Return a random in-bounds cell that no snake segment occupies."""
        occupied = set(snake)
        if len(occupied) >= self.grid.cell_count:
            logger.warning("No free cell left for food on a %dx%d grid.",
                           self.grid.size, self.grid.size)
            raise ValueError("Snake covers the whole grid; no cell for food.")

        while True:
            row, col = self.rng.integers(0, self.grid.size, size=2).tolist()
            if (row, col) not in occupied:
                return row, col
