"""Pure movement and collision rules."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from classic_snake.grid import DEFAULT_GRID_SIZE, Cell, Grid, WallMode
from classic_snake.snake import Direction

_STEP: dict[Direction, Cell] = {d: d.delta for d in Direction}


@dataclass(frozen=True)
class CollisionResult:
    """Outcome of resolving a candidate head against body and walls.

    ``head`` is the (possibly wrapped) cell the snake moves into; its value
    carries no meaning once ``collided`` is True.
    """

    collided: bool
    head: Cell


def next_head(head: Cell, direction: Direction) -> Cell:
    """Return the cell one step from *head* in *direction*.

    An unknown direction leaves the head where it is.
    """
    step = _STEP.get(direction)
    if step is None:
        return head
    return head[0] + step[0], head[1] + step[1]


def resolve_collision(
    candidate: Cell,
    body: Collection[Cell],
    mode: WallMode,
    grid_size: int = DEFAULT_GRID_SIZE,
) -> CollisionResult:
    """Decide whether moving into *candidate* ends the game.

    *body* is the snake without its current head. Self-collision is checked
    first and applies in every mode; only then is the boundary consulted.
    """
    if candidate in body:
        return CollisionResult(collided=True, head=candidate)

    grid = Grid(grid_size)
    if not grid.in_bounds(*candidate):
        if mode == WallMode.PASS_THROUGH:
            wrapped = grid.wrap(*candidate)
            # The re-entry cell on the far edge can be occupied too.
            return CollisionResult(collided=wrapped in body, head=wrapped)
        return CollisionResult(collided=True, head=candidate)

    return CollisionResult(collided=False, head=candidate)
