"""Step-based game engine composing motion rules and food sampling."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from classic_snake.config import EngineConfig
from classic_snake.food import RandomFoodSampler
from classic_snake.grid import WallMode
from classic_snake.motion import next_head, resolve_collision
from classic_snake.snake import Direction, is_reversal
from classic_snake.state import GameState, GameStatus

logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


class GameEngine:
    """Single-snake, step-based game engine.

    The engine owns the only :class:`GameState`. Every operation builds a
    new state and swaps it in at once, then hands the new snapshot to the
    subscribed listeners. Calls must be serialized by the caller; the
    engine never schedules itself (see :mod:`classic_snake.scheduler`).
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        mode: WallMode = WallMode.WALLS,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else EngineConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.food_sampler = RandomFoodSampler(self.config.grid_size, rng=self.rng)
        self._listeners: list[StateListener] = []
        self._state = self._initial_state(mode)

    @property
    def state(self) -> GameState:
        """Return the current immutable snapshot."""
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* for post-change snapshots.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> bool:
        """Move from IDLE to RUNNING. Returns False if not idle."""
        if self._state.status != GameStatus.IDLE:
            logger.debug("Ignoring start while %s.", self._state.status.value)
            return False
        self._commit(self._state.evolve(status=GameStatus.RUNNING))
        return True

    def set_direction(self, direction: Direction) -> bool:
        """Change heading, ignoring 180° reversals and non-running games."""
        state = self._state
        if state.status != GameStatus.RUNNING:
            logger.debug("Ignoring direction %s while %s.",
                         direction.value, state.status.value)
            return False
        if is_reversal(state.direction, direction):
            return False
        if direction != state.direction:
            self._commit(state.evolve(direction=direction))
        return True

    def set_mode(self, mode: WallMode) -> bool:
        """Select the wall mode. Rejected while a run is in progress."""
        state = self._state
        if state.status == GameStatus.RUNNING:
            logger.debug("Ignoring mode change to %s while running.", mode.value)
            return False
        if mode != state.mode:
            self._commit(state.evolve(mode=mode))
        return True

    def reset(self) -> GameState:
        """Rebuild the creation defaults and return to IDLE.

        The selected wall mode carries over; everything else is reset.
        """
        self._commit(self._initial_state(self._state.mode))
        return self._state

    def tick(self) -> GameState:
        """Advance the game by one step and return the new state."""
        state = self._state
        if state.status != GameStatus.RUNNING:
            return state

        candidate = next_head(state.head, state.direction)
        result = resolve_collision(
            candidate, state.snake[1:], state.mode, self.config.grid_size,
        )
        if result.collided:
            logger.info("Game over at %s with score %d.", candidate, state.score)
            self._commit(state.evolve(status=GameStatus.GAME_OVER))
            return self._state

        grown = (result.head, *state.snake)

        if result.head == state.food:
            score = state.score + 1
            speed = max(self.config.min_speed, state.speed - self.config.speed_step)
            if len(grown) >= self.config.grid_size ** 2:
                logger.info("Board filled with score %d.", score)
                self._commit(state.evolve(
                    snake=grown, food=None, score=score, speed=speed,
                    status=GameStatus.GAME_OVER,
                ))
                return self._state
            self._commit(state.evolve(
                snake=grown,
                score=score,
                speed=speed,
                food=self.food_sampler.sample(grown),
            ))
        else:
            self._commit(state.evolve(snake=grown[:-1]))
        return self._state

    def get_state(self) -> dict:
        """Return the current snapshot as a serializable dict."""
        return self._state.to_dict()

    def _initial_state(self, mode: WallMode) -> GameState:
        snake = self.config.initial_snake
        return GameState(
            snake=snake,
            food=self.food_sampler.sample(snake),
            direction=Direction.RIGHT,
            speed=self.config.initial_speed,
            score=0,
            status=GameStatus.IDLE,
            mode=mode,
        )

    def _commit(self, new_state: GameState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
