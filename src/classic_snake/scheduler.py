"""Async tick loop that drives a :class:`GameEngine` at its current speed."""

from __future__ import annotations

import asyncio
import logging

from classic_snake.commands import Command, dispatch
from classic_snake.engine import GameEngine
from classic_snake.state import GameState, GameStatus

logger = logging.getLogger(__name__)


class TickScheduler:
    """Calls :meth:`GameEngine.tick` every ``state.speed`` milliseconds.

    The loop starts when the engine enters RUNNING and stops as soon as it
    leaves it (game over or reset). Ticks and commands submitted through
    :meth:`submit` share one lock, so the engine never sees overlapping
    calls. The delay is read again before every sleep, so a speed-up
    after eating applies to the very next interval.
    """

    def __init__(
        self, engine: GameEngine, lock: asyncio.Lock | None = None,
    ) -> None:
        self.engine = engine
        self.lock = lock if lock is not None else asyncio.Lock()
        self.ticks = 0
        self._task: asyncio.Task | None = None
        self._stopping: set[asyncio.Task] = set()
        self._closed = False
        self._unsubscribe = engine.subscribe(self._on_state)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def interval(self) -> float:
        """Seconds until the next tick at the current speed."""
        return self.engine.state.speed / 1000.0

    async def submit(self, command: Command) -> bool:
        """Apply *command* to the engine under the scheduler lock."""
        async with self.lock:
            if self._closed:
                logger.debug("Ignoring %s on a closed scheduler.", command.value)
                return False
            return dispatch(self.engine, command)

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        self._cancel()
        if self._stopping:
            await asyncio.gather(*self._stopping, return_exceptions=True)

    def shutdown(self) -> None:
        """Detach from the engine and cancel the loop without waiting.

        A shut-down scheduler ignores further commands and never ticks again.
        """
        self._closed = True
        self._unsubscribe()
        self._cancel()

    async def close(self) -> None:
        """Shut down and wait for the loop to finish."""
        self.shutdown()
        await self.stop()

    def _on_state(self, state: GameState) -> None:
        if state.status == GameStatus.RUNNING:
            if not self.running:
                self._launch()
        elif self._task is not None and self._task is not asyncio.current_task():
            self._cancel()

    def _launch(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Engine driven synchronously; nothing to schedule.
            return
        self._task = loop.create_task(self._run())

    def _cancel(self) -> None:
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            self._stopping.add(task)
            task.add_done_callback(self._stopping.discard)

    async def _run(self) -> None:
        try:
            while self.engine.status == GameStatus.RUNNING:
                await asyncio.sleep(self.interval)
                async with self.lock:
                    if self.engine.status != GameStatus.RUNNING:
                        break
                    self.engine.tick()
                    self.ticks += 1
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled after %d ticks.", self.ticks)
        except Exception:
            logger.exception("Tick loop error after %d ticks.", self.ticks)
        finally:
            if self._task is asyncio.current_task():
                self._task = None
