"""In-memory session registry with one engine and tick loop per player."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field

from classic_snake.commands import Command
from classic_snake.config import EngineConfig
from classic_snake.engine import GameEngine
from classic_snake.grid import WallMode
from classic_snake.scheduler import TickScheduler
from classic_snake.server.models import SessionSummary
from classic_snake.state import GameState, GameStatus

logger = logging.getLogger(__name__)

MAX_SESSIONS = 100


class SessionCapacityError(Exception):
    """Raised when every session slot holds a running game."""


@dataclass
class Session:
    """All state for a single player's game."""

    session_id: str
    engine: GameEngine
    scheduler: TickScheduler
    created_at: float = field(default_factory=time.monotonic)

    @property
    def state(self) -> GameState:
        return self.engine.state

    def summary(self) -> SessionSummary:
        state = self.engine.state
        return SessionSummary(
            session_id=self.session_id,
            status=state.status,
            score=state.score,
            speed=state.speed,
            mode=state.mode,
            grid_size=self.engine.config.grid_size,
        )


class SessionManager:
    """Central registry managing all game sessions."""

    def __init__(self, max_sessions: int = MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1.")
        self._sessions: dict[str, Session] = {}
        self._max_sessions = max_sessions

    def create_session(
        self,
        grid_size: int = 20,
        initial_speed: int = 180,
        speed_step: int = 10,
        min_speed: int = 50,
        mode: WallMode = WallMode.WALLS,
        seed: int | None = None,
    ) -> Session:
        """Create a new idle session and return it.

        Raises ``ValueError`` for an invalid engine configuration and
        :class:`SessionCapacityError` when the registry is full of running
        games.
        """
        config = EngineConfig.for_grid(
            grid_size,
            initial_speed=initial_speed,
            speed_step=speed_step,
            min_speed=min_speed,
        )
        self._make_room()

        engine = GameEngine(config, mode=mode, seed=seed)
        session = Session(
            session_id=uuid.uuid4().hex[:12],
            engine=engine,
            scheduler=TickScheduler(engine),
        )
        self._sessions[session.session_id] = session
        logger.info(
            "Session %s created (grid=%d, mode=%s).",
            session.session_id, grid_size, mode.value,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def is_registered(self, session: Session) -> bool:
        """Check that *session* is still the live entry for its id."""
        return self._sessions.get(session.session_id) is session

    def list_sessions(self) -> list[SessionSummary]:
        return [s.summary() for s in self._sessions.values()]

    async def submit(self, session_id: str, command: Command) -> GameState:
        """Apply *command* to a session and return the resulting state."""
        session = self._sessions.get(session_id)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        await session.scheduler.submit(command)
        return session.engine.state

    async def close_session(self, session_id: str) -> None:
        """Stop a session's tick loop and drop it from the registry."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        await session.scheduler.close()
        logger.info("Session %s closed.", session_id)

    def _make_room(self) -> None:
        """Evict the oldest non-running session if the registry is full."""
        if len(self._sessions) < self._max_sessions:
            return
        idle = [
            s for s in self._sessions.values()
            if s.engine.status != GameStatus.RUNNING
        ]
        if not idle:
            raise SessionCapacityError(
                "Too many running sessions. Try again later."
            )
        stale = min(idle, key=lambda s: s.created_at)
        self._sessions.pop(stale.session_id, None)
        # Sockets may still hold the session; it must never tick again.
        stale.scheduler.shutdown()
        logger.info("Evicted session %s (retaining up to %d).",
                    stale.session_id, self._max_sessions)

    async def cleanup(self) -> None:
        """Cancel all running tick loops."""
        sessions = list(self._sessions.values())
        self._sessions.clear()
        if sessions:
            await asyncio.gather(
                *(s.scheduler.close() for s in sessions),
                return_exceptions=True,
            )
        logger.info("SessionManager cleanup complete.")
