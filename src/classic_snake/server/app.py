"""FastAPI application serving single-player Classic Snake sessions."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from classic_snake.server.routes import router
from classic_snake.server.session_manager import MAX_SESSIONS, SessionManager
from classic_snake.server.websocket import ws_router


@asynccontextmanager
async def _lifespan(app: FastAPI):
    # Session tick loops live on the server's event loop; stop them on exit.
    app.state.session_manager = SessionManager(
        max_sessions=app.state.max_sessions,
    )
    yield
    await app.state.session_manager.cleanup()


def create_app(max_sessions: int = MAX_SESSIONS) -> FastAPI:
    """Build the app exposing REST session control and the /play socket.

    *max_sessions* caps how many games the registry keeps at once.
    """
    app = FastAPI(
        title="Classic Snake Sessions",
        description=(
            "Create a snake game, send start/direction/mode commands and "
            "stream a state snapshot after every tick."
        ),
        version="0.1.0",
        lifespan=_lifespan,
    )
    app.state.max_sessions = max_sessions
    app.include_router(router)
    app.include_router(ws_router)
    return app
