"""WebSocket handler for real-time play."""

from __future__ import annotations

import asyncio
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from classic_snake.commands import parse_command
from classic_snake.server.session_manager import SessionManager
from classic_snake.state import GameState

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _encode(state: GameState) -> str:
    return json.dumps(state.to_dict(), separators=(",", ":"))


async def _pump(websocket: WebSocket, queue: asyncio.Queue[GameState]) -> None:
    """Forward queued snapshots to the client in order."""
    while True:
        state = await queue.get()
        await websocket.send_text(_encode(state))


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Player WebSocket: send commands, receive a snapshot per change."""
    manager = _get_manager(websocket)
    session = manager.get_session(session_id)
    if session is None:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()
    logger.info("Player connected to session %s.", session_id)

    queue: asyncio.Queue[GameState] = asyncio.Queue()
    unsubscribe = session.engine.subscribe(queue.put_nowait)

    # Send initial state snapshot so the client gets immediate feedback.
    await websocket.send_text(_encode(session.state))
    sender = asyncio.create_task(_pump(websocket, queue))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            command_str = msg.get("command")
            if not isinstance(command_str, str):
                continue

            command = parse_command(command_str)
            if command is None:
                logger.debug("Ignoring unknown command %r.", command_str)
                continue

            if not manager.is_registered(session):
                # Evicted or deleted while this socket was open.
                await websocket.close(code=4004, reason="Session closed.")
                return
            await session.scheduler.submit(command)
    except WebSocketDisconnect:
        logger.info("Player disconnected from session %s.", session_id)
    finally:
        unsubscribe()
        sender.cancel()
        await asyncio.gather(sender, return_exceptions=True)
