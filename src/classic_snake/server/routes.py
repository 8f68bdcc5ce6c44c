"""REST API route handlers for session lifecycle and commands."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from classic_snake.commands import parse_command
from classic_snake.server.models import (
    CommandRequest,
    CreateSessionRequest,
    SessionSummary,
)
from classic_snake.server.session_manager import SessionCapacityError

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_manager(request: Request):
    return request.app.state.session_manager


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create a new idle game session."""
    manager = _get_manager(request)
    try:
        session = manager.create_session(
            grid_size=body.grid_size,
            initial_speed=body.initial_speed,
            speed_step=body.speed_step,
            min_speed=body.min_speed,
            mode=body.mode,
            seed=body.seed,
        )
    except SessionCapacityError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List all sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get session metadata and the current state snapshot."""
    session = _get_manager(request).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    result = session.summary().model_dump(mode="json")
    result["state"] = session.state.to_dict()
    return result


@router.post("/{session_id}/commands")
async def send_command(
    session_id: str, body: CommandRequest, request: Request,
) -> dict:
    """Apply one command and return the resulting state."""
    command = parse_command(body.command)
    if command is None:
        raise HTTPException(
            status_code=422, detail=f"Unknown command '{body.command}'.",
        )
    try:
        state = await _get_manager(request).submit(session_id, command)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return state.to_dict()


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str, request: Request) -> Response:
    """Stop and remove a session."""
    try:
        await _get_manager(request).close_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
