"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from classic_snake.grid import WallMode
from classic_snake.state import GameStatus


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    grid_size: int = Field(default=20, ge=4, le=100)
    initial_speed: int = Field(default=180, ge=50, le=2000)
    speed_step: int = Field(default=10, ge=0, le=500)
    min_speed: int = Field(default=50, ge=10, le=2000)
    mode: WallMode = WallMode.WALLS
    seed: int | None = None


class CommandRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/commands."""

    command: str = Field(min_length=1, max_length=32)


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    status: GameStatus
    score: int
    speed: int
    mode: WallMode
    grid_size: int
