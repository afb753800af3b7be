"""Pydantic models for training configuration and server payloads."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Status(str, Enum):
    """Outcome of a session operation."""
    OK = "OK"
    FAILURE = "FAILURE"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    NULL_POINTER = "NULL_POINTER"
    BAD_CONFIG = "BAD_CONFIG"
    BUFFER_TOO_SMALL = "BUFFER_TOO_SMALL"
    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    ALLOCATION_FAILURE = "ALLOCATION_FAILURE"


class TrainingConfig(BaseModel):
    """Input for starting a training game.

    ``turns`` of 0 lets the server pick its default. The key is checked by
    the session layer, not here, so that a missing key maps to BAD_CONFIG.
    """
    endpoint: Optional[str] = None
    key: Optional[str] = None
    turns: int = 0
    map: Optional[str] = None


class GameInfo(BaseModel):
    """The ``game`` object of a training response."""
    id: Optional[str] = None
    turn: int = 0
    max_turns: int = Field(0, alias="maxTurns")
    finished: bool = False


class TrainingResponse(BaseModel):
    """Body returned by the server when a training game starts."""
    game: GameInfo
    token: Optional[str] = None
    view_url: Optional[str] = Field(None, alias="viewUrl")
    play_url: Optional[str] = Field(None, alias="playUrl")
