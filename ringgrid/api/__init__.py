"""
API Module - HTTP interface for game clients.

Clients:
1. Create a game
2. Join it (two players)
3. Take turns placing rings
4. Poll the game state

All state is session-scoped. No persistent user accounts required.
"""

from .schemas import (
    # Requests
    JoinGameRequest,
    MoveRequest,
    # Responses
    GameStateResponse,
    ErrorResponse,
    GameListResponse,
    RemoveGameResponse,
    HealthResponse,
    # Shared
    PlayerInfo,
    CellInfo,
    RingInfo,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "JoinGameRequest",
    "MoveRequest",
    # Responses
    "GameStateResponse",
    "ErrorResponse",
    "GameListResponse",
    "RemoveGameResponse",
    "HealthResponse",
    # Shared
    "PlayerInfo",
    "CellInfo",
    "RingInfo",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
