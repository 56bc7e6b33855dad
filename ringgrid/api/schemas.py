"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between clients and the engine.

Error Codes:
- GAME_NOT_FOUND: Game id does not exist or was removed
- JOIN_REJECTED: Join not allowed (roster full, game started)
- MOVE_REJECTED: Move not allowed (wrong turn, occupied slot, ...)
- VALIDATION_ERROR: Request body could not be parsed
- INTERNAL_ERROR: Unexpected server failure
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field

from ..engine_core.state import GameSession, GameStatus


# =============================================================================
# Enums
# =============================================================================

class GameStatusValue(str, Enum):
    """Game status values."""
    WAITING = "WAITING"
    PLAYING = "PLAYING"
    FINISHED = "FINISHED"


class ErrorCode(str, Enum):
    """Structured error codes."""
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    JOIN_REJECTED = "JOIN_REJECTED"
    MOVE_REJECTED = "MOVE_REJECTED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class RingInfo(BaseModel):
    """One ring on the board."""
    size: str
    color: str


class CellInfo(BaseModel):
    """One board cell, rings listed bottom to top."""
    rings: list[RingInfo] = Field(default_factory=list)


class PlayerInfo(BaseModel):
    """Player information for display."""
    name: str
    color: str
    rings: dict[str, int] = Field(description="Remaining rings per size")
    is_current_turn: bool = False


# =============================================================================
# Request Models
# =============================================================================

class JoinGameRequest(BaseModel):
    """Request to join a game."""
    player_name: str = Field(..., description="Display name of the joining player")


class MoveRequest(BaseModel):
    """
    Request to place a ring.

    Size and color are plain strings: unknown values are rejected by the
    engine as illegal moves rather than failing validation.
    """
    row: int = Field(..., description="Board row, 0-2")
    col: int = Field(..., description="Board column, 0-2")
    size: str = Field(..., description="SMALL, MEDIUM or LARGE")
    player_color: str = Field(..., description="Color of the moving player")


# =============================================================================
# Response Models
# =============================================================================

class GameStateResponse(BaseModel):
    """Full state of one game."""
    game_id: str
    players: list[PlayerInfo] = Field(default_factory=list)
    current_player_index: int = 0
    board: list[list[CellInfo]]
    status: GameStatusValue
    winner: Optional[str] = None
    winning_line: Optional[list[str]] = Field(
        None, description='"row,col" entries; a single entry for a concentric win'
    )
    last_activity: float = Field(..., description="Unix timestamp of the last join or move")
    has_playable_rings: bool = True

    @classmethod
    def from_session(cls, session: GameSession) -> "GameStateResponse":
        current = session.current_player
        return cls(
            game_id=session.game_id,
            players=[
                PlayerInfo(
                    name=player.name,
                    color=player.color.value,
                    rings=player.inventory.as_dict(),
                    is_current_turn=(
                        session.status == GameStatus.PLAYING and player is current
                    ),
                )
                for player in session.players
            ],
            current_player_index=session.current_player_index,
            board=session.board.to_rows(),
            status=session.status.value,
            winner=session.winner.value if session.winner else None,
            winning_line=session.winning_line,
            last_activity=session.last_activity,
            has_playable_rings=session.has_playable_rings(),
        )


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    reason: Optional[str] = Field(None, description="Why a join or move was rejected")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameListResponse(BaseModel):
    """Response listing live games."""
    games: list[str]
    count: int


class RemoveGameResponse(BaseModel):
    """Response after removing a game."""
    success: bool
    game_id: str


class ServerTestResponse(BaseModel):
    """Liveness probe response."""
    status: str
    timestamp: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
    active_games: int = 0
