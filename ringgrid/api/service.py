"""
API Service - Business logic layer between the HTTP app and the engine.

The service:
1. Looks games up in the session registry
2. Runs joins and moves under the game's lock
3. Formats results as response schemas

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import ErrorCode, ErrorResponse, GameStateResponse
from ..engine_core import ActionResult, GameEngine
from ..session import SessionManager

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = 3600


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        game = service.create_game()
        service.join_game(game.game_id, "Alice")
        service.join_game(game.game_id, "Bob")
        service.make_move(game.game_id, 0, 0, "SMALL", "RED")
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    engine: GameEngine = field(default_factory=GameEngine)
    session_ttl: float = DEFAULT_SESSION_TTL

    def create_game(self) -> GameStateResponse:
        """Create a new game, sweeping idle ones first."""
        self.session_manager.cleanup_stale_sessions(self.session_ttl)
        session = self.session_manager.create_session()
        return GameStateResponse.from_session(session)

    def get_game(self, game_id: str) -> GameStateResponse | ErrorResponse:
        """Get the current state of a game."""
        with self.session_manager.locked(game_id) as session:
            if session is None:
                return _not_found(game_id)
            return GameStateResponse.from_session(session)

    def join_game(self, game_id: str, player_name: str) -> GameStateResponse | ErrorResponse:
        """Seat a player in a game."""
        with self.session_manager.locked(game_id) as session:
            if session is None:
                return _not_found(game_id)

            result = self.engine.add_player(session, player_name)
            if not result.success:
                logger.info(
                    "Join rejected for %r in game %s: %s",
                    player_name, game_id, result.reason.value,
                )
                return _rejected(ErrorCode.JOIN_REJECTED, result)

            logger.info(
                "Player %r joined game %s (%d players)",
                player_name, game_id, session.num_players,
            )
            return GameStateResponse.from_session(session)

    def make_move(
        self,
        game_id: str,
        row: int,
        col: int,
        size: str,
        player_color: str,
    ) -> GameStateResponse | ErrorResponse:
        """Place a ring for the player whose turn it is."""
        with self.session_manager.locked(game_id) as session:
            if session is None:
                return _not_found(game_id)

            result = self.engine.attempt_move(session, row, col, size, player_color)
            if not result.success:
                logger.info(
                    "Move rejected in game %s: %s %s at %d,%d (%s)",
                    game_id, player_color, size, row, col, result.reason.value,
                )
                return _rejected(ErrorCode.MOVE_REJECTED, result)

            logger.info(
                "Move in game %s: %s %s at %d,%d, status %s",
                game_id, player_color, size, row, col, session.status.value,
            )
            if session.winner:
                logger.info(
                    "Game %s won by %s on %s",
                    game_id, session.winner.value, session.winning_line,
                )
            return GameStateResponse.from_session(session)

    def remove_game(self, game_id: str) -> bool:
        """Remove a game. Returns False if it did not exist."""
        return self.session_manager.remove_session(game_id)

    def list_games(self) -> list[str]:
        return self.session_manager.list_sessions()

    def active_game_count(self) -> int:
        return len(self.session_manager)


def _not_found(game_id: str) -> ErrorResponse:
    return ErrorResponse(
        error="Game not found",
        error_code=ErrorCode.GAME_NOT_FOUND,
        details={"game_id": game_id},
    )


def _rejected(error_code: ErrorCode, result: ActionResult) -> ErrorResponse:
    return ErrorResponse(
        error=result.message,
        error_code=error_code,
        reason=result.reason.value,
    )
