"""
FastAPI Application - REST API for game clients.

Endpoints:
    GET    /api/game/test             Liveness probe
    POST   /api/game/create           Create a game
    POST   /api/game/{id}/join        Join a game
    POST   /api/game/{id}/move        Place a ring
    GET    /api/game/{id}             Get game state
    DELETE /api/game/{id}             Remove a game
    GET    /api/game                  List games
    GET    /health                    Health check

Rejected joins and moves return 400 with the rejection reason.
Unknown game ids return 404.

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union
import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from .schemas import (
    # Request models
    JoinGameRequest,
    MoveRequest,
    # Response models
    GameStateResponse,
    ErrorResponse,
    GameListResponse,
    RemoveGameResponse,
    ServerTestResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)
from .service import APIService, DEFAULT_SESSION_TTL

# Environment configuration
RINGGRID_ENV = os.getenv("RINGGRID_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
SESSION_TTL = float(os.getenv("RINGGRID_SESSION_TTL", DEFAULT_SESSION_TTL))

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    ErrorCode.GAME_NOT_FOUND: 404,
    ErrorCode.JOIN_REJECTED: 400,
    ErrorCode.MOVE_REJECTED: 400,
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.INTERNAL_ERROR: 500,
}


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Ring Grid API",
        description="""
Session-based ring stacking game on a 3x3 board.

## Flow

1. `POST /api/game/create` returns a `game_id`
2. Two players `POST /join`; the first is RED, the second BLUE
3. Players alternate `POST /move` until someone wins

## Error Codes

| Code | Description |
|------|-------------|
| `GAME_NOT_FOUND` | Game does not exist |
| `JOIN_REJECTED` | Game is full or already started |
| `MOVE_REJECTED` | Move is not legal; `reason` says why |
| `VALIDATION_ERROR` | Request body is malformed |
        """,
        version=__version__,
        docs_url=None if RINGGRID_ENV == "production" else "/api/docs",
        redoc_url=None if RINGGRID_ENV == "production" else "/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService(session_ttl=SESSION_TTL)
    app.state.service = api_service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code or _STATUS_CODES[error_code],
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                reason=reason,
                details=details,
            ).model_dump(mode="json"),
        )

    def to_json_response(
        response: Union[GameStateResponse, ErrorResponse],
    ) -> Union[GameStateResponse, JSONResponse]:
        if isinstance(response, ErrorResponse):
            return make_error_response(
                response.error_code,
                response.error,
                reason=response.reason,
                details=response.details,
            )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request",
            details={"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return make_error_response(ErrorCode.INTERNAL_ERROR, "Internal server error")

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/game/test",
        response_model=ServerTestResponse,
        tags=["System"],
        summary="Check that the server is running",
    )
    async def server_test() -> ServerTestResponse:
        return ServerTestResponse(
            status="Server is running!",
            timestamp=str(int(time.time() * 1000)),
        )

    @app.post(
        "/api/game/create",
        response_model=GameStateResponse,
        tags=["Games"],
        summary="Create a new game",
    )
    async def create_game() -> GameStateResponse:
        """Create an empty game waiting for two players."""
        return api_service.create_game()

    @app.get(
        "/api/game",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List games",
    )
    async def list_games() -> GameListResponse:
        games = api_service.list_games()
        return GameListResponse(games=games, count=len(games))

    @app.post(
        "/api/game/{game_id}/join",
        response_model=GameStateResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Join a game",
    )
    async def join_game(
        game_id: str,
        request: JoinGameRequest,
    ) -> Union[GameStateResponse, JSONResponse]:
        """
        Join a game.

        The first player gets RED, the second BLUE. The game starts
        when the second player joins.
        """
        return to_json_response(api_service.join_game(game_id, request.player_name))

    @app.post(
        "/api/game/{game_id}/move",
        response_model=GameStateResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Place a ring",
    )
    async def make_move(
        game_id: str,
        request: MoveRequest,
    ) -> Union[GameStateResponse, JSONResponse]:
        """Place a ring for the player whose turn it is."""
        return to_json_response(
            api_service.make_move(
                game_id,
                request.row,
                request.col,
                request.size,
                request.player_color,
            )
        )

    @app.get(
        "/api/game/{game_id}",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get game state",
    )
    async def get_game(game_id: str) -> Union[GameStateResponse, JSONResponse]:
        return to_json_response(api_service.get_game(game_id))

    @app.delete(
        "/api/game/{game_id}",
        response_model=RemoveGameResponse,
        tags=["Games"],
        summary="Remove a game",
    )
    async def remove_game(game_id: str) -> RemoveGameResponse:
        success = api_service.remove_game(game_id)
        return RemoveGameResponse(success=success, game_id=game_id)

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="ringgrid",
            version=__version__,
            active_games=api_service.active_game_count(),
        )

    return app


# For running directly: uvicorn ringgrid.api.app:app
app = create_app()
