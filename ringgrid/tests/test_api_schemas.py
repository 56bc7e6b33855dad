"""
Tests for API Pydantic schemas.

Validates that:
- Request/response models serialize correctly
- Game state is converted faithfully from a session
- Error codes are properly structured
- The OpenAPI schema builds
"""

import pytest
from pydantic import ValidationError


class TestPydanticSchemas:
    """Tests for Pydantic schema validation."""

    def test_move_request_keeps_raw_strings(self):
        """Unknown sizes and colors pass validation untouched."""
        from ringgrid.api.schemas import MoveRequest

        request = MoveRequest(row=0, col=1, size="ENORMOUS", player_color="PINK")
        assert request.size == "ENORMOUS"
        assert request.player_color == "PINK"

    def test_move_request_requires_fields(self):
        from ringgrid.api.schemas import MoveRequest

        with pytest.raises(ValidationError):
            MoveRequest(row=0, col=1, size="SMALL")

    def test_join_request(self):
        from ringgrid.api.schemas import JoinGameRequest

        assert JoinGameRequest(player_name="Alice").player_name == "Alice"
        with pytest.raises(ValidationError):
            JoinGameRequest()

    def test_game_state_from_empty_session(self, session):
        from ringgrid.api.schemas import GameStateResponse

        data = GameStateResponse.from_session(session).model_dump(mode="json")

        assert data["game_id"] == session.game_id
        assert data["status"] == "WAITING"
        assert data["players"] == []
        assert data["winner"] is None
        assert data["winning_line"] is None
        assert data["board"][0][0] == {"rings": []}
        assert data["has_playable_rings"] is False

    def test_game_state_from_finished_session(self, play):
        from ringgrid.api.schemas import GameStateResponse

        session = play([
            (0, 0, "LARGE", "RED"),
            (2, 2, "SMALL", "BLUE"),
            (0, 0, "MEDIUM", "RED"),
            (2, 1, "SMALL", "BLUE"),
            (0, 0, "SMALL", "RED"),
        ])

        data = GameStateResponse.from_session(session).model_dump(mode="json")

        assert data["status"] == "FINISHED"
        assert data["winner"] == "RED"
        assert data["winning_line"] == ["0,0"]
        assert data["players"][0] == {
            "name": "Alice",
            "color": "RED",
            "rings": {"SMALL": 2, "MEDIUM": 2, "LARGE": 2},
            "is_current_turn": False,
        }
        assert [ring["size"] for ring in data["board"][0][0]["rings"]] == [
            "LARGE", "MEDIUM", "SMALL",
        ]

    def test_error_response_schema(self):
        from ringgrid.api.schemas import ErrorResponse, ErrorCode

        response = ErrorResponse(
            error="Cell already holds a ring of that size",
            error_code=ErrorCode.MOVE_REJECTED,
            reason="SLOT_OCCUPIED",
        )

        data = response.model_dump(mode="json")
        assert data["error_code"] == "MOVE_REJECTED"
        assert data["reason"] == "SLOT_OCCUPIED"
        assert data["api_version"] == "v1"
        assert data["details"] is None


class TestErrorCodes:
    """Tests for error code coverage."""

    def test_all_error_codes_defined(self):
        """All required error codes are defined."""
        from ringgrid.api.schemas import ErrorCode

        required_codes = [
            "GAME_NOT_FOUND",
            "JOIN_REJECTED",
            "MOVE_REJECTED",
            "VALIDATION_ERROR",
            "INTERNAL_ERROR",
        ]

        for code in required_codes:
            assert hasattr(ErrorCode, code), f"Missing error code: {code}"
            assert ErrorCode[code].value == code

    def test_reject_reasons_are_strings(self):
        """Rejection reasons are string enums for JSON serialization."""
        from ringgrid.engine_core import RejectReason

        for reason in RejectReason:
            assert isinstance(reason.value, str)
            assert reason.value == reason.value.upper()


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_response_models_in_schema(self):
        """Response models appear in OpenAPI schema."""
        from ringgrid.api.app import app

        schemas = app.openapi()["components"]["schemas"]

        for name in ["GameStateResponse", "ErrorResponse", "MoveRequest", "JoinGameRequest"]:
            assert name in schemas, f"Missing schema: {name}"

    def test_game_endpoints_present(self):
        from ringgrid.api.app import app

        paths = app.openapi()["paths"]

        assert "post" in paths["/api/game/create"]
        assert "post" in paths["/api/game/{game_id}/join"]
        assert "post" in paths["/api/game/{game_id}/move"]
        assert {"get", "delete"} <= set(paths["/api/game/{game_id}"])
        assert "404" in paths["/api/game/{game_id}/move"]["post"]["responses"]
