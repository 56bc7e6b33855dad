"""
Pytest fixtures for Ring Grid tests.
"""

import pytest

from ..engine_core import GameEngine, GameSession
from ..session import SessionManager
from ..api.service import APIService


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine()


@pytest.fixture
def session() -> GameSession:
    """A fresh game with nobody seated."""
    return GameSession()


@pytest.fixture
def playing_session(engine: GameEngine, session: GameSession) -> GameSession:
    """A 2-player game in progress: Alice is RED and moves first, Bob is BLUE."""
    assert engine.add_player(session, "Alice").success
    assert engine.add_player(session, "Bob").success
    return session


@pytest.fixture
def play(engine: GameEngine, playing_session: GameSession):
    """Play a list of (row, col, size, color) moves, failing on any rejection."""
    def _play(moves):
        for row, col, size, color in moves:
            result = engine.attempt_move(playing_session, row, col, size, color)
            assert result.success, f"{color} {size} at {row},{col}: {result.reason}"
        return playing_session
    return _play


@pytest.fixture
def manager() -> SessionManager:
    return SessionManager()


@pytest.fixture
def service(manager: SessionManager) -> APIService:
    """Create a fresh API service."""
    return APIService(session_manager=manager)


@pytest.fixture
def client(service: APIService):
    """HTTP client bound to an app wrapping the service fixture."""
    from fastapi.testclient import TestClient
    from ..api.app import create_app

    return TestClient(create_app(service=service))
