import pytest
from fastapi.testclient import TestClient

from memory_match.config import LeaderboardConfig
from memory_match.main import create_app
from memory_match.models.data import ScoreEntry
from memory_match.store import LeaderboardStore


@pytest.fixture()
def test_app():
    return create_app(leaderboard_config=LeaderboardConfig(capacity=10))


@pytest.fixture()
def client(test_app):
    # Entering the client runs the lifespan, which creates a fresh store
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture()
def store():
    return LeaderboardStore(capacity=10)


@pytest.fixture()
def make_entry():
    def _make(name='player', moves=10, time_taken=30.0):
        return ScoreEntry(name, moves, time_taken)
    return _make
