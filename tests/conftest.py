import pytest
from fastapi.testclient import TestClient

from tdrive.auth import get_current_user
from tdrive.main import app
from tdrive.models import CallerIdentity
from tdrive.store import SessionStore, get_store


@pytest.fixture
def store(tmp_path):
    """Session store backed by a fresh file under tmp_path."""
    session_store = SessionStore(str(tmp_path / "data" / "sessions.json"))
    session_store.initialize()
    return session_store


@pytest.fixture
def caller():
    """Mutable holder for the identity the fake auth dependency returns."""
    return {"user": CallerIdentity(uid="u1", email="u1@example.com", phone_number=None, name="User One")}


@pytest.fixture
def client(store, caller):
    """TestClient with auth and storage dependencies replaced."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_current_user] = lambda: caller["user"]
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def valid_payload():
    return {
        "profileId": "p1",
        "date": "2026-02-15",
        "startTime": "16:00",
        "durationMinutes": 60,
        "timeOfDay": "day",
        "weather": "clear",
    }
