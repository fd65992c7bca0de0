"""
Test configuration and fixtures.

Every test gets its own SQLite file; the app's ``get_db`` and settings
dependencies are overridden to point at it.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from tenacity import wait_none

from myhealth.main import app
from myhealth.core.config import Settings
from myhealth.core.database import build_engine, get_db, init_db
from myhealth.core.dependencies import get_settings_dependency
from myhealth.core.exceptions import AssistantError
from myhealth.client import ChatController, HealthChatAPI, HistoryOutbox


@pytest.fixture
def settings():
    """Settings fixture for testing."""
    return Settings(jwt_secret="test-secret", bcrypt_rounds=4)


@pytest.fixture
def engine(tmp_path):
    db_engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(bind=db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Database session for store-level tests."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory, settings):
    """Test client fixture."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings_dependency] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client):
    def _register(email="a@x.com", password="pw1", first_name="A", last_name="B"):
        return client.post(
            "/api/auth/register",
            json={
                "email": email,
                "password": password,
                "firstName": first_name,
                "lastName": last_name,
            },
        )

    return _register


@pytest.fixture
def auth_headers(client, register_user):
    """Register (if needed) and log in, returning the bearer header."""

    def _make(email="a@x.com", password="pw1"):
        register_user(email=email, password=password)
        response = client.post(
            "/api/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _make


class FakeAssistant:
    """Stand-in for AssistantService with canned output."""

    def __init__(
        self,
        replies=None,
        title="Headache",
        analysis="Hemoglobin is slightly low.",
        fail=False,
    ):
        self.replies = list(replies or ["Drink water and rest."])
        self.title = title
        self.analysis = analysis
        self.fail = fail
        self.chat_calls = []
        self.report_calls = []

    def chat(self, turns, profile=None):
        self.chat_calls.append((list(turns), profile))
        if self.fail:
            raise AssistantError("model unavailable")
        return self.replies.pop(0) if self.replies else ""

    def analyze_report(self, data, mime_type):
        self.report_calls.append((data, mime_type))
        if self.fail:
            raise AssistantError("model unavailable")
        return self.analysis

    def generate_session_title(self, first_message):
        return self.title


@pytest.fixture
def assistant():
    return FakeAssistant()


@pytest.fixture
def controller(client, assistant):
    """Chat controller talking to the app through the TestClient."""
    api = HealthChatAPI(client)
    return ChatController(api, assistant, outbox=HistoryOutbox(api, wait=wait_none()))
