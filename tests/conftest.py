# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.database import build_engine, build_session_factory, init_db
from app.main import create_app

ALLOWED_ORIGIN = "http://localhost:5173"
VALID_DESCRIPTION = "Twenty-five chars filler."


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        CORS_ORIGINS=f"{ALLOWED_ORIGIN},https://support.example.com",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    engine = build_engine("sqlite://")
    init_db(engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def make_ticket(client):
    def _make(title="Printer is out of toner", description=VALID_DESCRIPTION, **extra):
        r = client.post("/tickets", json={"title": title, "description": description, **extra})
        assert r.status_code == 201, r.text
        return r.json()

    return _make
