import os

os.environ.setdefault("JWT_SECRET", "test-only-secret-7f3c2a9e5b1d4c8f9a0e6b2d")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from evtracker.core.config import Settings
from evtracker.db.base import Base
from evtracker.db.session import make_engine
from evtracker.main import create_app
from evtracker.services.users import create_user

TEST_SECRET = "test-only-secret-7f3c2a9e5b1d4c8f9a0e6b2d"
PASSWORD = "password123"


@pytest.fixture()
def settings():
    return Settings(
        jwt_secret=TEST_SECRET,
        database_url="sqlite+pysqlite:///:memory:",
        environment="development",
        _env_file=None,
    )


@pytest.fixture()
def engine():
    eng = make_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def app(settings, engine):
    return create_app(settings=settings, engine=engine)


@pytest.fixture()
def session(app):
    s = app.state.session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture()
def make_user(session):
    def _make(email: str, name: str = "Test User", role: str = "user", password: str = PASSWORD):
        return create_user(session, email=email, password=password, name=name, role=role)
    return _make


@pytest.fixture()
def alice(make_user):
    return make_user("alice@example.com", name="Alice")


@pytest.fixture()
def bob(make_user):
    return make_user("bob@example.com", name="Bob")


@pytest.fixture()
def admin(make_user):
    return make_user("admin@example.com", name="Admin", role="admin")


@pytest.fixture()
def client_for(app):
    clients = []

    def _make(user=None):
        cookies = {}
        if user is not None:
            cookies[app.state.settings.auth_cookie_name] = app.state.tokens.issue(user)
        c = TestClient(app, raise_server_exceptions=False, cookies=cookies)
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.close()


@pytest.fixture()
def anon(client_for):
    return client_for()


def new_vehicle(client, name="Model 3", capacity=75, rate=0.25) -> dict:
    r = client.post("/vehicles", json={"name": name, "batteryCapacityKwh": capacity, "kwhPerBaht": rate})
    assert r.status_code == 201, r.text
    return r.json()


def new_charge(client, vehicle_id: int, start: int = 20, end: int = 80) -> dict:
    r = client.post("/charges", json={"vehicleId": vehicle_id, "startPct": start, "endPct": end})
    assert r.status_code == 201, r.text
    return r.json()
