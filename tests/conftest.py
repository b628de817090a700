import os

# Must be set before taskapi.config is imported
os.environ.setdefault("SECRET", "test-secret")
os.environ.setdefault("API_DOMAIN", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from taskapi.database import Base, init_db, make_session_factory
from taskapi.main import create_app

BASE_URL = "https://testserver"


@pytest.fixture
def engine():
    # One shared in-memory database per test
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def app(engine):
    return create_app(engine=engine)


@pytest.fixture
def client(app):
    # https so the Secure session and CSRF cookies are sent back
    with TestClient(app, base_url=BASE_URL) as c:
        yield c


@pytest.fixture
def other_client(app):
    with TestClient(app, base_url=BASE_URL) as c:
        yield c


def csrf_headers(client: TestClient) -> dict:
    """Fetch a CSRF token (setting the cookie) and return the matching header."""
    r = client.get("/csrf")
    assert r.status_code == 200
    return {"X-CSRF-Token": r.json()["csrf_token"]}


def sign_up_and_login(client: TestClient, email: str, password: str = "secret") -> dict:
    headers = csrf_headers(client)
    r = client.post("/signup", json={"email": email, "password": password}, headers=headers)
    assert r.status_code == 201, r.text
    r = client.post("/login", json={"email": email, "password": password}, headers=headers)
    assert r.status_code == 200, r.text
    return headers
