"""
Pytest fixtures for the Not Just Luck tests.

Provides a FastAPI TestClient bound to a fresh SQLite database per test,
helpers to sign users up and in, and a shim that routes the Streamlit
client's `requests` calls into the TestClient.
"""

import os
import types
from datetime import datetime, timezone

# Configure the server before it is imported; the app initialises its
# engine at import time.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest  # noqa: E402
import requests  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from server.main import app  # noqa: E402
from server.database import get_db  # noqa: E402
from server.models import Base  # noqa: E402


RAN_5K_WHEN = int(datetime(2024, 3, 9, tzinfo=timezone.utc).timestamp() * 1000)


@pytest.fixture
def db_session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def client(db_session_factory):
    """TestClient wired to a per-test SQLite database."""
    def override_get_db():
        db = db_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def signup_and_signin(client, username, password):
    """Creates an account and returns bearer headers for it."""
    res = client.post("/users/create", json={"username": username, "password": password})
    assert res.status_code == 201, res.text
    res = client.post("/signin", json={"username": username, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture
def alice(client):
    return signup_and_signin(client, "alice", "pw1")


@pytest.fixture
def bob(client):
    return signup_and_signin(client, "bob", "pw2")


def sample_achievement(**overrides):
    data = {
        "achieveWhat": "Ran 5k",
        "achieveHow": ["Grit"],
        "achieveWhen": RAN_5K_WHEN,
        "achieveWhy": "Health",
    }
    data.update(overrides)
    return data


@pytest.fixture
def live_api(client, monkeypatch):
    """
    Points client.services.api at the TestClient so the client functions
    run end to end against the real routes.
    """
    from client.services import api

    def call(method):
        def send(url, **kwargs):
            kwargs.pop("timeout", None)
            return getattr(client, method)(url, **kwargs)
        return send

    shim = types.SimpleNamespace(
        get=call("get"),
        post=call("post"),
        put=call("put"),
        delete=call("delete"),
        RequestException=requests.RequestException,
    )
    monkeypatch.setattr(api, "requests", shim)
    monkeypatch.setattr(api, "API_URL", "http://testserver")
    return api
