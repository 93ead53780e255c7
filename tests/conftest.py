import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "60"
os.environ["TMDB_API_KEY"] = "test-tmdb-key"
os.environ.pop("TMDB_ACCESS_TOKEN", None)

import pytest
from fastapi.testclient import TestClient

from cinelog.main import app
from cinelog.database import Base, SessionLocal, engine


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def register(client, email, password="secret123"):
    return client.post("/api/auth/register", json={"email": email, "password": password})


def login(client, email, password="secret123"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


@pytest.fixture
def make_user(client):
    """Registers a user and returns (user_id, auth headers)"""

    def _make_user(email="alice@example.com", password="secret123"):
        assert register(client, email, password).status_code == 201
        response = login(client, email, password)
        assert response.status_code == 200
        body = response.json()
        return body["user"]["user_id"], {"Authorization": f"Bearer {body['access_token']}"}

    return _make_user
