import os

os.environ.setdefault("SESSION_COOKIE_NAME", "qid")
os.environ.setdefault("FRONTEND_BASE_URL", "http://localhost:3000")

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from forum.controllers import auth_controller
from forum.core.db import get_db, init_db, make_engine
from forum.core.redis import get_redis
from forum.main import app

REGISTER = """
mutation Register($options: UsernamePasswordInput!) {
  register(options: $options) {
    errors { field message }
    user { id username email }
  }
}
"""

LOGIN = """
mutation Login($usernameOrEmail: String!, $password: String!) {
  login(usernameOrEmail: $usernameOrEmail, password: $password) {
    errors { field message }
    user { id username email }
  }
}
"""

ME = "query { me { id username email } }"

LOGOUT = "mutation { logout }"


@pytest.fixture()
def db_session():
    engine = make_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    init_db(engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def fake_redis():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture()
def overrides(db_session, fake_redis):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = lambda: fake_redis
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(overrides):
    return TestClient(overrides)


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def gql(client):
    def run(query, **variables):
        resp = client.post("/graphql", json={"query": query, "variables": variables})
        assert resp.status_code == 200
        return resp.json()

    return run


@pytest.fixture()
def sent_emails(monkeypatch):
    outbox = []

    def fake_send_email(to_email, subject, html_body, text_body=None):
        outbox.append({"to": to_email, "subject": subject, "html": html_body, "text": text_body})

    monkeypatch.setattr(auth_controller, "send_email", fake_send_email)
    return outbox


def register(gql, username="alice", email="alice@example.com", password="secret123"):
    options = {"username": username, "email": email, "password": password}
    return gql(REGISTER, options=options)["data"]["register"]
