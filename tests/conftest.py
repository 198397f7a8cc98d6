# tests/conftest.py
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.config import Settings, get_settings
from app.core.database import Base, build_engine, get_db


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def settings():
    return Settings(JWT_SECRET="test-secret", DATABASE_URL="sqlite://")


@pytest.fixture
def client(engine, settings):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def register(client, email, password="pass1", role="user"):
    r = client.post("/auth/register", json={"email": email, "password": password, "role": role})
    assert r.status_code == 201, r.text
    return r.json()


def login_headers(client, email, password="pass1"):
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['accessToken']}"}


@pytest.fixture
def admin(client):
    user = register(client, "admin@x.com", role="admin")
    return {**user, "headers": login_headers(client, "admin@x.com")}


@pytest.fixture
def user(client):
    user = register(client, "user@x.com")
    return {**user, "headers": login_headers(client, "user@x.com")}


@pytest.fixture
def other_user(client):
    user = register(client, "other@x.com")
    return {**user, "headers": login_headers(client, "other@x.com")}


@pytest.fixture
def create_ticket(client, admin):
    def _create(assignee_ids, title="T1", **extra):
        body = {"title": title, "deadline": "2025-01-01T00:00:00Z", "assignedUserIds": assignee_ids}
        body.update(extra)
        r = client.post("/tickets", json=body, headers=admin["headers"])
        assert r.status_code == 201, r.text
        return r.json()["ticketId"]

    return _create
