from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from notes_api.auth import get_password_hash
from notes_api.config import Settings
from notes_api.database import build_engine, build_session_factory
from notes_api.main import create_app
from notes_api.models import Base, Note, User, utcnow

TEST_PASSWORD = "password123"

# Cheap hashes for the test run
HASH_SETTINGS = Settings(bcrypt_rounds=4)


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://", secret_key="test-secret", cors_origins=["*"], bcrypt_rounds=4,
    )


@pytest.fixture
def db(settings):
    engine = build_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def create_user(db, email="test@example.com", password=TEST_PASSWORD):
    user = User(email=email, password_hash=get_password_hash(password, HASH_SETTINGS))
    db.add(user)
    db.commit()
    return user


def create_note(db, user_id, title="Test note", content="Test content", category=None, age_minutes=0):
    """Insert a note directly; `age_minutes` backdates created_at to control ordering."""
    created = utcnow() - timedelta(minutes=age_minutes)
    note = Note(
        title=title,
        content=content,
        category=category,
        user_id=user_id,
        created_at=created,
        updated_at=created,
    )
    db.add(note)
    db.commit()
    return note


def register(client, email="test@example.com", password=TEST_PASSWORD):
    response = client.post("/api/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_a(client):
    body = register(client, "alice@example.com")
    return {"id": body["user"]["id"], "headers": auth_headers(body["token"])}


@pytest.fixture
def user_b(client):
    body = register(client, "bob@example.com")
    return {"id": body["user"]["id"], "headers": auth_headers(body["token"])}
