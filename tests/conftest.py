"""
Shared fixtures.

The MongoDB server is replaced by mongomock through the get_mongo_db
dependency override; everything else (auth, routing, services) is real.
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.client.api_client import CareerTrackerClient
from app.db.mongodb import get_mongo_db, init_mongo_indexes
from app.main import app


@pytest.fixture
def db():
    database = mongomock.MongoClient(tz_aware=True)["career_tracker_test"]
    init_mongo_indexes(database)
    return database


@pytest.fixture
def client(db):
    app.dependency_overrides[get_mongo_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, name: str, email: str, password: str = "secret123") -> dict:
    response = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
    assert response.status_code == 201, response.text
    data = response.json()
    return {
        "id": data["user"]["_id"],
        "headers": {"Authorization": f"Bearer {data['access_token']}"},
    }


@pytest.fixture
def alice(client):
    return register(client, "Alice", "alice@example.com")


@pytest.fixture
def bob(client):
    return register(client, "Bob", "bob@example.com")


@pytest.fixture
def api_client(client):
    """CareerTrackerClient talking to the app in-process."""
    return CareerTrackerClient(session=client)
