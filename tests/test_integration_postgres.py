"""
End-to-end checks against a real PostgreSQL database.

Set TEST_DATABASE_URL to a disposable database to run these.
"""

import os
import uuid

import pytest
from fastapi.testclient import TestClient

from core.settings import Settings
from main import create_app

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "").strip()

pytestmark = pytest.mark.skipif(not TEST_DATABASE_URL, reason="TEST_DATABASE_URL is not set")


@pytest.fixture
def live_client():
    settings = Settings(database_url=TEST_DATABASE_URL, db_init_schema=True)
    with TestClient(create_app(settings)) as client:
        yield client


def _unique_name():
    return f"user-{uuid.uuid4().hex[:12]}"


def test_full_flow(live_client):
    username = _unique_name()

    user = live_client.post("/register", json={"username": username, "password": "p1"})
    assert user.status_code == 200
    user_id = user.json()["id"]

    token = live_client.post("/login", json={"username": username, "password": "p1"}).json()["token"]
    headers = {"Authorization": token}

    before = live_client.get("/api/ads", headers=headers).json()
    created = live_client.post(
        "/api/ad",
        json={"title": "Bike", "description": "Used", "image_url": "http://x/y.png", "price": 42.5},
        headers=headers,
    )
    assert created.status_code == 200
    assert created.json()["author_id"] == user_id

    after = live_client.get("/api/ads", headers=headers).json()
    assert len(after) == len(before) + 1
    assert created.json() in after


def test_duplicate_username_violates_constraint(live_client):
    username = _unique_name()

    assert live_client.post("/register", json={"username": username, "password": "p1"}).status_code == 200
    resp = live_client.post("/register", json={"username": username, "password": "p2"})
    assert resp.status_code == 500


def test_wrong_password_and_logout(live_client):
    username = _unique_name()
    live_client.post("/register", json={"username": username, "password": "p1"})

    assert live_client.post("/login", json={"username": username, "password": "bad"}).status_code == 401

    token = live_client.post("/login", json={"username": username, "password": "p1"}).json()["token"]
    assert live_client.post("/api/logout", headers={"Authorization": token}).status_code == 200
    assert live_client.get("/api/ads", headers={"Authorization": token}).status_code == 401
