"""Shared pytest fixtures: isolated JSON stores under tmp_path for every test."""

import json
import os

# No rotating log files while testing
os.environ.setdefault("LOG_DIR", "")

import pytest
from fastapi.testclient import TestClient

from notekeeper.config import Settings, get_settings
from notekeeper.core.storage import clear_record_stores
from notekeeper.main import app
from notekeeper.security.password import hash_password

ADMIN_PASSWORD = "admin-pass"
ALICE_PASSWORD = "secret"
BOB_PASSWORD = "bob-pass"


def write_store(path, records):
    """Write a record store file the way the application does."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, indent=2), encoding="utf-8")


def read_store(path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def _fresh_record_stores():
    """Drop shared store instances (and their locks) between tests."""
    clear_record_stores()
    yield
    clear_record_stores()


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing every file at tmp_path."""
    return Settings(
        data_dir=str(tmp_path),
        upload_dir=str(tmp_path / "uploads"),
        static_dir=str(tmp_path / "public"),
        admin_usernames=["admin"],
        log_dir="",
        debug=True,
    )


@pytest.fixture
def seeded_users(test_settings):
    """admin and bob with hashed passwords, alice with a legacy plaintext one."""
    users = [
        {"username": "admin", "password": hash_password(ADMIN_PASSWORD), "profileImage": None},
        {"username": "alice", "password": ALICE_PASSWORD, "profileImage": "/uploads/alice_1.png"},
        {"username": "bob", "password": hash_password(BOB_PASSWORD), "profileImage": None},
    ]
    write_store(test_settings.users_path, users)
    return users


@pytest.fixture
def test_app(test_settings):
    """The FastAPI app with settings overridden."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    """Anonymous test client."""
    return TestClient(test_app)


def _logged_in_client(test_app, username, password):
    client = TestClient(test_app)
    resp = client.post("/api/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return client


@pytest.fixture
def admin_client(test_app, seeded_users):
    return _logged_in_client(test_app, "admin", ADMIN_PASSWORD)


@pytest.fixture
def alice_client(test_app, seeded_users):
    return _logged_in_client(test_app, "alice", ALICE_PASSWORD)


@pytest.fixture
def bob_client(test_app, seeded_users):
    return _logged_in_client(test_app, "bob", BOB_PASSWORD)
