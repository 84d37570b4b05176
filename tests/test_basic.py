# Basic tests
import pytest
from fastapi.testclient import TestClient

from notekeeper.main import app

basic_client = TestClient(app)


def test_root_endpoint():
    """Test the root endpoint."""
    response = basic_client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "NoteKeeper API"}


def test_health_endpoint():
    """Test health check."""
    response = basic_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_api_root_lists_endpoints():
    response = basic_client.get("/api/")
    assert response.status_code == 200
    data = response.json()
    assert data["endpoints"]["notes"] == "/api/notes"
    assert data["endpoints"]["users"] == "/api/users"


def test_unknown_route_uses_error_schema():
    response = basic_client.get("/api/nope")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "NotFound"
    assert "message" in body and "timestamp" in body


ROUTES = [
    ("POST", "/api/login"),
    ("POST", "/api/logout"),
    ("GET", "/api/check-auth"),
    ("GET", "/api/notes"),
    ("GET", "/api/notes/1"),
    ("POST", "/api/notes"),
    ("PUT", "/api/notes/1"),
    ("DELETE", "/api/notes/1"),
    ("GET", "/api/users"),
    ("POST", "/api/users"),
    ("PUT", "/api/users/profile"),
    ("PUT", "/api/users/alice"),
    ("DELETE", "/api/users/alice"),
    ("GET", "/api/health"),
]


@pytest.mark.parametrize("method,path", ROUTES)
def test_expected_routes_answer(client, method, path):
    # Anonymous calls stop at auth (401) or succeed, never at routing
    response = client.request(method, path)
    assert response.status_code in (200, 401)


def test_profile_route_precedes_username_route(bob_client):
    # Matched as /{username}, a non-admin would get 403
    response = bob_client.put("/api/users/profile", data={"password": "changed"})
    assert response.status_code == 200
    assert response.json()["username"] == "bob"
