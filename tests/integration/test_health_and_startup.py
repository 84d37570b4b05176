"""Health endpoints and application startup."""

import json
from pathlib import Path

from fastapi.testclient import TestClient

from notekeeper.security.password import verify_password


class TestHealthAPI:
    def test_healthy_with_no_data_yet(self, client, test_settings):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert set(data["checks"]) == {"notes_store", "users_store", "uploads"}
        assert data["checks"]["users_store"]["records"] == 0

    def test_store_detail(self, client, seeded_users):
        resp = client.get("/api/health/stores/users")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
        assert resp.json()["records"] == 3

    def test_unknown_store(self, client):
        resp = client.get("/api/health/stores/sessions")
        assert resp.status_code == 404
        assert resp.json()["error"] == "NotFound"

    def test_corrupt_users_store_is_reported(self, client, test_settings):
        test_settings.users_path.write_text("{broken", encoding="utf-8")
        resp = client.get("/api/health")
        assert resp.json()["status"] == "unhealthy"
        assert resp.json()["checks"]["users_store"]["status"] == "unhealthy"

    def test_report_does_not_leak_paths_or_parse_errors(self, client, test_settings):
        test_settings.users_path.write_text("{broken", encoding="utf-8")
        body = client.get("/api/health").text
        assert str(test_settings.users_path.parent) not in body
        assert "JSON" not in body

        detail = client.get("/api/health/stores/users").json()
        assert detail == {"status": "unhealthy", "records": 0}


class TestStartup:
    def test_creates_upload_dir(self, test_app, test_settings):
        with TestClient(test_app):
            pass
        assert Path(test_settings.upload_dir).is_dir()

    def test_bootstraps_initial_admin(self, test_app, test_settings):
        test_settings.initial_admin_password = "first-run"
        with TestClient(test_app) as client:
            resp = client.post("/api/login", json={"username": "admin", "password": "first-run"})
            assert resp.status_code == 200
            assert client.get("/api/users").status_code == 200

        users = json.loads(test_settings.users_path.read_text(encoding="utf-8"))
        assert [u["username"] for u in users] == ["admin"]
        assert verify_password("first-run", users[0]["password"])
        assert users[0]["password"] != "first-run"

    def test_existing_admin_is_left_alone(self, test_app, test_settings, seeded_users):
        test_settings.initial_admin_password = "first-run"
        before = test_settings.users_path.read_text(encoding="utf-8")
        with TestClient(test_app):
            pass
        assert test_settings.users_path.read_text(encoding="utf-8") == before

    def test_no_bootstrap_without_password(self, test_app, test_settings):
        with TestClient(test_app):
            pass
        assert not test_settings.users_path.exists()
