"""
Health check API tests
"""
from unittest.mock import patch
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from resort.main import app


def test_health_ok(client: TestClient):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["services"] == {"api": "running", "database": "connected"}


def test_health_database_down(client: TestClient):
    with patch("resort.routers.health.ping_database",
               side_effect=OperationalError("SELECT 1", {}, Exception("unreachable"))):
        response = client.get("/api/health")

    assert response.status_code == 500
    data = response.json()
    assert data["status"] == "error"
    assert data["services"]["database"] == "disconnected"


def test_unknown_error_is_500(client: TestClient):
    with patch("resort.routers.health.ping_database", side_effect=RuntimeError("boom")):
        response = TestClient(app, raise_server_exceptions=False).get("/api/health")

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal server error"
