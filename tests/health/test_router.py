"""Tests for health domain router."""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.core.settings import Settings
from app.main import create_app


def test_health_endpoint_database_healthy(client: TestClient):
    """Test GET /health returns ok status when database is healthy."""
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "ok"
    assert "timestamp" in body


def test_health_endpoint_database_unhealthy(test_settings: Settings):
    """Test GET /health returns 503 when database is unreachable."""
    broken_engine = MagicMock()
    broken_engine.connect.side_effect = OperationalError(
        "SELECT 1", {}, Exception("Connection refused")
    )
    app = create_app(settings=test_settings, engine=broken_engine)

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/health")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "unhealthy"
    assert body["database"] == "error"
