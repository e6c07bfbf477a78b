"""Health endpoint tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.testclient import TestClient

from lira.container import reset_container

if TYPE_CHECKING:
    from fastapi import FastAPI


class TestHealthEndpoints:
    """Health check endpoint tests."""

    def test_health_returns_healthy(self, client: TestClient) -> None:
        """Health endpoint returns status healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_ready_returns_ready(self, client: TestClient) -> None:
        """Ready endpoint returns status ready."""
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_ready_before_initialization(self, app: FastAPI) -> None:
        """Ready reports 503 while the container is unwired."""
        reset_container()
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json()["code"] == "SERVICE_UNAVAILABLE"

    def test_routes_require_initialized_container(self, app: FastAPI) -> None:
        reset_container()
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/v1/agents")

        assert response.status_code == 503
