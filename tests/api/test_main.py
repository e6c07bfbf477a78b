"""Application factory tests."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

from fastapi.testclient import TestClient

from lira.api.main import create_app
from lira.container import get_container, reset_container

if TYPE_CHECKING:
    from fastapi import FastAPI


class TestCreateApp:
    """Tests for create_app()."""

    def test_registers_routes(self, app: FastAPI) -> None:
        paths = {route.path for route in app.routes}  # type: ignore[attr-defined]

        assert "/health" in paths
        assert "/ready" in paths
        assert "/api/v1/agents" in paths
        assert "/api/v1/agents/batch-execute" in paths
        assert "/api/v1/agents/{agent_id}/execute" in paths
        assert "/api/v1/models/{model_id}" in paths
        assert "/api/v1/quantum/status" in paths

    def test_request_id_header(self, client: TestClient) -> None:
        """Responses echo the caller's request ID."""
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"
        assert "X-Response-Time" in response.headers

    def test_request_id_generated(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.headers["X-Request-ID"]


class TestLifespan:
    """Tests for startup and shutdown."""

    def test_lifespan_initializes_and_closes_container(self) -> None:
        reset_container()
        app = create_app()

        with patch("lira.api.main.configure_logging"), TestClient(app) as client:
            assert get_container().is_initialized is True
            response = client.get("/ready")
            assert response.status_code == 200

        assert get_container().is_initialized is False
        reset_container()
