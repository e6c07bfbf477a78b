"""Exception handler tests."""

from __future__ import annotations

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel

from lira.api.exceptions import NotFoundError, ServiceUnavailableError
from lira.api.handlers import register_exception_handlers
from lira.api.middleware import RequestIDMiddleware
from lira.exceptions import DispatchValidationError


class CountBody(BaseModel):
    count: int


@pytest.fixture
def app_with_handlers() -> FastAPI:
    """Create FastAPI app with exception handlers registered."""
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)
    return app


class TestAPIErrorHandler:
    """Tests for custom API error handler."""

    def test_handles_not_found_error(self, app_with_handlers: FastAPI) -> None:
        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise NotFoundError("Agent", "abc-123")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "Agent not found"
        assert data["detail"] == "Agent with id 'abc-123' does not exist"
        assert data["code"] == "NOT_FOUND"
        assert "request_id" in data

    def test_handles_service_unavailable(self, app_with_handlers: FastAPI) -> None:
        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise ServiceUnavailableError("Quantum oracle", detail="offline")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test")

        assert response.status_code == 503
        data = response.json()
        assert data["error"] == "Quantum oracle service unavailable"
        assert data["detail"] == "offline"


class TestDispatchValidationErrorHandler:
    """Tests for dispatcher validation errors."""

    def test_maps_to_422(self, app_with_handlers: FastAPI) -> None:
        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise DispatchValidationError("agent_ids must contain at least one agent ID")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test", headers={"X-Request-ID": "req-9"})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["detail"] == "agent_ids must contain at least one agent ID"
        assert data["request_id"] == "req-9"


class TestOtherHandlers:
    """Tests for framework and unhandled errors."""

    def test_handles_http_exception(self, app_with_handlers: FastAPI) -> None:
        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise HTTPException(status_code=409, detail="Conflict")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test")

        assert response.status_code == 409
        assert response.json()["code"] == "HTTP_409"

    def test_handles_request_validation(self, app_with_handlers: FastAPI) -> None:
        @app_with_handlers.post("/test")
        async def test_endpoint(body: CountBody) -> None:
            return None

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.post("/test", json={"count": "many"})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert "count" in data["detail"]

    def test_hides_unhandled_error_details(self, app_with_handlers: FastAPI) -> None:
        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise RuntimeError("secret internals")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test")

        assert response.status_code == 500
        data = response.json()
        assert data["code"] == "INTERNAL_ERROR"
        assert data["detail"] is None
