"""API test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from lira.config import DispatchSettings, LLMSettings, QuantumSettings
from lira.container import DispatcherContainer, get_container, reset_container

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def container() -> Iterator[DispatcherContainer]:
    """Container wired with seeded in-memory stores and simulated backends."""
    reset_container()
    container = get_container()
    container.configure(
        dispatch=DispatchSettings(
            seed_demo_data=True,
            default_timeout_seconds=5.0,
            max_timeout_seconds=30.0,
            max_batch_size=10,
        ),
        llm=LLMSettings(),
        quantum=QuantumSettings(),
    )
    yield container
    reset_container()


@pytest.fixture
def app(container: DispatcherContainer) -> FastAPI:
    """Create test FastAPI app."""
    from lira.api.main import create_app

    return create_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client.

    Used without the context manager so the lifespan does not rewire the
    preconfigured container.
    """
    return TestClient(app, raise_server_exceptions=False)
