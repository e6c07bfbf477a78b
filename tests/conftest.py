"""Shared test fixtures."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

import pytest

from lira.enums import BackendKind
from lira.executors import (
    ExecutorRouter,
    QuantumOracleExecutor,
    SimulatedLanguageExecutor,
    SimulatedQuantumOracle,
)
from lira.registry import (
    Agent,
    InMemoryAgentRegistry,
    InMemoryModelCatalog,
    demo_agents,
    demo_models,
)
from lira.services import AgentDispatcher


class YieldingAgentRegistry(InMemoryAgentRegistry):
    """Registry whose writes suspend between reading and storing a record."""

    async def _store(self, agent: Agent) -> None:
        await asyncio.sleep(0)
        await super()._store(agent)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time."""
    return datetime(2026, 1, 1, tzinfo=UTC)


@pytest.fixture
def registry(now: datetime) -> InMemoryAgentRegistry:
    """Agent registry preloaded with the demo agents plus an inactive one."""
    registry = InMemoryAgentRegistry(demo_agents(now))
    registry.add(
        Agent(
            id="inactive",
            name="Retired Agent",
            model_type="GPT-4",
            owner="0xdead",
            created_at=now,
            is_active=False,
        )
    )
    return registry


@pytest.fixture
def catalog(now: datetime) -> InMemoryModelCatalog:
    """Model catalog preloaded with the demo models."""
    return InMemoryModelCatalog(demo_models(now))


@pytest.fixture
def oracle() -> SimulatedQuantumOracle:
    """Seeded simulated quantum oracle."""
    return SimulatedQuantumOracle(seed=7)


@pytest.fixture
def quantum_executor(oracle: SimulatedQuantumOracle) -> QuantumOracleExecutor:
    """Quantum executor over the simulated oracle."""
    return QuantumOracleExecutor(oracle, status_timeout=1.0)


@pytest.fixture
def router(
    catalog: InMemoryModelCatalog,
    quantum_executor: QuantumOracleExecutor,
) -> ExecutorRouter:
    """Router with simulated language and quantum executors."""
    return ExecutorRouter(
        executors={
            BackendKind.LANGUAGE: SimulatedLanguageExecutor(),
            BackendKind.QUANTUM: quantum_executor,
        },
        catalog=catalog,
    )


@pytest.fixture
def dispatcher(
    registry: InMemoryAgentRegistry,
    router: ExecutorRouter,
    quantum_executor: QuantumOracleExecutor,
) -> AgentDispatcher:
    """Dispatcher wired to the in-memory registry and simulated backends."""
    return AgentDispatcher(
        registry=registry,
        executor=router,
        quantum=quantum_executor,
        default_timeout=5.0,
        max_timeout=30.0,
        max_parallel=4,
        max_batch_size=10,
    )


@pytest.fixture
def yielding_registry(now: datetime) -> YieldingAgentRegistry:
    """Demo registry that yields to the event loop inside every write."""
    return YieldingAgentRegistry(demo_agents(now))
