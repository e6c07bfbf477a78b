"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from lira.container import DispatcherContainer, get_container
from lira.executors import QuantumOracleExecutor
from lira.registry import InMemoryAgentRegistry, InMemoryModelCatalog
from lira.services import AgentDispatcher

from .exceptions import ServiceUnavailableError


def get_ready_container() -> DispatcherContainer:
    """Container dependency.

    Returns:
        Initialized container

    Raises:
        ServiceUnavailableError: If startup has not wired the container
    """
    container = get_container()
    if not container.is_initialized:
        raise ServiceUnavailableError("Dispatcher", detail="Container not initialized")
    return container


def get_dispatcher(
    container: DispatcherContainer = Depends(get_ready_container),
) -> AgentDispatcher:
    return container.dispatcher


def get_agent_registry(
    container: DispatcherContainer = Depends(get_ready_container),
) -> InMemoryAgentRegistry:
    return container.agent_registry


def get_model_catalog(
    container: DispatcherContainer = Depends(get_ready_container),
) -> InMemoryModelCatalog:
    return container.model_catalog


def get_quantum_executor(
    container: DispatcherContainer = Depends(get_ready_container),
) -> QuantumOracleExecutor:
    return container.quantum_executor


# Type aliases for cleaner route signatures
Container = Annotated[DispatcherContainer, Depends(get_ready_container)]
Dispatcher = Annotated[AgentDispatcher, Depends(get_dispatcher)]
AgentStore = Annotated[InMemoryAgentRegistry, Depends(get_agent_registry)]
ModelStore = Annotated[InMemoryModelCatalog, Depends(get_model_catalog)]
QuantumExecutor = Annotated[QuantumOracleExecutor, Depends(get_quantum_executor)]
