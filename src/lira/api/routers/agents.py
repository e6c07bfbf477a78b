"""Agent registry and execution endpoints."""

from fastapi import APIRouter, status

from lira.services import BatchExecutionResult, ExecutionResult

from ..dependencies import AgentStore, Dispatcher
from ..exceptions import NotFoundError
from ..schemas import (
    AgentCreate,
    AgentResponse,
    AgentUpdate,
    BatchExecuteRequest,
    ExecuteRequest,
)

router = APIRouter(prefix="/agents", tags=["agents"])


@router.get(
    "",
    response_model=list[AgentResponse],
    summary="List agents",
)
async def list_agents(registry: AgentStore) -> list[AgentResponse]:
    """List every registered agent."""
    agents = await registry.list_all()
    return [AgentResponse.model_validate(agent) for agent in agents]


@router.post(
    "",
    response_model=AgentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register agent",
)
async def create_agent(request: AgentCreate, registry: AgentStore) -> AgentResponse:
    """Register a new agent.

    Args:
        request: Agent registration request
        registry: Agent registry

    Returns:
        The created agent (active, zero executions)
    """
    agent = await registry.create(
        name=request.name,
        model_type=request.model_type,
        owner=request.owner,
    )
    return AgentResponse.model_validate(agent)


@router.post(
    "/batch-execute",
    response_model=BatchExecutionResult,
    summary="Execute many agents",
)
async def batch_execute(request: BatchExecuteRequest, dispatcher: Dispatcher) -> BatchExecutionResult:
    """Run every listed agent concurrently against one input.

    Per-agent failures are reported inside the results; the response
    is 200 whenever the request itself is well formed.

    Args:
        request: Batch execution request
        dispatcher: Agent dispatcher

    Returns:
        One result per requested agent ID, in request order
    """
    return await dispatcher.run_batch(
        request.agent_ids,
        request.input_data,
        timeout=request.timeout_seconds,
    )


@router.get(
    "/{agent_id}",
    response_model=AgentResponse,
    summary="Get agent",
)
async def get_agent(agent_id: str, registry: AgentStore) -> AgentResponse:
    agent = await registry.lookup(agent_id)
    if agent is None:
        raise NotFoundError("Agent", agent_id)
    return AgentResponse.model_validate(agent)


@router.patch(
    "/{agent_id}",
    response_model=AgentResponse,
    summary="Update agent",
)
async def update_agent(
    agent_id: str,
    request: AgentUpdate,
    registry: AgentStore,
) -> AgentResponse:
    """Patch an agent's activation flag.

    Args:
        agent_id: Agent identifier
        request: Patch body
        registry: Agent registry

    Returns:
        Updated agent
    """
    agent = await registry.update(agent_id, is_active=request.is_active)
    if agent is None:
        raise NotFoundError("Agent", agent_id)
    return AgentResponse.model_validate(agent)


@router.post(
    "/{agent_id}/execute",
    response_model=ExecutionResult,
    summary="Execute agent",
)
async def execute_agent(
    agent_id: str,
    request: ExecuteRequest,
    dispatcher: Dispatcher,
) -> ExecutionResult:
    """Run one agent against the input.

    An unknown or inactive agent yields a ``failed`` result, not a 404.
    """
    return await dispatcher.run_agent(
        agent_id,
        request.input_data,
        timeout=request.timeout_seconds,
    )
