"""Request schemas for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from lira.enums import BackendKind

DEFAULT_OWNER = "0x0000000000000000000000000000000000000000"


class AgentCreate(BaseModel):
    """Request schema for registering an agent."""

    model_config = ConfigDict(protected_namespaces=())

    name: str = Field(..., min_length=1, max_length=200, description="Agent display name")
    model_type: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Model identifier the agent is bound to (model ID or name)",
    )
    owner: str = Field(
        default=DEFAULT_OWNER,
        max_length=200,
        description="Owning wallet address",
    )


class AgentUpdate(BaseModel):
    """Request schema for patching an agent."""

    is_active: bool | None = Field(
        default=None,
        description="Activation flag; inactive agents are never executed",
    )


class ExecuteRequest(BaseModel):
    """Request schema for running a single agent.

    Input is validated by the dispatcher so that single and batch
    executions reject malformed input the same way.
    """

    input_data: str | None = Field(default=None, description="Input payload for the agent")
    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Per-agent deadline in seconds (server default when omitted)",
    )


class BatchExecuteRequest(BaseModel):
    """Request schema for running many agents against one input."""

    agent_ids: list[str] = Field(
        default_factory=list,
        description="Ordered agent IDs; duplicates run as independent executions",
    )
    input_data: str | None = Field(default=None, description="Input shared by every agent")
    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Per-agent deadline in seconds (server default when omitted)",
    )


class ModelCreate(BaseModel):
    """Request schema for registering a model."""

    name: str = Field(..., min_length=1, max_length=200)
    type: BackendKind = Field(..., description="Backend kind serving the model")
    description: str = Field(default="", max_length=2000)
    version: str = Field(default="1.0", max_length=50)


class ModelUpdate(BaseModel):
    """Request schema for updating a model. Type and ID are immutable."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)


class QuantumPredictRequest(BaseModel):
    """Request schema for a direct oracle prediction."""

    data: str = Field(..., min_length=1, description="Input passed to the oracle")


class OptimizeLaunchRequest(BaseModel):
    """Request schema for token launch optimization."""

    initial_price: float = Field(..., gt=0)
    liquidity_target: float = Field(..., gt=0)
    volatility: float = Field(..., ge=0)
