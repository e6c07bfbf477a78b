"""Pydantic schemas for API request/response validation."""

from .requests import (
    DEFAULT_OWNER,
    AgentCreate,
    AgentUpdate,
    BatchExecuteRequest,
    ExecuteRequest,
    ModelCreate,
    ModelUpdate,
    OptimizeLaunchRequest,
    QuantumPredictRequest,
)
from .responses import AgentResponse, ErrorResponse, HealthResponse, ModelResponse

__all__ = [
    # Requests
    "DEFAULT_OWNER",
    "AgentCreate",
    "AgentUpdate",
    "ExecuteRequest",
    "BatchExecuteRequest",
    "ModelCreate",
    "ModelUpdate",
    "QuantumPredictRequest",
    "OptimizeLaunchRequest",
    # Responses
    "AgentResponse",
    "ModelResponse",
    "HealthResponse",
    "ErrorResponse",
]
