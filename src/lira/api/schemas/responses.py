"""Response schemas for API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from lira.enums import BackendKind


class AgentResponse(BaseModel):
    """Response schema for agent data."""

    id: str
    name: str
    model_type: str
    owner: str
    created_at: datetime
    execution_count: int = 0
    is_active: bool = True

    model_config = ConfigDict(from_attributes=True, protected_namespaces=())


class ModelResponse(BaseModel):
    """Response schema for model data."""

    id: str
    name: str
    type: BackendKind
    version: str
    description: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "0.1.0"


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error: str = Field(description="Error message")
    detail: str | None = Field(default=None, description="Detailed error information")
    code: str = Field(description="Error code (e.g., HTTP_404)")
    request_id: str = Field(description="Request ID for tracking")
