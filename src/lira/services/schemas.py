"""Execution result schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, computed_field

from lira.enums import BackendKind, ExecutionStatus

REASON_NOT_FOUND = "agent not found"
REASON_INACTIVE = "agent inactive"
REASON_TIMEOUT = "timeout"


class ExecutionResult(BaseModel):
    """Outcome of running one agent.

    Success entries carry ``output``, ``confidence`` and ``timestamp``;
    failure entries carry ``reason``.
    """

    agent_id: str
    status: ExecutionStatus
    output: str | None = None
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    timestamp: datetime | None = None
    reason: str | None = None
    backend: BackendKind | None = None
    telemetry: dict[str, Any] = Field(default_factory=dict)
    duration_ms: int | None = Field(default=None, ge=0)

    @property
    def succeeded(self) -> bool:
        return self.status is ExecutionStatus.SUCCEEDED

    @classmethod
    def success(
        cls,
        agent_id: str,
        output: str,
        confidence: float,
        timestamp: datetime,
        backend: BackendKind | None = None,
        telemetry: dict[str, Any] | None = None,
        duration_ms: int | None = None,
    ) -> ExecutionResult:
        return cls(
            agent_id=agent_id,
            status=ExecutionStatus.SUCCEEDED,
            output=output,
            confidence=confidence,
            timestamp=timestamp,
            backend=backend,
            telemetry=telemetry or {},
            duration_ms=duration_ms,
        )

    @classmethod
    def failure(
        cls,
        agent_id: str,
        reason: str,
        backend: BackendKind | None = None,
        duration_ms: int | None = None,
    ) -> ExecutionResult:
        return cls(
            agent_id=agent_id,
            status=ExecutionStatus.FAILED,
            reason=reason,
            backend=backend,
            duration_ms=duration_ms,
        )


class BatchExecutionResult(BaseModel):
    """Ordered per-agent outcomes of a batch.

    ``results[i]`` answers the i-th requested agent ID.
    """

    results: list[ExecutionResult]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded_count(self) -> int:
        return sum(1 for result in self.results if result.succeeded)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed_count(self) -> int:
        return len(self.results) - self.succeeded_count

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index: int) -> ExecutionResult:
        return self.results[index]
