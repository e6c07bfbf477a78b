"""Dispatch services."""

from .dispatcher import AgentDispatcher
from .schemas import (
    REASON_INACTIVE,
    REASON_NOT_FOUND,
    REASON_TIMEOUT,
    BatchExecutionResult,
    ExecutionResult,
)

__all__ = [
    "AgentDispatcher",
    "ExecutionResult",
    "BatchExecutionResult",
    "REASON_NOT_FOUND",
    "REASON_INACTIVE",
    "REASON_TIMEOUT",
]
