"""Enums shared across the dispatch service."""

from enum import Enum


class BackendKind(str, Enum):
    """Model backend families an agent can be bound to."""

    LANGUAGE = "language"
    QUANTUM = "quantum"


class OutcomeKind(str, Enum):
    """Terminal state of a single model executor call."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TIMEOUT = "timeout"


class ExecutionStatus(str, Enum):
    """Per-agent execution status reported to callers."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


class QuantumHealth(str, Enum):
    """Quantum oracle health levels."""

    OPERATIONAL = "operational"
    DEGRADED = "degraded"
    DOWN = "down"


class ExecutorMode(str, Enum):
    """Which backend implementations the container wires up."""

    SIMULATED = "simulated"
    LIVE = "live"
