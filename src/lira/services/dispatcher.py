"""Agent execution dispatcher.

Runs a single agent against an input payload, or fans one payload out
across many agents concurrently and returns their outcomes in request
order.
"""

from __future__ import annotations

import asyncio
import math
import time
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import structlog

from lira.enums import OutcomeKind
from lira.exceptions import DispatchValidationError
from lira.executors.quantum import QuantumStatus

from .schemas import (
    REASON_INACTIVE,
    REASON_NOT_FOUND,
    REASON_TIMEOUT,
    BatchExecutionResult,
    ExecutionResult,
)

if TYPE_CHECKING:
    from lira.executors.quantum import QuantumOracleExecutor
    from lira.executors.router import ExecutorRouter
    from lira.registry.agents import AgentRegistry

logger = structlog.get_logger()


class AgentDispatcher:
    """Dispatcher for single and batch agent executions.

    Per-agent failures (unknown agent, inactive agent, backend error,
    timeout) are reported as failed results and never abort a batch.
    Only a malformed request raises, before anything is launched.

    Example:
        >>> dispatcher = AgentDispatcher(registry, router)
        >>> batch = await dispatcher.run_batch(["1", "2"], "ETH/USDC")
        >>> [r.status for r in batch.results]
    """

    def __init__(
        self,
        registry: AgentRegistry,
        executor: ExecutorRouter,
        quantum: QuantumOracleExecutor | None = None,
        default_timeout: float = 30.0,
        max_timeout: float = 300.0,
        max_parallel: int = 16,
        max_batch_size: int = 100,
    ) -> None:
        """Initialize dispatcher.

        Args:
            registry: Agent registry (lookup and counter increments)
            executor: Router over the model executors
            quantum: Quantum executor used for status probes
            default_timeout: Per-agent deadline in seconds when none is given
            max_timeout: Largest per-agent deadline a caller may request
            max_parallel: Maximum concurrent executions within one batch
            max_batch_size: Maximum agent IDs accepted in one batch
        """
        self.registry = registry
        self.executor = executor
        self.quantum = quantum
        self.default_timeout = default_timeout
        self.max_timeout = max_timeout
        self.max_parallel = max_parallel
        self.max_batch_size = max_batch_size

    async def run_agent(
        self,
        agent_id: str,
        payload: str | None,
        timeout: float | None = None,
    ) -> ExecutionResult:
        """Execute one agent against the payload.

        Args:
            agent_id: Agent to run
            payload: Raw input payload
            timeout: Per-agent deadline in seconds (default from settings)

        Returns:
            Succeeded or failed execution result

        Raises:
            DispatchValidationError: If the request is malformed
        """
        if not agent_id:
            raise DispatchValidationError("agent_id is required")
        payload = self._validate_payload(payload)
        timeout = self._resolve_timeout(timeout)

        return await self._execute(agent_id, payload, timeout)

    async def run_batch(
        self,
        agent_ids: Sequence[str] | None,
        payload: str | None,
        timeout: float | None = None,
    ) -> BatchExecutionResult:
        """Execute many agents concurrently against one payload.

        Duplicate IDs run as independent executions. The batch completes
        when the slowest member reaches a terminal state; each member is
        bounded by its own deadline.

        Args:
            agent_ids: Ordered agent IDs (duplicates allowed)
            payload: Raw input payload shared by every execution
            timeout: Per-agent deadline in seconds (default from settings)

        Returns:
            Results in request order, one per requested ID

        Raises:
            DispatchValidationError: If the request is malformed
        """
        if not agent_ids:
            raise DispatchValidationError("agent_ids must contain at least one agent ID")
        if len(agent_ids) > self.max_batch_size:
            raise DispatchValidationError(
                f"Batch of {len(agent_ids)} agents exceeds the limit of {self.max_batch_size}"
            )
        if any(not agent_id for agent_id in agent_ids):
            raise DispatchValidationError("agent_ids must not contain empty IDs")
        payload = self._validate_payload(payload)
        timeout = self._resolve_timeout(timeout)

        ids = list(agent_ids)
        semaphore = asyncio.Semaphore(self.max_parallel)
        results: list[ExecutionResult | None] = [None] * len(ids)
        started = time.perf_counter()

        logger.info(
            "batch_execution_started",
            batch_size=len(ids),
            unique_agents=len(set(ids)),
            timeout=timeout,
            max_parallel=self.max_parallel,
        )

        async def run_slot(index: int) -> None:
            async with semaphore:
                results[index] = await self._execute(ids[index], payload, timeout)

        outcomes = await asyncio.gather(
            *(run_slot(index) for index in range(len(ids))),
            return_exceptions=True,
        )

        for index, outcome in enumerate(outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.error(
                    "batch_slot_crashed",
                    index=index,
                    agent_id=ids[index],
                    error_type=type(outcome).__name__,
                    error=str(outcome),
                )
                results[index] = ExecutionResult.failure(
                    ids[index],
                    f"internal error: {type(outcome).__name__}",
                )

        batch = BatchExecutionResult(results=[r for r in results if r is not None])

        logger.info(
            "batch_execution_completed",
            batch_size=len(batch),
            succeeded=batch.succeeded_count,
            failed=batch.failed_count,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )

        return batch

    async def probe_quantum_status(self) -> QuantumStatus:
        """Read the quantum oracle's current health.

        Returns:
            Current oracle status (``down`` when no oracle is configured)
        """
        if self.quantum is None:
            return QuantumStatus.down()
        return await self.quantum.status()

    async def _execute(self, agent_id: str, payload: str, timeout: float) -> ExecutionResult:
        """Resolve, run and record one agent execution.

        Args:
            agent_id: Agent to run
            payload: Validated input payload
            timeout: Validated per-agent deadline in seconds

        Returns:
            Execution result
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        started = time.perf_counter()

        agent = await self.registry.lookup(agent_id)
        if agent is None:
            logger.info("agent_execution_rejected", agent_id=agent_id, reason=REASON_NOT_FOUND)
            return ExecutionResult.failure(agent_id, REASON_NOT_FOUND)

        if not agent.is_active:
            logger.info("agent_execution_rejected", agent_id=agent_id, reason=REASON_INACTIVE)
            return ExecutionResult.failure(agent_id, REASON_INACTIVE)

        backend = self.executor.resolve_kind(agent.model_type)
        outcome = await self.executor.execute(
            agent.model_type,
            payload,
            deadline - loop.time(),
        )
        duration_ms = int((time.perf_counter() - started) * 1000)

        if outcome.kind is OutcomeKind.TIMEOUT:
            logger.warning(
                "agent_execution_timeout",
                agent_id=agent_id,
                backend=backend.value,
                timeout=timeout,
            )
            return ExecutionResult.failure(
                agent_id, REASON_TIMEOUT, backend=backend, duration_ms=duration_ms
            )

        if not outcome.is_success:
            logger.warning(
                "agent_execution_failed",
                agent_id=agent_id,
                backend=backend.value,
                reason=outcome.reason,
            )
            return ExecutionResult.failure(
                agent_id,
                outcome.reason or "backend failure",
                backend=backend,
                duration_ms=duration_ms,
            )

        result = ExecutionResult.success(
            agent_id,
            output=outcome.output or "",
            confidence=outcome.confidence if outcome.confidence is not None else 0.0,
            timestamp=datetime.now(UTC),
            backend=backend,
            telemetry=outcome.telemetry,
            duration_ms=duration_ms,
        )

        updated = await self.registry.increment_execution_count(agent_id)
        if updated is None:
            logger.warning("execution_count_not_recorded", agent_id=agent_id)

        logger.info(
            "agent_execution_succeeded",
            agent_id=agent_id,
            backend=backend.value,
            confidence=outcome.confidence,
            duration_ms=duration_ms,
            execution_count=updated.execution_count if updated else None,
        )

        return result

    def _validate_payload(self, payload: str | None) -> str:
        if payload is None or payload == "":
            raise DispatchValidationError("input_data is required")
        if not isinstance(payload, str):
            raise DispatchValidationError("input_data must be a string")
        return payload

    def _resolve_timeout(self, timeout: float | None) -> float:
        if timeout is None:
            return self.default_timeout
        if not math.isfinite(timeout) or timeout <= 0:
            raise DispatchValidationError("timeout must be a finite number greater than zero")
        if timeout > self.max_timeout:
            raise DispatchValidationError(
                f"timeout of {timeout}s exceeds the maximum of {self.max_timeout}s"
            )
        return timeout
