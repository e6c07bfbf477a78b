"""Model executor interface.

Every backend variant runs behind ``ModelExecutor.execute``, which
enforces the caller's deadline and turns backend errors into outcomes.
"""

from __future__ import annotations

import asyncio
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

import structlog

from lira.enums import BackendKind, OutcomeKind
from lira.exceptions import BackendError

logger = structlog.get_logger()


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of one backend call."""

    kind: OutcomeKind
    output: str | None = None
    confidence: float | None = None
    reason: str | None = None
    telemetry: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def succeeded(
        cls,
        output: str,
        confidence: float,
        telemetry: dict[str, Any] | None = None,
    ) -> ExecutionOutcome:
        """Build a success outcome, clamping confidence into [0, 1].

        Raises:
            BackendError: If the backend reported a non-finite confidence
        """
        value = float(confidence)
        if not math.isfinite(value):
            raise BackendError(f"Backend returned an invalid confidence: {confidence!r}")

        return cls(
            kind=OutcomeKind.SUCCEEDED,
            output=output,
            confidence=min(max(value, 0.0), 1.0),
            telemetry=telemetry or {},
        )

    @classmethod
    def failed(cls, reason: str) -> ExecutionOutcome:
        """Build a failure outcome."""
        return cls(kind=OutcomeKind.FAILED, reason=reason)

    @classmethod
    def timed_out(cls) -> ExecutionOutcome:
        """Build a timeout outcome."""
        return cls(kind=OutcomeKind.TIMEOUT, reason="timeout")

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCEEDED


class ModelExecutor(ABC):
    """Abstract base for model backends.

    Subclasses implement ``_invoke``; callers use ``execute``.
    """

    kind: ClassVar[BackendKind]

    async def execute(
        self,
        model_type: str,
        payload: str,
        timeout: float,
    ) -> ExecutionOutcome:
        """Run the bound model on the payload within the deadline.

        Args:
            model_type: Model-type identifier the agent is bound to
            payload: Raw input payload
            timeout: Seconds remaining until the deadline

        Returns:
            Success, failure or timeout outcome. Backend errors never
            propagate; task cancellation does.
        """
        if timeout <= 0:
            logger.warning(
                "executor_deadline_already_passed",
                backend=self.kind.value,
                model_type=model_type,
            )
            return ExecutionOutcome.timed_out()

        try:
            return await asyncio.wait_for(
                self._invoke(model_type, payload),
                timeout=timeout,
            )
        except TimeoutError:
            logger.warning(
                "executor_timeout",
                backend=self.kind.value,
                model_type=model_type,
                timeout=timeout,
            )
            return ExecutionOutcome.timed_out()
        except BackendError as e:
            logger.warning(
                "executor_backend_error",
                backend=self.kind.value,
                model_type=model_type,
                error=e.message,
            )
            return ExecutionOutcome.failed(e.message)
        except Exception as e:
            logger.exception(
                "executor_unexpected_error",
                backend=self.kind.value,
                model_type=model_type,
                error_type=type(e).__name__,
            )
            return ExecutionOutcome.failed(f"{type(e).__name__}: {e}")

    @abstractmethod
    async def _invoke(self, model_type: str, payload: str) -> ExecutionOutcome:
        """Call the backend without deadline handling.

        Args:
            model_type: Model-type identifier the agent is bound to
            payload: Raw input payload

        Returns:
            Outcome of the call

        Raises:
            BackendError: If the backend rejects or cannot serve the call
        """
