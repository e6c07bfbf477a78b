"""Executor router for backend selection.

Resolves an agent's model-type identifier to a backend kind and hands
the call to the executor registered for that kind.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import structlog

from lira.enums import BackendKind

from .base import ExecutionOutcome, ModelExecutor

if TYPE_CHECKING:
    from lira.registry.catalog import ModelCatalog

logger = structlog.get_logger()


class ExecutorRouter:
    """Router selecting a model executor by backend kind."""

    def __init__(
        self,
        executors: Mapping[BackendKind, ModelExecutor],
        catalog: ModelCatalog | None = None,
        quantum_prefixes: Iterable[str] = ("quantum",),
    ) -> None:
        """Initialize executor router.

        Args:
            executors: One executor per backend kind
            catalog: Optional model catalog consulted first for the kind
            quantum_prefixes: Model-type prefixes treated as quantum when
                the catalog has no matching model
        """
        self.executors = dict(executors)
        self.catalog = catalog
        self.quantum_prefixes = tuple(p.casefold() for p in quantum_prefixes if p)

    def resolve_kind(self, model_type: str) -> BackendKind:
        """Determine which backend serves a model-type identifier.

        Args:
            model_type: Identifier bound to the agent

        Returns:
            Catalog model type if the identifier names a known model,
            otherwise quantum for configured prefixes, else language
        """
        if self.catalog is not None:
            model = self.catalog.find(model_type)
            if model is not None:
                return model.type

        if model_type.strip().casefold().startswith(self.quantum_prefixes):
            return BackendKind.QUANTUM
        return BackendKind.LANGUAGE

    def select(self, model_type: str) -> ModelExecutor | None:
        """Get the executor for a model-type identifier, if any."""
        return self.executors.get(self.resolve_kind(model_type))

    async def execute(
        self,
        model_type: str,
        payload: str,
        timeout: float,
    ) -> ExecutionOutcome:
        """Run the payload on whichever backend serves ``model_type``.

        Args:
            model_type: Identifier bound to the agent
            payload: Raw input payload
            timeout: Seconds remaining until the deadline

        Returns:
            Backend outcome, or a failure if no executor serves the kind
        """
        kind = self.resolve_kind(model_type)
        executor = self.executors.get(kind)
        if executor is None:
            logger.warning("executor_not_registered", backend=kind.value, model_type=model_type)
            return ExecutionOutcome.failed(f"no executor registered for backend '{kind.value}'")

        return await executor.execute(model_type, payload, timeout)
