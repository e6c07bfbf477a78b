"""Model catalog.

Stores model definitions and resolves the identifiers agents are bound to.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

import structlog

from lira.enums import BackendKind

from .models import Model

logger = structlog.get_logger()


class ModelCatalog(Protocol):
    """Interface for model lookup and CRUD."""

    async def list_all(self) -> list[Model]: ...

    async def get(self, model_id: str) -> Model | None: ...

    def find(self, identifier: str) -> Model | None: ...

    async def create(
        self,
        name: str,
        type: BackendKind,
        description: str = "",
        version: str = "1.0",
    ) -> Model: ...

    async def update(
        self,
        model_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> Model | None: ...


class InMemoryModelCatalog:
    """Process-local model catalog."""

    def __init__(self, models: Iterable[Model] = ()) -> None:
        self._models: dict[str, Model] = {}
        for model in models:
            self.add(model)

    def add(self, model: Model) -> None:
        """Store an already-built model record.

        Raises:
            ValueError: If a model with the same ID exists
        """
        if model.id in self._models:
            raise ValueError(f"Model '{model.id}' already registered")
        self._models[model.id] = replace(model)

    async def list_all(self) -> list[Model]:
        return [replace(model) for model in self._models.values()]

    async def get(self, model_id: str) -> Model | None:
        model = self._models.get(model_id)
        return replace(model) if model is not None else None

    def find(self, identifier: str) -> Model | None:
        """Resolve a model by ID or by case-insensitive name.

        Synchronous because backend selection happens on every execution
        and only needs an in-memory read.

        Args:
            identifier: Model ID or display name

        Returns:
            Matching model, or None
        """
        if identifier in self._models:
            return replace(self._models[identifier])

        wanted = identifier.strip().casefold()
        for model in self._models.values():
            if model.name.casefold() == wanted:
                return replace(model)
        return None

    async def create(
        self,
        name: str,
        type: BackendKind,
        description: str = "",
        version: str = "1.0",
    ) -> Model:
        """Register a new model.

        Args:
            name: Display name
            type: Backend kind
            description: Free-form description
            version: Version string

        Returns:
            The created model
        """
        model = Model(
            id=str(uuid4()),
            name=name,
            type=type,
            version=version,
            description=description,
            created_at=datetime.now(UTC),
        )
        self._models[model.id] = model

        logger.info("model_registered", model_id=model.id, name=name, type=type.value)
        return replace(model)

    async def update(
        self,
        model_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> Model | None:
        """Update a model's name and/or description.

        Identity, type and version are immutable here.

        Returns:
            Updated model, or None if unknown
        """
        current = self._models.get(model_id)
        if current is None:
            return None

        changes: dict[str, str] = {}
        if name is not None:
            changes["name"] = name
        if description is not None:
            changes["description"] = description

        if changes:
            current = replace(current, **changes)
            self._models[model_id] = current
            logger.info("model_updated", model_id=model_id, fields=sorted(changes))

        return replace(current)
