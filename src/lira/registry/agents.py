"""Agent registry.

Key-value store of agent records. The dispatcher only needs ``lookup``
and ``increment_execution_count``; the rest serves registry CRUD.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

import structlog

from .models import Agent

logger = structlog.get_logger()


class AgentRegistry(Protocol):
    """Read/write interface the dispatcher and API consume."""

    async def lookup(self, agent_id: str) -> Agent | None: ...

    async def list_all(self) -> list[Agent]: ...

    async def create(self, name: str, model_type: str, owner: str) -> Agent: ...

    async def update(self, agent_id: str, *, is_active: bool | None = None) -> Agent | None: ...

    async def increment_execution_count(self, agent_id: str) -> Agent | None: ...


class InMemoryAgentRegistry:
    """Process-local agent registry.

    Counter increments are serialized per agent ID, so concurrent
    successful executions of the same agent are all counted. There is
    no registry-wide lock.
    """

    def __init__(self, agents: Iterable[Agent] = ()) -> None:
        """Initialize registry.

        Args:
            agents: Records to preload (e.g. demo seed data)
        """
        self._agents: dict[str, Agent] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        for agent in agents:
            self.add(agent)

    def add(self, agent: Agent) -> None:
        """Store an already-built agent record.

        Args:
            agent: Agent to store

        Raises:
            ValueError: If an agent with the same ID exists
        """
        if agent.id in self._agents:
            raise ValueError(f"Agent '{agent.id}' already registered")
        self._agents[agent.id] = replace(agent)

    async def lookup(self, agent_id: str) -> Agent | None:
        """Get agent by ID.

        Args:
            agent_id: Agent identifier

        Returns:
            Copy of the agent record, or None if unknown
        """
        agent = self._agents.get(agent_id)
        return replace(agent) if agent is not None else None

    async def list_all(self) -> list[Agent]:
        """List all agents in registration order."""
        return [replace(agent) for agent in self._agents.values()]

    async def create(self, name: str, model_type: str, owner: str) -> Agent:
        """Register a new agent.

        Args:
            name: Display name
            model_type: Bound model-type identifier
            owner: Owning principal

        Returns:
            The created agent (active, zero executions)
        """
        agent = Agent(
            id=str(uuid4()),
            name=name,
            model_type=model_type,
            owner=owner,
            created_at=datetime.now(UTC),
        )
        await self._store(agent)

        logger.info(
            "agent_registered",
            agent_id=agent.id,
            model_type=model_type,
            owner=owner,
        )
        return replace(agent)

    async def update(self, agent_id: str, *, is_active: bool | None = None) -> Agent | None:
        """Apply a patch to an agent.

        Only activation can change; identity, binding and the execution
        counter are not patchable.

        Args:
            agent_id: Agent identifier
            is_active: New activation flag (None leaves it unchanged)

        Returns:
            Updated agent, or None if unknown
        """
        if agent_id not in self._agents:
            return None

        async with self._lock_for(agent_id):
            current = self._agents[agent_id]
            if is_active is not None and is_active != current.is_active:
                current = replace(current, is_active=is_active)
                await self._store(current)
                logger.info("agent_activation_changed", agent_id=agent_id, is_active=is_active)
            return replace(current)

    async def increment_execution_count(self, agent_id: str) -> Agent | None:
        """Atomically add one succeeded execution to an agent's counter.

        Args:
            agent_id: Agent identifier

        Returns:
            Updated agent, or None if unknown
        """
        if agent_id not in self._agents:
            return None

        async with self._lock_for(agent_id):
            current = self._agents[agent_id]
            updated = replace(current, execution_count=current.execution_count + 1)
            await self._store(updated)
            return replace(updated)

    async def _store(self, agent: Agent) -> None:
        """Write a record back to the store."""
        self._agents[agent.id] = agent

    def _lock_for(self, agent_id: str) -> asyncio.Lock:
        # Registered IDs only; created lazily so the lock binds to the first loop using it
        return self._locks.setdefault(agent_id, asyncio.Lock())
