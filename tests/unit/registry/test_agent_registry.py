"""Agent registry tests."""

from __future__ import annotations

import asyncio
from datetime import datetime

import pytest

from lira.registry import Agent, InMemoryAgentRegistry


class TestLookup:
    """Tests for agent lookup."""

    @pytest.mark.asyncio
    async def test_returns_seeded_agent(self, registry: InMemoryAgentRegistry) -> None:
        """Finds a preloaded agent by ID."""
        agent = await registry.lookup("1")

        assert agent is not None
        assert agent.name == "Market Analyzer"
        assert agent.execution_count == 127

    @pytest.mark.asyncio
    async def test_unknown_returns_none(self, registry: InMemoryAgentRegistry) -> None:
        """Unknown IDs are not an error."""
        assert await registry.lookup("missing") is None

    @pytest.mark.asyncio
    async def test_returns_copy(self, registry: InMemoryAgentRegistry) -> None:
        """Mutating a returned record does not change the stored one."""
        agent = await registry.lookup("1")
        assert agent is not None
        agent.execution_count = 0
        agent.is_active = False

        stored = await registry.lookup("1")
        assert stored is not None
        assert stored.execution_count == 127
        assert stored.is_active is True

    @pytest.mark.asyncio
    async def test_list_all_in_registration_order(
        self,
        registry: InMemoryAgentRegistry,
    ) -> None:
        agents = await registry.list_all()

        assert [a.id for a in agents] == ["1", "2", "3", "inactive"]


class TestAdd:
    """Tests for synchronous seeding."""

    def test_duplicate_id_rejected(self, now: datetime) -> None:
        """Adding the same ID twice raises."""
        agent = Agent(id="x", name="X", model_type="GPT-4", owner="0x1", created_at=now)
        registry = InMemoryAgentRegistry([agent])

        with pytest.raises(ValueError, match="already registered"):
            registry.add(agent)


class TestCreate:
    """Tests for agent registration."""

    @pytest.mark.asyncio
    async def test_creates_active_agent_with_zero_count(self) -> None:
        registry = InMemoryAgentRegistry()

        agent = await registry.create("New Agent", "GPT-4", "0xabc")

        assert agent.id
        assert agent.is_active is True
        assert agent.execution_count == 0
        assert agent.created_at.tzinfo is not None
        assert await registry.lookup(agent.id) == agent

    @pytest.mark.asyncio
    async def test_ids_are_unique(self) -> None:
        registry = InMemoryAgentRegistry()

        first = await registry.create("A", "GPT-4", "0x1")
        second = await registry.create("A", "GPT-4", "0x1")

        assert first.id != second.id


class TestUpdate:
    """Tests for agent patching."""

    @pytest.mark.asyncio
    async def test_deactivates_agent(self, registry: InMemoryAgentRegistry) -> None:
        updated = await registry.update("1", is_active=False)

        assert updated is not None
        assert updated.is_active is False
        stored = await registry.lookup("1")
        assert stored is not None
        assert stored.is_active is False

    @pytest.mark.asyncio
    async def test_none_leaves_agent_unchanged(self, registry: InMemoryAgentRegistry) -> None:
        updated = await registry.update("1")

        assert updated is not None
        assert updated.is_active is True
        assert updated.execution_count == 127

    @pytest.mark.asyncio
    async def test_unknown_returns_none(self, registry: InMemoryAgentRegistry) -> None:
        assert await registry.update("missing", is_active=False) is None

    @pytest.mark.asyncio
    async def test_unknown_id_keeps_no_lock(self, registry: InMemoryAgentRegistry) -> None:
        """Patching unregistered IDs does not grow the lock table."""
        for i in range(5):
            await registry.update(f"missing-{i}", is_active=False)

        assert registry._locks == {}

    @pytest.mark.asyncio
    async def test_patch_racing_increments_keeps_counts(
        self,
        yielding_registry: InMemoryAgentRegistry,
    ) -> None:
        """A patch interleaved with increments does not overwrite their counts."""
        await asyncio.gather(
            yielding_registry.update("1", is_active=False),
            *(yielding_registry.increment_execution_count("1") for _ in range(5)),
        )

        agent = await yielding_registry.lookup("1")
        assert agent is not None
        assert agent.is_active is False
        assert agent.execution_count == 132


class TestIncrementExecutionCount:
    """Tests for the execution counter."""

    @pytest.mark.asyncio
    async def test_increments_by_one(self, registry: InMemoryAgentRegistry) -> None:
        updated = await registry.increment_execution_count("2")

        assert updated is not None
        assert updated.execution_count == 90

    @pytest.mark.asyncio
    async def test_only_target_changes(self, registry: InMemoryAgentRegistry) -> None:
        await registry.increment_execution_count("2")

        first = await registry.lookup("1")
        assert first is not None
        assert first.execution_count == 127

    @pytest.mark.asyncio
    async def test_concurrent_increments_are_all_counted(
        self,
        registry: InMemoryAgentRegistry,
    ) -> None:
        """Concurrent increments on one agent are serialized."""
        await asyncio.gather(*(registry.increment_execution_count("3") for _ in range(50)))

        agent = await registry.lookup("3")
        assert agent is not None
        assert agent.execution_count == 50

    @pytest.mark.asyncio
    async def test_unknown_returns_none(self, registry: InMemoryAgentRegistry) -> None:
        assert await registry.increment_execution_count("missing") is None

    @pytest.mark.asyncio
    async def test_unknown_id_keeps_no_lock(self, registry: InMemoryAgentRegistry) -> None:
        """Counting against unregistered IDs does not grow the lock table."""
        for i in range(5):
            await registry.increment_execution_count(f"missing-{i}")

        assert registry._locks == {}

    @pytest.mark.asyncio
    async def test_no_lost_updates_when_writes_suspend(
        self,
        yielding_registry: InMemoryAgentRegistry,
    ) -> None:
        """Increments stay serialized when the store yields between read and write."""
        await asyncio.gather(
            *(yielding_registry.increment_execution_count("3") for _ in range(20))
        )

        agent = await yielding_registry.lookup("3")
        assert agent is not None
        assert agent.execution_count == 20
