"""Model catalog tests."""

from __future__ import annotations

import pytest

from lira.enums import BackendKind
from lira.registry import InMemoryModelCatalog


class TestFind:
    """Tests for identifier resolution."""

    def test_by_id(self, catalog: InMemoryModelCatalog) -> None:
        model = catalog.find("2")

        assert model is not None
        assert model.type is BackendKind.QUANTUM

    def test_by_name_case_insensitive(self, catalog: InMemoryModelCatalog) -> None:
        model = catalog.find("quantum predictor")

        assert model is not None
        assert model.id == "2"

    def test_unknown(self, catalog: InMemoryModelCatalog) -> None:
        assert catalog.find("GPT-4") is None


class TestCrud:
    """Tests for model CRUD operations."""

    @pytest.mark.asyncio
    async def test_list_all(self, catalog: InMemoryModelCatalog) -> None:
        models = await catalog.list_all()

        assert [m.name for m in models] == ["GPT-4 Turbo", "Quantum Predictor"]

    @pytest.mark.asyncio
    async def test_get_unknown(self, catalog: InMemoryModelCatalog) -> None:
        assert await catalog.get("missing") is None

    @pytest.mark.asyncio
    async def test_create_defaults_version(self) -> None:
        catalog = InMemoryModelCatalog()

        model = await catalog.create("Llama", BackendKind.LANGUAGE, "Open weights")

        assert model.version == "1.0"
        assert await catalog.get(model.id) == model

    @pytest.mark.asyncio
    async def test_update_name_and_description(self, catalog: InMemoryModelCatalog) -> None:
        """Only name and description change."""
        updated = await catalog.update("1", name="GPT-4o", description="Omni model")

        assert updated is not None
        assert updated.name == "GPT-4o"
        assert updated.description == "Omni model"
        assert updated.type is BackendKind.LANGUAGE
        assert updated.version == "1.0"

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, catalog: InMemoryModelCatalog) -> None:
        updated = await catalog.update("2", description="Updated")

        assert updated is not None
        assert updated.name == "Quantum Predictor"
        assert updated.description == "Updated"

    @pytest.mark.asyncio
    async def test_update_unknown(self, catalog: InMemoryModelCatalog) -> None:
        assert await catalog.update("missing", name="x") is None

    def test_add_duplicate_rejected(self, catalog: InMemoryModelCatalog) -> None:
        model = catalog.find("1")
        assert model is not None

        with pytest.raises(ValueError):
            catalog.add(model)
