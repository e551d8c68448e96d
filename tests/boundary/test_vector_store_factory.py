"""
Test suite for vector backend selection.

System role: Verification of startup backend probing
"""

from unittest.mock import AsyncMock, patch

import pytest

from distill.boundary.vdb import vector_store_factory
from distill.boundary.vdb.memory_store import InMemoryVectorStore
from distill.boundary.vdb.vector_store_factory import create_vector_store


def with_backends(settings, *backends: str):
    settings.vector_store.backends = list(backends)
    return settings


class TestCreateVectorStore:
    """Test suite for create_vector_store."""

    @pytest.mark.asyncio
    async def test_should_use_memory_when_configured(self, settings) -> None:
        store = await create_vector_store(with_backends(settings, "memory"))

        assert isinstance(store, InMemoryVectorStore)

    @pytest.mark.asyncio
    async def test_should_fall_back_to_sqlite_when_pgvector_unreachable(self, settings) -> None:
        """A failing probe is skipped, the next backend is used."""
        # Arrange
        failing = AsyncMock(side_effect=OSError("connection refused"))
        builders = {**vector_store_factory.BACKEND_BUILDERS, "pgvector": failing}

        # Act
        with patch.dict(vector_store_factory.BACKEND_BUILDERS, builders):
            store = await create_vector_store(with_backends(settings, "pgvector", "sqlite", "memory"))

        # Assert
        try:
            failing.assert_awaited_once()
            assert store.kind == "sqlite"
            assert store.durable is True
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_missing_driver_should_be_skipped(self, settings) -> None:
        missing = AsyncMock(side_effect=ImportError("No module named 'pgvector'"))

        with patch.dict(vector_store_factory.BACKEND_BUILDERS, {"pgvector": missing}):
            store = await create_vector_store(with_backends(settings, "pgvector", "memory"))

        assert store.kind == "memory"

    @pytest.mark.asyncio
    async def test_unknown_and_exhausted_backends_should_end_in_memory(self, settings) -> None:
        broken = AsyncMock(side_effect=RuntimeError("boom"))

        with patch.dict(vector_store_factory.BACKEND_BUILDERS, {"sqlite": broken}):
            store = await create_vector_store(with_backends(settings, "redis", "sqlite"))

        assert isinstance(store, InMemoryVectorStore)
        assert store.max_top_k == settings.vector_store.max_top_k
