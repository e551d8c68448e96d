"""
Test suite for IndexService.

System role: Verification of index maintenance
"""

import pytest

from distill.application.services.index_service import IndexService
from distill.boundary.vdb.memory_store import InMemoryVectorStore
from distill.core.exceptions import VectorStoreError


class UnreachableCountStore(InMemoryVectorStore):
    """In-memory store whose record count always fails."""

    async def count(self) -> int:
        raise VectorStoreError("Blob count failed: database is locked", operation="count")


class TestIndexService:
    """Test suite for IndexService."""

    @pytest.mark.asyncio
    async def test_rebuild_should_embed_every_chunk_in_a_new_epoch(self, make_context, animals_corpus) -> None:
        # Arrange
        context = make_context(corpus=animals_corpus)
        await context.retriever.retrieve("cats", animals_corpus.sources, 4)
        first_epoch = context.indexer.epoch

        # Act
        response = await IndexService(context).rebuild()

        # Assert
        assert response.epoch == first_epoch + 1
        assert response.embedded_chunks == 4
        assert response.pending_chunks == 0
        assert response.provider == "local:trigram-fnv1a-768"
        assert response.dim == 768
        assert response.backend == "memory"
        assert await context.vector_store.count() == 4

    @pytest.mark.asyncio
    async def test_rebuild_with_failing_tier_should_leave_chunks_pending(
        self, make_context, animals_corpus, tier_factory
    ) -> None:
        context = make_context(tiers=[tier_factory("remote:a", 8, available=False)], corpus=animals_corpus)

        response = await IndexService(context).rebuild()

        assert response.embedded_chunks == 0
        assert response.pending_chunks == 4
        assert response.provider is None

    @pytest.mark.asyncio
    async def test_status_should_report_backend_and_identity(self, make_context, animals_corpus) -> None:
        context = make_context(corpus=animals_corpus)
        before = await IndexService(context).status()
        await context.retriever.retrieve("dogs", animals_corpus.sources, 4)

        after = await IndexService(context).status()

        assert before == {
            "backend": "memory",
            "durable": False,
            "records": 0,
            "pending_chunks": 4,
            "index": None,
        }
        assert after["records"] == 4
        assert after["pending_chunks"] == 0
        assert after["index"]["dim"] == 768

    @pytest.mark.asyncio
    async def test_status_should_raise_store_error_when_count_fails(self, make_context, animals_corpus) -> None:
        context = make_context(corpus=animals_corpus, store=UnreachableCountStore())

        with pytest.raises(VectorStoreError) as exc_info:
            await IndexService(context).status()

        assert exc_info.value.details == {"operation": "count"}
