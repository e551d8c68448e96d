"""
Test suite for CorpusIndexer.

Covers identity recording, batch embedding, invalidation epochs and
backend synchronisation.

System role: Verification of the corpus embedding lifecycle
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from distill.boundary.vdb.memory_store import InMemoryVectorStore
from distill.core.embeddings.local_hash import LocalHashEmbedder
from distill.core.embeddings.provider import EmbeddingProvider
from distill.core.exceptions import VectorStoreError
from distill.core.retrieval.indexer import CorpusIndexer, iter_chunks
from distill.models.corpus import CorpusState


@pytest.fixture
def store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


class TestEmbedChunks:
    """Test suite for batch embedding."""

    @pytest.mark.asyncio
    async def test_first_batch_should_set_identity(self, animals_corpus, store) -> None:
        indexer = CorpusIndexer(animals_corpus, EmbeddingProvider([LocalHashEmbedder()]), store, batch_size=3)

        embedded = await indexer.backfill()

        assert embedded == 4
        assert animals_corpus.index.provider == "local:trigram-fnv1a-768"
        assert animals_corpus.index.dim == 768
        assert await store.count() == 4
        assert indexer.pending_chunks() == []

    @pytest.mark.asyncio
    async def test_batches_should_be_pinned_to_identity(self, animals_corpus, store, tier_factory) -> None:
        """Once A sets the identity, later batches never fall through to B."""
        # Arrange
        remote_a = tier_factory("remote-a", 1536)
        remote_b = tier_factory("remote-b", 1024)
        indexer = CorpusIndexer(animals_corpus, EmbeddingProvider([remote_a, remote_b]), store, batch_size=1)
        await indexer.embed_chunks(iter_chunks(animals_corpus.sources)[:1])
        remote_a.available = False

        # Act
        embedded = await indexer.backfill()

        # Assert
        assert embedded == 0
        assert remote_b.calls == []
        assert len(indexer.pending_chunks()) == 3

    @pytest.mark.asyncio
    async def test_state_should_be_saved_after_each_batch(self, animals_corpus, store) -> None:
        state_store = MagicMock()
        indexer = CorpusIndexer(
            animals_corpus, EmbeddingProvider([LocalHashEmbedder()]), store, state_store=state_store, batch_size=2
        )

        await indexer.backfill()

        assert state_store.save.call_count == 2

    @pytest.mark.asyncio
    async def test_upsert_failure_should_keep_vectors_in_memory(self, animals_corpus) -> None:
        failing = InMemoryVectorStore()
        failing.upsert = AsyncMock(side_effect=VectorStoreError("down", operation="upsert"))
        indexer = CorpusIndexer(animals_corpus, EmbeddingProvider([LocalHashEmbedder()]), failing)

        embedded = await indexer.backfill()

        assert embedded == 4
        assert all(c.vector is not None for c in iter_chunks(animals_corpus.sources))


class TestAlignAndInvalidate:
    """Test suite for identity alignment."""

    @pytest.mark.asyncio
    async def test_matching_identity_should_not_invalidate(self, animals_corpus, store) -> None:
        indexer = CorpusIndexer(animals_corpus, EmbeddingProvider([LocalHashEmbedder()]), store)
        await indexer.backfill()

        changed = await indexer.align("local:trigram-fnv1a-768", 768)

        assert changed is False
        assert await store.count() == 4

    @pytest.mark.asyncio
    async def test_mismatch_should_clear_vectors_reset_store_and_bump_epoch(
        self, animals_corpus, store
    ) -> None:
        # Arrange
        indexer = CorpusIndexer(animals_corpus, EmbeddingProvider([LocalHashEmbedder()]), store)
        await indexer.backfill()
        epoch_before = indexer.epoch

        # Act
        changed = await indexer.align("remote-a", 1536)

        # Assert
        assert changed is True
        assert indexer.epoch == epoch_before + 1
        assert animals_corpus.index.provider == "remote-a"
        assert animals_corpus.index.dim == 1536
        assert animals_corpus.index.epoch == indexer.epoch
        assert all(c.vector is None for c in iter_chunks(animals_corpus.sources))
        assert await store.count() == 0

    @pytest.mark.asyncio
    async def test_rebuild_should_reembed_everything(self, animals_corpus, store) -> None:
        indexer = CorpusIndexer(animals_corpus, EmbeddingProvider([LocalHashEmbedder()]), store)
        await indexer.backfill()

        embedded = await indexer.rebuild()

        assert embedded == 4
        assert indexer.epoch == 1
        assert await store.count() == 4


class TestSyncStore:
    """Test suite for startup backend synchronisation."""

    @pytest.mark.asyncio
    async def test_should_repopulate_empty_backend(self, animals_corpus, store) -> None:
        provider = EmbeddingProvider([LocalHashEmbedder()])
        await CorpusIndexer(animals_corpus, provider, InMemoryVectorStore()).backfill()
        restarted = CorpusIndexer(animals_corpus, provider, store)

        await restarted.sync_store()

        assert await store.count() == 4

    @pytest.mark.asyncio
    async def test_index_source_should_wait_for_identity(self, source_factory, store) -> None:
        source = source_factory("s1", "S", "One.\n\nTwo.")
        corpus = CorpusState(sources=[source])
        indexer = CorpusIndexer(corpus, EmbeddingProvider([LocalHashEmbedder()]), store)

        assert await indexer.index_source(source) == 0
        assert corpus.index is None
