"""
Corpus indexer.

Keeps chunk vectors, the active vector backend and the recorded corpus
embedding identity (provider, dim, epoch) consistent:

- All vectors in the corpus come from one provider with one dimensionality.
- When a query arrives with a different identity, every prior vector is
  discarded (chunk vectors cleared, backend reset), the epoch is bumped and
  the corpus is re-embedded pinned to the new provider.
- Embedding runs in sequential batches; after each batch the backend upsert
  completes and the snapshot is saved, so a failure loses at most one batch.

Dependencies: distill.core.embeddings, distill.boundary.vdb
System role: Embedding lifecycle for the corpus
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Protocol

from distill.boundary.vdb.base import VectorStore
from distill.boundary.vdb.vector_schemas import VectorStoreRecord
from distill.core.embeddings.provider import EmbeddingProvider
from distill.core.exceptions import VectorStoreError
from distill.models.chunk import Chunk
from distill.models.corpus import CorpusState
from distill.models.embedding import IndexState
from distill.models.source import Source

logger = logging.getLogger(__name__)


class StateSaver(Protocol):
    def save(self, state: CorpusState) -> None: ...


def iter_chunks(sources: Iterable[Source]) -> list[Chunk]:
    return [chunk for source in sources for chunk in source.chunks]


class CorpusIndexer:
    """Batch embedding, invalidation and backend synchronisation."""

    def __init__(
        self,
        corpus: CorpusState,
        provider: EmbeddingProvider,
        store: VectorStore,
        state_store: StateSaver | None = None,
        batch_size: int = 32,
    ) -> None:
        """
        Initialize indexer.

        Args:
            corpus: Live corpus (mutated in place)
            provider: Embedding fallback chain
            store: Active vector backend
            state_store: Snapshot persistence, saved after every batch
            batch_size: Chunks per embedding call
        """
        self.corpus = corpus
        self.provider = provider
        self.store = store
        self.state_store = state_store
        self.batch_size = max(1, batch_size)
        self._epoch = corpus.index.epoch if corpus.index else 0

    @property
    def index(self) -> IndexState | None:
        return self.corpus.index

    @property
    def epoch(self) -> int:
        return self._epoch

    def pending_chunks(self, sources: Iterable[Source] | None = None) -> list[Chunk]:
        """Chunks without a vector compatible with the recorded identity."""
        chunks = iter_chunks(self.corpus.sources if sources is None else sources)
        if self.index is None:
            return [chunk for chunk in chunks if chunk.vector is None]
        dim = self.index.dim
        return [chunk for chunk in chunks if chunk.vector is None or len(chunk.vector) != dim]

    def embedded_count(self) -> int:
        return sum(1 for chunk in iter_chunks(self.corpus.sources) if chunk.vector is not None)

    def _save(self) -> None:
        if self.state_store is not None:
            self.state_store.save(self.corpus)

    async def invalidate(self, reason: str) -> None:
        """
        Discard every vector and start a new epoch with no identity.

        Args:
            reason: Logged cause of the invalidation
        """
        previous = self.index
        self._epoch += 1
        for chunk in iter_chunks(self.corpus.sources):
            chunk.vector = None
        self.corpus.index = None
        try:
            await self.store.reset()
        except VectorStoreError as e:
            logger.error(f"{__name__}:invalidate - Backend reset failed: {e}")
        self._save()
        logger.warning(
            f"{__name__}:invalidate - Vectors discarded ({reason}), epoch {self._epoch}",
            extra={
                "previous_provider": previous.provider if previous else None,
                "previous_dim": previous.dim if previous else None,
                "epoch": self._epoch,
            },
        )

    async def align(self, provider_id: str, dim: int) -> bool:
        """
        Make the corpus identity match a query vector's identity.

        Returns:
            bool: True when prior vectors were invalidated
        """
        if self.index is not None and self.index.matches(provider_id, dim):
            return False
        invalidated = False
        if self.index is not None:
            await self.invalidate(
                f"{self.index.provider}/{self.index.dim} -> {provider_id}/{dim}"
            )
            invalidated = True
        elif self.embedded_count():
            await self.invalidate("vectors without recorded identity")
            invalidated = True
        self.corpus.index = IndexState(provider=provider_id, dim=dim, epoch=self._epoch)
        return invalidated

    async def embed_chunks(self, chunks: Sequence[Chunk]) -> int:
        """
        Embed chunks in sequential batches.

        Batches are pinned to the recorded provider. Without an identity the
        first batch walks the fallback chain and its provider becomes the
        corpus identity. Embedding stops at the first failed batch, leaving
        the remaining chunks pending.

        Returns:
            int: Number of chunks embedded
        """
        embedded = 0
        for start in range(0, len(chunks), self.batch_size):
            batch = list(chunks[start:start + self.batch_size])
            pinned = self.index.provider if self.index else None
            result = await self.provider.embed([chunk.text for chunk in batch], provider_id=pinned)
            if not result.ok:
                logger.warning(
                    f"{__name__}:embed_chunks - Batch failed on {result.provider} "
                    f"({result.reason.value}), {len(chunks) - embedded} chunks left pending"
                )
                break
            vectors = result.batch
            if self.index is None:
                self.corpus.index = IndexState(
                    provider=vectors.provider, dim=vectors.dim, epoch=self._epoch
                )
                logger.info(
                    f"{__name__}:embed_chunks - Corpus identity set to {vectors.provider}/{vectors.dim}",
                    extra={"epoch": self._epoch},
                )
            elif not self.index.matches(vectors.provider, vectors.dim):
                logger.error(
                    f"{__name__}:embed_chunks - Pinned batch returned "
                    f"{vectors.provider}/{vectors.dim}, expected {self.index.provider}/{self.index.dim}"
                )
                break

            for chunk, vector in zip(batch, vectors.vectors):
                chunk.vector = vector
            await self._upsert(batch)
            self._save()
            embedded += len(batch)
        return embedded

    async def _upsert(self, chunks: Sequence[Chunk]) -> None:
        records = [
            VectorStoreRecord(
                chunk_id=chunk.id,
                source_id=chunk.source_id,
                text=chunk.text,
                vector=chunk.vector,
            )
            for chunk in chunks
            if chunk.vector is not None
        ]
        try:
            await self.store.upsert(records)
        except VectorStoreError as e:
            logger.error(
                f"{__name__}:_upsert - Backend upsert failed, vectors kept in memory: {e}",
                extra={"backend": self.store.kind, "records": len(records)},
            )

    async def backfill(self, sources: Iterable[Source] | None = None) -> int:
        """Embed pending chunks of the given sources (all sources when None)."""
        pending = self.pending_chunks(sources)
        if not pending:
            return 0
        logger.info(f"{__name__}:backfill - Embedding {len(pending)} pending chunks")
        return await self.embed_chunks(pending)

    async def index_source(self, source: Source) -> int:
        """Embed a newly ingested source when the corpus already has an identity."""
        if self.index is None:
            return 0
        return await self.embed_chunks(source.chunks)

    async def rebuild(self) -> int:
        """Discard all vectors and re-embed the whole corpus."""
        await self.invalidate("rebuild requested")
        return await self.embed_chunks(iter_chunks(self.corpus.sources))

    async def sync_store(self) -> None:
        """
        Repopulate the backend from chunk vectors when their counts differ.

        Called at startup: a fresh in-memory backend or a replaced database
        file is brought back in line with the persisted snapshot.
        """
        embedded = [chunk for chunk in iter_chunks(self.corpus.sources) if chunk.vector is not None]
        try:
            stored = await self.store.count()
        except Exception as e:
            logger.error(f"{__name__}:sync_store - Backend count failed ({type(e).__name__}): {e}")
            return
        if stored == len(embedded):
            return
        logger.info(
            f"{__name__}:sync_store - Backend holds {stored} records, corpus has "
            f"{len(embedded)} vectors; repopulating"
        )
        try:
            await self.store.reset()
        except VectorStoreError as e:
            logger.error(f"{__name__}:sync_store - Backend reset failed: {e}")
            return
        for start in range(0, len(embedded), self.batch_size):
            await self._upsert(embedded[start:start + self.batch_size])
