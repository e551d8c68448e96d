"""
Retrieval cascade.

Resolves a query vector through the embedding chain, keeps the corpus
identity aligned with it, backfills pending chunks, then ranks chunks with
the first tier that yields candidates:

    durable backend (pgvector or sqlite) → attached in-memory vectors → TF-IDF

When no query vector can be produced the cascade goes straight to TF-IDF.

Dependencies: distill.core.embeddings, distill.core.retrieval, distill.boundary.vdb
System role: RAG retrieval business logic
"""

import logging
from dataclasses import dataclass, field

from distill.boundary.vdb.base import VectorStore
from distill.core.embeddings.provider import EmbeddingProvider
from distill.core.exceptions import VectorStoreError
from distill.core.retrieval.indexer import CorpusIndexer, iter_chunks
from distill.core.retrieval.similarity import rank_by_cosine
from distill.core.retrieval.tfidf import SparseRetrievalEngine
from distill.models.chunk import Chunk
from distill.models.source import Source

logger = logging.getLogger(__name__)

TIER_NONE = "none"
TIER_MEMORY = "memory"
TIER_TFIDF = "tfidf"


@dataclass
class RetrievalResult:
    """Ranked chunks and the tier that produced them."""

    chunks: list[Chunk] = field(default_factory=list)
    tier: str = TIER_NONE


class Retriever:
    """Ranks chunks of candidate sources for a query."""

    def __init__(
        self,
        provider: EmbeddingProvider,
        store: VectorStore,
        indexer: CorpusIndexer,
        min_top_k: int = 4,
        max_top_k: int = 20,
    ) -> None:
        """
        Initialize retriever.

        Args:
            provider: Embedding chain used for query vectors
            store: Active vector backend
            indexer: Corpus indexer (alignment and backfill)
            min_top_k: Lower clamp for k
            max_top_k: Upper clamp for k, further capped by the backend
        """
        self.provider = provider
        self.store = store
        self.indexer = indexer
        self.min_top_k = min_top_k
        self.max_top_k = min(max_top_k, store.max_top_k)

    def clamp_k(self, k: int | None) -> int:
        if k is None:
            k = self.min_top_k
        return max(self.min_top_k, min(k, self.max_top_k))

    async def retrieve(
        self,
        query: str,
        sources: list[Source],
        k: int | None = None,
    ) -> RetrievalResult:
        """
        Retrieve the top-k chunks for a query.

        Args:
            query: Query text
            sources: Candidate sources
            k: Result-size hint, clamped to [min_top_k, ceiling]

        Returns:
            RetrievalResult: Chunks in rank order and the producing tier
        """
        k = self.clamp_k(k)
        chunks = iter_chunks(sources)
        if not chunks:
            return RetrievalResult()

        index = self.indexer.index
        embedded = await self.provider.embed_query(
            query, trusted_provider=index.provider if index is not None else None
        )
        if not embedded.ok:
            logger.warning(
                f"{__name__}:retrieve - No query vector ({embedded.reason.value}), using TF-IDF"
            )
            return self._sparse(query, chunks, k)

        vector = embedded.batch.vectors[0]
        if await self.indexer.align(embedded.batch.provider, embedded.batch.dim):
            await self.indexer.backfill()
        await self.indexer.backfill(sources)

        if self.store.durable and self.indexer.index is not None:
            ranked = await self._query_backend(vector, sources, chunks, k)
            if ranked:
                return RetrievalResult(chunks=ranked, tier=self.store.kind)

        ranked = [chunk for chunk, _ in rank_by_cosine(((c, c.vector) for c in chunks), vector, k)]
        if ranked:
            return RetrievalResult(chunks=ranked, tier=TIER_MEMORY)

        return self._sparse(query, chunks, k)

    async def _query_backend(
        self,
        vector: list[float],
        sources: list[Source],
        chunks: list[Chunk],
        k: int,
    ) -> list[Chunk]:
        try:
            results = await self.store.query_top_k([s.id for s in sources], vector, k)
        except VectorStoreError as e:
            logger.error(
                f"{__name__}:_query_backend - {self.store.kind} query failed, cascading: {e}"
            )
            return []
        by_id = {chunk.id: chunk for chunk in chunks}
        return [by_id[r.chunk_id] for r in results if r.chunk_id in by_id]

    def _sparse(self, query: str, chunks: list[Chunk], k: int) -> RetrievalResult:
        ranked = SparseRetrievalEngine(chunks).rank(query, k)
        return RetrievalResult(chunks=ranked, tier=TIER_TFIDF if ranked else TIER_NONE)
