"""
In-memory vector backend.

Process-local dictionary keyed by chunk id with linear-scan cosine ranking.
Used when no durable backend is reachable and in tests.

Dependencies: numpy (via distill.core.retrieval.similarity)
System role: Non-durable vector store
"""

from collections.abc import Sequence

from distill.boundary.vdb.base import VectorStore
from distill.boundary.vdb.vector_schemas import VectorSearchResult, VectorStoreRecord
from distill.core.retrieval.similarity import rank_by_cosine


class InMemoryVectorStore(VectorStore):
    """Dictionary-backed vector store."""

    kind = "memory"
    durable = False

    def __init__(self, max_top_k: int = 20) -> None:
        super().__init__(max_top_k)
        self._records: dict[str, VectorStoreRecord] = {}

    async def upsert(self, records: Sequence[VectorStoreRecord]) -> int:
        for record in records:
            self._records[record.chunk_id] = record
        return len(records)

    async def query_top_k(
        self,
        source_ids: list[str] | None,
        vector: list[float],
        k: int,
    ) -> list[VectorSearchResult]:
        allowed = set(source_ids) if source_ids is not None else None
        candidates = (
            (record, record.vector)
            for record in self._records.values()
            if allowed is None or record.source_id in allowed
        )
        ranked = rank_by_cosine(candidates, vector, self._limit(k))
        return [
            VectorSearchResult(
                chunk_id=record.chunk_id,
                source_id=record.source_id,
                content=record.text,
                similarity_score=score,
            )
            for record, score in ranked
        ]

    async def count(self) -> int:
        return len(self._records)

    async def reset(self) -> None:
        self._records.clear()
