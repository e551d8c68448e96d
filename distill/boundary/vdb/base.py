"""
Vector store contract.

Every backend keeps one record per chunk id and answers cosine top-k
queries restricted to a set of sources. Records whose dimensionality
differs from the query are never compared.

Dependencies: distill.boundary.vdb.vector_schemas
System role: Interface between retrieval and vector backends
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from distill.boundary.vdb.vector_schemas import VectorSearchResult, VectorStoreRecord


class VectorStore(ABC):
    """Abstract vector backend."""

    kind: str = "abstract"
    durable: bool = False

    def __init__(self, max_top_k: int = 20) -> None:
        self.max_top_k = max_top_k

    async def setup(self) -> None:
        """Prepare storage (connect, create tables). Raises when unavailable."""

    @abstractmethod
    async def upsert(self, records: Sequence[VectorStoreRecord]) -> int:
        """
        Insert or replace records by chunk id.

        Returns:
            int: Number of records written
        """

    @abstractmethod
    async def query_top_k(
        self,
        source_ids: list[str] | None,
        vector: list[float],
        k: int,
    ) -> list[VectorSearchResult]:
        """
        Return up to k records most similar to `vector`.

        Args:
            source_ids: Restrict to these sources (None means all)
            vector: Query vector
            k: Requested result count, capped at max_top_k
        """

    @abstractmethod
    async def count(self) -> int:
        """Number of stored records."""

    @abstractmethod
    async def reset(self) -> None:
        """Remove every record."""

    async def close(self) -> None:
        """Release connections."""

    def _limit(self, k: int) -> int:
        return max(0, min(k, self.max_top_k))
