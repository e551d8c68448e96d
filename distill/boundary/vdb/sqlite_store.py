"""
Durable blob-table vector backend (SQLite).

Single-file table of chunk rows with vectors packed as float32 bytes.
Upserts use INSERT ... ON CONFLICT DO UPDATE; queries load the matching
rows and rank them by linear-scan cosine in numpy.

Dependencies: sqlalchemy, aiosqlite, numpy
System role: Durable local vector store
"""

import logging
from collections.abc import Sequence

import numpy as np
from sqlalchemy import delete, func, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncEngine

from distill.boundary.db.base import Base
from distill.boundary.db.connection import get_async_session_factory, get_sqlite_engine
from distill.boundary.db.models.vector_record_model import BlobVectorRecord
from distill.boundary.vdb.base import VectorStore
from distill.boundary.vdb.vector_schemas import VectorSearchResult, VectorStoreRecord
from distill.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


def pack_vector(vector: Sequence[float]) -> bytes:
    return np.asarray(vector, dtype=np.float32).tobytes()


def unpack_vector(blob: bytes) -> np.ndarray:
    return np.frombuffer(blob, dtype=np.float32)


def cosine_scores(matrix: np.ndarray, query: np.ndarray) -> np.ndarray:
    """Row-wise cosine similarity, 0.0 where either norm is zero."""
    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
    dots = matrix @ query
    with np.errstate(divide="ignore", invalid="ignore"):
        scores = np.where(norms > 0, dots / norms, 0.0)
    return scores


class SQLiteBlobVectorStore(VectorStore):
    """Vector store persisted in a single SQLite file."""

    kind = "sqlite"
    durable = True

    def __init__(self, path: str, max_top_k: int = 20, engine: AsyncEngine | None = None) -> None:
        """
        Initialize SQLite blob store.

        Args:
            path: Database file path
            max_top_k: Result ceiling per query
            engine: Pre-built engine (tests)
        """
        super().__init__(max_top_k)
        self.path = path
        self._engine = engine or get_sqlite_engine(path)
        self._session_factory = get_async_session_factory(self._engine)

    async def setup(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(
                Base.metadata.create_all, tables=[BlobVectorRecord.__table__]
            )
        logger.info(f"{__name__}:setup - Blob table ready at {self.path}")

    async def upsert(self, records: Sequence[VectorStoreRecord]) -> int:
        if not records:
            return 0
        rows = [
            {
                "chunk_id": record.chunk_id,
                "source_id": record.source_id,
                "text": record.text,
                "embedding": pack_vector(record.vector),
                "dim": record.dim,
                "created_at": record.updated_at,
                "updated_at": record.updated_at,
            }
            for record in records
        ]
        stmt = sqlite_insert(BlobVectorRecord)
        stmt = stmt.on_conflict_do_update(
            index_elements=[BlobVectorRecord.chunk_id],
            set_={
                "source_id": stmt.excluded.source_id,
                "text": stmt.excluded.text,
                "embedding": stmt.excluded.embedding,
                "dim": stmt.excluded.dim,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        try:
            async with self._session_factory() as session:
                await session.execute(stmt, rows)
                await session.commit()
        except Exception as e:
            raise VectorStoreError(f"Blob upsert failed: {e}", operation="upsert") from e
        return len(rows)

    async def query_top_k(
        self,
        source_ids: list[str] | None,
        vector: list[float],
        k: int,
    ) -> list[VectorSearchResult]:
        limit = self._limit(k)
        if limit == 0 or source_ids == []:
            return []

        stmt = select(
            BlobVectorRecord.chunk_id,
            BlobVectorRecord.source_id,
            BlobVectorRecord.text,
            BlobVectorRecord.embedding,
        ).where(BlobVectorRecord.dim == len(vector))
        if source_ids is not None:
            stmt = stmt.where(BlobVectorRecord.source_id.in_(source_ids))
        stmt = stmt.order_by(BlobVectorRecord.created_at, BlobVectorRecord.chunk_id)

        try:
            async with self._session_factory() as session:
                rows = (await session.execute(stmt)).all()
        except Exception as e:
            raise VectorStoreError(f"Blob query failed: {e}", operation="query") from e

        if not rows:
            return []

        matrix = np.vstack([unpack_vector(row.embedding) for row in rows])
        scores = cosine_scores(matrix, np.asarray(vector, dtype=np.float32))
        order = np.argsort(-scores, kind="stable")[:limit]
        return [
            VectorSearchResult(
                chunk_id=rows[i].chunk_id,
                source_id=rows[i].source_id,
                content=rows[i].text,
                similarity_score=float(scores[i]),
            )
            for i in order
        ]

    async def count(self) -> int:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(func.count()).select_from(BlobVectorRecord))
                return int(result.scalar_one())
        except Exception as e:
            raise VectorStoreError(f"Blob count failed: {e}", operation="count") from e

    async def reset(self) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(delete(BlobVectorRecord))
                await session.commit()
        except Exception as e:
            raise VectorStoreError(f"Blob reset failed: {e}", operation="reset") from e
        logger.info(f"{__name__}:reset - Blob table cleared")

    async def close(self) -> None:
        await self._engine.dispose()
