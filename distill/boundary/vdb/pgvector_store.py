"""
Columnar vector-indexed backend (PostgreSQL + pgvector).

Vectors live in a pgvector column; ranking is delegated to the database
with ORDER BY cosine distance and an optional source filter. Similarity is
reported as 1 - cosine distance.

Dependencies: sqlalchemy, asyncpg, pgvector
System role: Production vector store
"""

import logging
from collections.abc import Sequence

from pgvector.asyncpg import register_vector
from sqlalchemy import delete, event, func, select, text
from sqlalchemy.dialects.postgresql import insert as pg_insert

from distill.boundary.db.base import Base
from distill.boundary.db.connection import get_async_session_factory, get_postgres_engine
from distill.boundary.db.models.vector_record_model import PgVectorRecord
from distill.boundary.vdb.base import VectorStore
from distill.boundary.vdb.vector_schemas import VectorSearchResult, VectorStoreRecord
from distill.configs.database import DatabaseSettings
from distill.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class PgVectorStore(VectorStore):
    """Vector store backed by a pgvector table."""

    kind = "pgvector"
    durable = True

    def __init__(self, db_config: DatabaseSettings, max_top_k: int = 20) -> None:
        super().__init__(max_top_k)
        self._db_config = db_config
        self._engine = get_postgres_engine(db_config)
        self._session_factory = get_async_session_factory(self._engine)

    async def setup(self) -> None:
        """
        Ensure the extension and table exist, then register the vector codec.

        The codec can only be registered once the extension exists, so the
        bootstrap connection is discarded before the connect hook is added.

        Raises:
            Exception: Any connection or DDL failure (the factory moves on)
        """
        try:
            async with self._engine.begin() as conn:
                await conn.execute(text("CREATE EXTENSION IF NOT EXISTS vector"))
                await conn.run_sync(
                    Base.metadata.create_all, tables=[PgVectorRecord.__table__]
                )
            await self._engine.dispose()
        except Exception:
            await self._engine.dispose()
            raise

        @event.listens_for(self._engine.sync_engine, "connect")
        def _register_vector(dbapi_connection, connection_record):
            dbapi_connection.run_async(register_vector)

        logger.info(
            f"{__name__}:setup - pgvector table ready on "
            f"{self._db_config.host}:{self._db_config.port}/{self._db_config.db}"
        )

    async def upsert(self, records: Sequence[VectorStoreRecord]) -> int:
        if not records:
            return 0
        rows = [
            {
                "chunk_id": record.chunk_id,
                "source_id": record.source_id,
                "text": record.text,
                "embedding": record.vector,
                "dim": record.dim,
                "created_at": record.updated_at,
                "updated_at": record.updated_at,
            }
            for record in records
        ]
        stmt = pg_insert(PgVectorRecord)
        stmt = stmt.on_conflict_do_update(
            index_elements=[PgVectorRecord.chunk_id],
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
            raise VectorStoreError(f"pgvector upsert failed: {e}", operation="upsert") from e
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

        distance = PgVectorRecord.embedding.cosine_distance(vector).label("distance")
        stmt = select(
            PgVectorRecord.chunk_id,
            PgVectorRecord.source_id,
            PgVectorRecord.text,
            distance,
        ).where(PgVectorRecord.dim == len(vector))
        if source_ids is not None:
            stmt = stmt.where(PgVectorRecord.source_id.in_(source_ids))
        stmt = stmt.order_by(distance).limit(limit)

        try:
            async with self._session_factory() as session:
                rows = (await session.execute(stmt)).all()
        except Exception as e:
            raise VectorStoreError(f"pgvector query failed: {e}", operation="query") from e

        return [
            VectorSearchResult(
                chunk_id=row.chunk_id,
                source_id=row.source_id,
                content=row.text,
                similarity_score=1.0 - float(row.distance),
            )
            for row in rows
        ]

    async def count(self) -> int:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(func.count()).select_from(PgVectorRecord))
                return int(result.scalar_one())
        except Exception as e:
            raise VectorStoreError(f"pgvector count failed: {e}", operation="count") from e

    async def reset(self) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(delete(PgVectorRecord))
                await session.commit()
        except Exception as e:
            raise VectorStoreError(f"pgvector reset failed: {e}", operation="reset") from e
        logger.info(f"{__name__}:reset - pgvector table cleared")

    async def close(self) -> None:
        await self._engine.dispose()
