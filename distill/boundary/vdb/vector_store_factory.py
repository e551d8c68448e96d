"""
Vector store factory.

Probes the configured backends once at startup, in order (default
pgvector → sqlite → memory). A backend whose driver cannot be imported or
whose connection/DDL fails is skipped with a warning; the in-memory store
is the last resort.

Dependencies: distill.boundary.vdb, distill.configs
System role: Vector store instantiation and selection
"""

import logging
from collections.abc import Awaitable, Callable

from distill.boundary.vdb.base import VectorStore
from distill.boundary.vdb.memory_store import InMemoryVectorStore
from distill.configs.settings import Settings

logger = logging.getLogger(__name__)


async def _build_pgvector(settings: Settings) -> VectorStore:
    from distill.boundary.vdb.pgvector_store import PgVectorStore

    store = PgVectorStore(settings.database, max_top_k=settings.vector_store.max_top_k)
    await store.setup()
    return store


async def _build_sqlite(settings: Settings) -> VectorStore:
    from distill.boundary.vdb.sqlite_store import SQLiteBlobVectorStore

    store = SQLiteBlobVectorStore(
        settings.vector_store.sqlite_path,
        max_top_k=settings.vector_store.max_top_k,
    )
    await store.setup()
    return store


async def _build_memory(settings: Settings) -> VectorStore:
    return InMemoryVectorStore(max_top_k=settings.vector_store.max_top_k)


BACKEND_BUILDERS: dict[str, Callable[[Settings], Awaitable[VectorStore]]] = {
    "pgvector": _build_pgvector,
    "sqlite": _build_sqlite,
    "memory": _build_memory,
}


async def create_vector_store(settings: Settings) -> VectorStore:
    """
    Select the first available vector backend.

    Args:
        settings: Application settings

    Returns:
        VectorStore: Ready-to-use backend
    """
    for name in settings.vector_store.backends:
        builder = BACKEND_BUILDERS.get(name.lower())
        if builder is None:
            logger.warning(f"{__name__}:create_vector_store - Unknown backend '{name}', skipping")
            continue
        try:
            store = await builder(settings)
        except ImportError as e:
            logger.warning(
                f"{__name__}:create_vector_store - Driver for {name} not installed ({e}), "
                "trying next backend"
            )
            continue
        except Exception as e:
            logger.warning(
                f"{__name__}:create_vector_store - Backend {name} unavailable "
                f"({type(e).__name__}: {e}), trying next backend"
            )
            continue
        logger.info(
            f"{__name__}:create_vector_store - Using {store.kind} vector store",
            extra={"backend": store.kind, "durable": store.durable},
        )
        return store

    logger.warning(f"{__name__}:create_vector_store - No configured backend available, using memory")
    return InMemoryVectorStore(max_top_k=settings.vector_store.max_top_k)
