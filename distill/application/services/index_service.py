"""
Index service orchestrator.

Full corpus re-embedding and vector backend status.

Dependencies: distill.core.retrieval
System role: Index maintenance use case orchestration
"""

import logging

from distill.application.context import AppContext
from distill.models.common import IndexRebuildResponse

logger = logging.getLogger(__name__)


class IndexService:
    """Index service orchestrator."""

    def __init__(self, context: AppContext) -> None:
        self.context = context

    async def rebuild(self) -> IndexRebuildResponse:
        """Discard every vector and re-embed the whole corpus in batches."""
        indexer = self.context.indexer
        embedded = await indexer.rebuild()
        pending = len(indexer.pending_chunks())
        index = self.context.corpus.index
        logger.info(
            f"{__name__}:rebuild - Re-embedded {embedded} chunks, {pending} pending",
            extra={"epoch": indexer.epoch},
        )
        return IndexRebuildResponse(
            provider=index.provider if index else None,
            dim=index.dim if index else None,
            epoch=indexer.epoch,
            embedded_chunks=embedded,
            pending_chunks=pending,
            backend=self.context.vector_store.kind,
        )

    async def status(self) -> dict:
        store = self.context.vector_store
        index = self.context.corpus.index
        return {
            "backend": store.kind,
            "durable": store.durable,
            "records": await store.count(),
            "pending_chunks": len(self.context.indexer.pending_chunks()),
            "index": index.model_dump() if index else None,
        }
