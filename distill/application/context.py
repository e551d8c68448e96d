"""
Application context.

Every piece of shared mutable state (settings, live corpus, embedding chain
and cache, vector backend, generator, indexer) lives on one AppContext
built at startup and handed to the services and the API. There are no
module-level singletons besides the cached settings.

Dependencies: distill.boundary, distill.core, distill.configs
System role: Composition root
"""

import logging
from dataclasses import dataclass

from distill.boundary.embeddings.bedrock_embeddings import BedrockEmbeddingTier
from distill.boundary.embeddings.google_embeddings import GoogleEmbeddingTier
from distill.boundary.llm.generator import GenerativeClient
from distill.boundary.state.json_state_store import JsonStateStore
from distill.boundary.vdb.base import VectorStore
from distill.boundary.vdb.vector_store_factory import create_vector_store
from distill.configs.settings import Settings
from distill.core.citations.citation_picker import CitationPicker
from distill.core.embeddings.cache import EmbeddingCache
from distill.core.embeddings.local_hash import LocalHashEmbedder
from distill.core.embeddings.provider import EmbeddingProvider
from distill.core.embeddings.results import EmbeddingTier
from distill.core.flow.orchestrator import FlowOrchestrator, TextGenerator
from distill.core.retrieval.indexer import CorpusIndexer
from distill.core.retrieval.retriever import Retriever
from distill.models.corpus import CorpusState

logger = logging.getLogger(__name__)


def build_embedding_tiers(settings: Settings) -> list[EmbeddingTier]:
    """Remote A (Gemini) → remote B (Bedrock Titan) → local hashing."""
    config = settings.embeddings
    return [
        GoogleEmbeddingTier(
            model=config.google_model,
            dimension=config.google_dimension,
            api_key=config.google_api_key.get_secret_value() if config.google_api_key else None,
            enabled=config.google_enabled,
            attempts=config.transport_attempts,
        ),
        BedrockEmbeddingTier(
            model_id=config.bedrock_model_id,
            region=config.bedrock_region,
            enabled=config.bedrock_enabled,
            attempts=config.transport_attempts,
        ),
        LocalHashEmbedder(dimension=config.local_dimension),
    ]


@dataclass
class AppContext:
    """Shared state of one running application."""

    settings: Settings
    corpus: CorpusState
    state_store: JsonStateStore
    cache: EmbeddingCache
    provider: EmbeddingProvider
    vector_store: VectorStore
    generator: TextGenerator
    indexer: CorpusIndexer
    retriever: Retriever
    picker: CitationPicker
    orchestrator: FlowOrchestrator

    def save(self) -> None:
        self.state_store.save(self.corpus)

    async def close(self) -> None:
        await self.vector_store.close()


def assemble_context(
    settings: Settings,
    corpus: CorpusState,
    state_store: JsonStateStore,
    vector_store: VectorStore,
    tiers: list[EmbeddingTier],
    generator: TextGenerator,
) -> AppContext:
    """
    Wire components together from already-built collaborators.

    Tests use this directly with fake tiers and generators.
    """
    cache = EmbeddingCache(
        capacity=settings.embeddings.cache_capacity,
        key_chars=settings.embeddings.cache_key_chars,
    )
    provider = EmbeddingProvider(tiers, cache=cache)
    indexer = CorpusIndexer(
        corpus,
        provider,
        vector_store,
        state_store=state_store,
        batch_size=settings.embeddings.batch_size,
    )
    retrieval = settings.retrieval
    retriever = Retriever(
        provider,
        vector_store,
        indexer,
        min_top_k=retrieval.min_top_k,
        max_top_k=min(retrieval.max_top_k, settings.vector_store.max_top_k),
    )
    picker = CitationPicker(
        keyword_count=retrieval.citation_keywords,
        snippet_chars=retrieval.citation_snippet_chars,
        max_citations=retrieval.max_citations,
    )
    orchestrator = FlowOrchestrator(
        retriever,
        generator,
        picker,
        context_query=retrieval.flow_query,
        context_k=retrieval.flow_top_k,
        min_output_chars=settings.generation.min_output_chars,
    )
    return AppContext(
        settings=settings,
        corpus=corpus,
        state_store=state_store,
        cache=cache,
        provider=provider,
        vector_store=vector_store,
        generator=generator,
        indexer=indexer,
        retriever=retriever,
        picker=picker,
        orchestrator=orchestrator,
    )


async def build_context(settings: Settings) -> AppContext:
    """
    Build the application context at startup.

    Loads the corpus snapshot, probes vector backends once and brings the
    selected backend in line with the persisted chunk vectors.

    Args:
        settings: Application settings

    Returns:
        AppContext: Ready context
    """
    state_store = JsonStateStore(settings.state.data_file)
    corpus = state_store.load()
    vector_store = await create_vector_store(settings)
    context = assemble_context(
        settings,
        corpus,
        state_store,
        vector_store,
        tiers=build_embedding_tiers(settings),
        generator=GenerativeClient(settings.generation),
    )
    await context.indexer.sync_store()
    logger.info(
        f"{__name__}:build_context - Context ready",
        extra={
            "sources": len(corpus.sources),
            "backend": vector_store.kind,
            "providers": context.provider.provider_ids,
            "index": corpus.index.model_dump() if corpus.index else None,
        },
    )
    return context
