"""
Shared test fixtures and configuration for entire test suite.

Provides: offline settings, fake embedding tiers, fake generator, sample
sources, context factory
Dependencies: pytest, pytest-asyncio
System role: Test infrastructure and fixture management
"""

from collections.abc import Callable

import pytest

from distill.application.context import AppContext, assemble_context
from distill.boundary.state.json_state_store import JsonStateStore
from distill.boundary.vdb.base import VectorStore
from distill.boundary.vdb.memory_store import InMemoryVectorStore
from distill.configs.embeddings import EmbeddingSettings
from distill.configs.generation import GenerationSettings
from distill.configs.settings import Settings
from distill.configs.state import StateSettings
from distill.configs.vector_store import VectorStoreSettings
from distill.core.embeddings.local_hash import LocalHashEmbedder
from distill.core.embeddings.results import EmbeddingResult, FailureReason
from distill.core.text.chunker import split_paragraphs
from distill.models.chunk import Chunk
from distill.models.corpus import CorpusState
from distill.models.embedding import EmbeddingBatch
from distill.models.source import Source, SourceType


class FakeEmbeddingTier:
    """Embedding tier with a switchable transport and call recording.

    Vectors come from trigram hashing at the configured width so similarity
    still tracks lexical overlap.
    """

    def __init__(self, provider_id: str, dimension: int, available: bool = True) -> None:
        self.provider_id = provider_id
        self.dimension = dimension
        self.available = available
        self.calls: list[list[str]] = []
        self._hasher = LocalHashEmbedder(dimension)

    async def embed(self, texts: list[str]) -> EmbeddingResult:
        self.calls.append(list(texts))
        if not self.available:
            return EmbeddingResult.failure(self.provider_id, FailureReason.TRANSPORT_ERROR)
        return EmbeddingResult.success(
            EmbeddingBatch(
                vectors=[self._hasher.embed_text(text) for text in texts],
                dim=self.dimension,
                provider=self.provider_id,
            )
        )


class FakeGenerator:
    """Generator returning queued outputs, then None."""

    def __init__(self, outputs: list[str | None] | None = None) -> None:
        self.outputs = list(outputs or [])
        self.calls: list[dict] = []

    async def generate(self, system, user, expect="text"):
        self.calls.append({"system": system, "user": user, "expect": expect})
        return self.outputs.pop(0) if self.outputs else None


def make_source(source_id: str, name: str, text: str) -> Source:
    """Build a source with paragraph chunks, as ingestion would."""
    chunks = [
        Chunk(id=f"{source_id}_chk{i}", index=i, text=paragraph, source_id=source_id)
        for i, paragraph in enumerate(split_paragraphs(text))
    ]
    return Source(id=source_id, type=SourceType.TEXT, name=name, text=text, chunks=chunks)


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Offline settings: remote tiers disabled, memory backend, temp files."""
    return Settings(
        embeddings=EmbeddingSettings(google_enabled=False, bedrock_enabled=False, batch_size=4),
        generation=GenerationSettings(google_enabled=False, bedrock_enabled=False),
        vector_store=VectorStoreSettings(
            backends=["memory"],
            sqlite_path=str(tmp_path / "vectors.db"),
        ),
        state=StateSettings(data_file=str(tmp_path / "data.json")),
    )


@pytest.fixture
def tier_factory() -> type[FakeEmbeddingTier]:
    return FakeEmbeddingTier


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def generator_factory() -> type[FakeGenerator]:
    return FakeGenerator


@pytest.fixture
def source_factory() -> Callable[[str, str, str], Source]:
    return make_source


@pytest.fixture
def pets_source() -> Source:
    """Two-paragraph source about cats and dogs."""
    return make_source("src_pets", "Pets", "Cats are mammals.\n\nDogs are mammals too.")


@pytest.fixture
def animals_corpus() -> CorpusState:
    """Two sources with clearly separated topics."""
    cats = make_source(
        "src_cats",
        "Cats",
        "Cats are small carnivorous felines that purr.\n\n"
        "Cats eat fish and mice and sleep most of the day.",
    )
    dogs = make_source(
        "src_dogs",
        "Dogs",
        "Dogs are loyal canines that bark at strangers.\n\n"
        "Dogs fetch balls and guard the house.",
    )
    return CorpusState(sources=[cats, dogs])


@pytest.fixture
def make_context(settings: Settings) -> Callable[..., AppContext]:
    """
    Factory for application contexts wired with test collaborators.

    Defaults: local hashing tier only, in-memory backend, generator that
    always returns None, JSON state under tmp_path.
    """

    def _make(
        tiers: list | None = None,
        generator=None,
        store: VectorStore | None = None,
        corpus: CorpusState | None = None,
    ) -> AppContext:
        return assemble_context(
            settings,
            corpus if corpus is not None else CorpusState(),
            JsonStateStore(settings.state.data_file),
            store if store is not None else InMemoryVectorStore(),
            tiers=tiers if tiers is not None else [LocalHashEmbedder()],
            generator=generator if generator is not None else FakeGenerator(),
        )

    return _make
