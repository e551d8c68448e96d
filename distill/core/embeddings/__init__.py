"""Embedding fallback chain, local hashing tier and query cache."""

from distill.core.embeddings.cache import EmbeddingCache
from distill.core.embeddings.local_hash import LOCAL_DIMENSION, LocalHashEmbedder
from distill.core.embeddings.provider import EmbeddingProvider
from distill.core.embeddings.results import EmbeddingResult, EmbeddingTier, FailureReason

__all__ = [
    "EmbeddingCache",
    "EmbeddingProvider",
    "EmbeddingResult",
    "EmbeddingTier",
    "FailureReason",
    "LOCAL_DIMENSION",
    "LocalHashEmbedder",
]
