"""
Deterministic local embedding tier.

Character trigrams of the lowercased text are hashed with FNV-1a, folded
into a fixed-width vector and L2-normalized. Same text and parameters
always give the same vector, with no network involved, so vectors issued
at different times stay comparable.

Dependencies: numpy
System role: Offline last tier of the embedding fallback chain
"""

import numpy as np

from distill.core.embeddings.results import EmbeddingResult
from distill.core.retrieval.similarity import l2_normalize
from distill.models.embedding import EmbeddingBatch

LOCAL_DIMENSION = 768

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193


def fnv1a_32(gram: str) -> int:
    value = _FNV_OFFSET
    for char in gram:
        value ^= ord(char)
        value = (value * _FNV_PRIME) & 0xFFFFFFFF
    return value


def trigrams(text: str) -> list[str]:
    """Overlapping character trigrams; shorter non-empty texts are one gram."""
    lowered = text.lower()
    if len(lowered) < 3:
        return [lowered] if lowered else []
    return [lowered[i : i + 3] for i in range(len(lowered) - 2)]


class LocalHashEmbedder:
    """Trigram hashing embedder that never fails."""

    def __init__(self, dimension: int = LOCAL_DIMENSION) -> None:
        self.dimension = dimension
        self.provider_id = f"local:trigram-fnv1a-{dimension}"

    def embed_text(self, text: str) -> list[float]:
        vector = np.zeros(self.dimension, dtype=np.float64)
        for gram in trigrams(text):
            vector[fnv1a_32(gram) % self.dimension] += 1.0
        return l2_normalize(vector).tolist()

    async def embed(self, texts: list[str]) -> EmbeddingResult:
        return EmbeddingResult.success(
            EmbeddingBatch(
                vectors=[self.embed_text(text) for text in texts],
                dim=self.dimension,
                provider=self.provider_id,
            )
        )
