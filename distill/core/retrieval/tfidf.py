"""
Sparse TF-IDF retrieval.

Fallback of last resort: needs no vectors, only chunk text. IDF is fitted
over exactly the chunks under consideration; query terms missing from the
fitted vocabulary contribute nothing (no smoothing).

Dependencies: math, distill.core.text
System role: Retrieval tier that always has an answer
"""

import math
from collections import Counter
from collections.abc import Sequence

from distill.core.text.chunker import tokenize
from distill.models.chunk import Chunk


def build_idf(texts: Sequence[str]) -> dict[str, float]:
    """idf(t) = ln(1 + N / (1 + df(t))) over the given texts."""
    n_docs = len(texts) or 1
    document_frequency: Counter[str] = Counter()
    for text in texts:
        document_frequency.update(set(tokenize(text)))
    return {
        term: math.log(1 + n_docs / (1 + df))
        for term, df in document_frequency.items()
    }


def vectorize(text: str, idf: dict[str, float]) -> dict[str, float]:
    """Augmented term frequency times IDF; terms outside `idf` are dropped."""
    tf = Counter(tokenize(text))
    max_tf = max(tf.values(), default=0) or 1
    return {
        term: (0.5 + 0.5 * (count / max_tf)) * idf[term]
        for term, count in tf.items()
        if idf.get(term)
    }


def sparse_cosine(a: dict[str, float], b: dict[str, float]) -> float:
    dot = sum(weight * b.get(term, 0.0) for term, weight in a.items())
    norm_a = sum(weight * weight for weight in a.values())
    norm_b = sum(weight * weight for weight in b.values())
    if not norm_a or not norm_b:
        return 0.0
    return dot / math.sqrt(norm_a * norm_b)


class SparseRetrievalEngine:
    """TF-IDF cosine ranking over a fixed chunk corpus."""

    def __init__(self, chunks: Sequence[Chunk]) -> None:
        self._chunks = list(chunks)
        self._idf = build_idf([chunk.text for chunk in self._chunks])
        self._vectors = [vectorize(chunk.text, self._idf) for chunk in self._chunks]

    @property
    def idf(self) -> dict[str, float]:
        return self._idf

    def score(self, query: str) -> list[tuple[Chunk, float]]:
        """Score every chunk against `query`, in corpus order."""
        query_vector = vectorize(query, self._idf)
        return [
            (chunk, sparse_cosine(vector, query_vector))
            for chunk, vector in zip(self._chunks, self._vectors)
        ]

    def rank(self, query: str, k: int) -> list[Chunk]:
        """
        Return the top `k` chunks by descending cosine similarity.

        Ties keep corpus order (stable sort). Zero-score chunks are still
        returned when fewer than `k` chunks match.
        """
        if not self._chunks:
            return []
        scored = sorted(self.score(query), key=lambda pair: pair[1], reverse=True)
        return [chunk for chunk, _ in scored[:k]]
