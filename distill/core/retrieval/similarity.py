"""
Dense vector similarity.

Cosine primitive and the linear-scan ranking shared by the in-memory
tier, the in-memory backend and the SQLite blob backend.

Dependencies: numpy
System role: Dense scoring primitive
"""

from collections.abc import Iterable, Sequence
from typing import TypeVar

import numpy as np

T = TypeVar("T")


def cosine(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity dot / (|a| |b|).

    Returns 0.0 when either norm is zero.

    Raises:
        ValueError: When the vectors differ in length
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape != vb.shape:
        raise ValueError(f"Dimension mismatch: {va.shape[0]} != {vb.shape[0]}")
    norm = float(np.linalg.norm(va) * np.linalg.norm(vb))
    if norm == 0.0:
        return 0.0
    return float(np.dot(va, vb) / norm)


def l2_normalize(vector: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(vector))
    if norm == 0.0:
        return vector
    return vector / norm


def rank_by_cosine(
    items: Iterable[tuple[T, Sequence[float]]],
    query: Sequence[float],
    k: int,
) -> list[tuple[T, float]]:
    """
    Rank `(item, vector)` pairs by cosine similarity to `query`.

    Pairs whose vector length differs from the query are skipped, never
    compared. Ties keep iteration order.

    Args:
        items: Candidates with their vectors
        query: Query vector
        k: Maximum number of results

    Returns:
        list[tuple[T, float]]: Top items with their similarity
    """
    dim = len(query)
    scored = [
        (item, cosine(vector, query))
        for item, vector in items
        if vector is not None and len(vector) == dim
    ]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored[:k]
