"""
Query embedding cache.

Bounded least-recently-used map from (provider, leading characters of the
text) to a vector. Only single-text query lookups go through it; bulk
indexing always computes fresh vectors.

Dependencies: collections.OrderedDict
System role: Avoid repeated remote embedding calls for repeated queries
"""

from collections import OrderedDict


class EmbeddingCache:
    """LRU cache of query vectors."""

    def __init__(self, capacity: int = 200, key_chars: int = 512) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self.key_chars = key_chars
        self._entries: OrderedDict[tuple[str, str], list[float]] = OrderedDict()

    def _key(self, provider: str, text: str) -> tuple[str, str]:
        return provider, text[: self.key_chars]

    def get(self, provider: str, text: str) -> list[float] | None:
        key = self._key(provider, text)
        vector = self._entries.get(key)
        if vector is not None:
            self._entries.move_to_end(key)
        return vector

    def put(self, provider: str, text: str, vector: list[float]) -> None:
        key = self._key(provider, text)
        self._entries[key] = vector
        self._entries.move_to_end(key)
        while len(self._entries) > self.capacity:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: tuple[str, str]) -> bool:
        provider, text = key
        return self._key(provider, text) in self._entries
