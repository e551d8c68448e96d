"""
Embedding provider with a deterministic fallback chain.

Tiers are tried in fixed order (remote A, remote B, local hashing). A tier
that reports failure hands over to the next; the local tier always
succeeds, so the chain as a whole always yields vectors unless a single
tier is pinned.

Dependencies: distill.core.embeddings.results, distill.core.embeddings.cache
System role: Dense vector resolution for indexing and queries
"""

import logging
from collections.abc import Sequence

from distill.core.embeddings.cache import EmbeddingCache
from distill.core.embeddings.results import EmbeddingResult, EmbeddingTier, FailureReason
from distill.core.exceptions import EmbeddingError
from distill.models.embedding import EmbeddingBatch

logger = logging.getLogger(__name__)


class EmbeddingProvider:
    """Ordered chain of embedding tiers with a query cache."""

    def __init__(
        self,
        tiers: Sequence[EmbeddingTier],
        cache: EmbeddingCache | None = None,
    ) -> None:
        """
        Initialize provider chain.

        Args:
            tiers: Tiers in resolution order, the last one should never fail
            cache: Cache used by embed_query (a default one is created if None)
        """
        if not tiers:
            raise ValueError("At least one embedding tier is required")
        self._tiers = list(tiers)
        self._cache = cache if cache is not None else EmbeddingCache()

    @property
    def provider_ids(self) -> list[str]:
        return [tier.provider_id for tier in self._tiers]

    @property
    def cache(self) -> EmbeddingCache:
        return self._cache

    def _select(self, provider_id: str | None) -> list[EmbeddingTier]:
        if provider_id is None:
            return self._tiers
        return [tier for tier in self._tiers if tier.provider_id == provider_id]

    async def embed(
        self,
        texts: list[str],
        provider_id: str | None = None,
    ) -> EmbeddingResult:
        """
        Embed a batch of texts.

        Args:
            texts: Texts to embed (non-empty)
            provider_id: Pin to a single tier instead of walking the chain

        Returns:
            EmbeddingResult: First successful tier result, or the last failure

        Raises:
            EmbeddingError: When called without texts
        """
        if not texts:
            raise EmbeddingError("No texts to embed")

        result = EmbeddingResult.failure(provider_id or "", FailureReason.UNKNOWN_PROVIDER)
        for tier in self._select(provider_id):
            result = await tier.embed(texts)
            if result.ok:
                logger.debug(
                    f"{__name__}:embed - {len(texts)} texts embedded by {tier.provider_id}"
                )
                return result
            logger.info(
                f"{__name__}:embed - Tier {tier.provider_id} unavailable ({result.reason.value}), "
                "advancing",
                extra={"provider": tier.provider_id, "reason": result.reason.value},
            )
        return result

    async def embed_query(
        self,
        text: str,
        provider_id: str | None = None,
        trusted_provider: str | None = None,
    ) -> EmbeddingResult:
        """
        Embed a single query text through the cache.

        The cache is consulted for each tier before its transport is called,
        so a repeated (provider, text) lookup never reaches the transport.

        Args:
            text: Query text
            provider_id: Pin to a single tier instead of walking the chain
            trusted_provider: When set, cached vectors are only served for
                this tier; other tiers must answer through their transport
        """
        result = EmbeddingResult.failure(provider_id or "", FailureReason.UNKNOWN_PROVIDER)
        for tier in self._select(provider_id):
            if trusted_provider is None or tier.provider_id == trusted_provider:
                cached = self._cache.get(tier.provider_id, text)
                if cached is not None:
                    return EmbeddingResult.success(
                        EmbeddingBatch(vectors=[cached], dim=len(cached), provider=tier.provider_id)
                    )
            result = await tier.embed([text])
            if result.ok:
                self._cache.put(tier.provider_id, text, result.batch.vectors[0])
                return result
            logger.info(
                f"{__name__}:embed_query - Tier {tier.provider_id} unavailable "
                f"({result.reason.value}), advancing"
            )
        return result
