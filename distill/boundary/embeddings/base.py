"""
Remote embedding tier base.

Wraps a remote transport so that every failure (disabled tier, missing
credential, transport error, malformed response) becomes a failure result
and never an exception. Transient errors get a bounded number of attempts
with exponential jitter before the tier fails closed.

Dependencies: tenacity, distill.core.embeddings.results
System role: Fail-closed adapter for remote embedding services
"""

import logging
from abc import ABC, abstractmethod

from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential_jitter

from distill.core.embeddings.results import EmbeddingResult, FailureReason
from distill.models.embedding import EmbeddingBatch

logger = logging.getLogger(__name__)


class RemoteEmbeddingTier(ABC):
    """Remote tier of the embedding fallback chain."""

    provider_id: str

    def __init__(self, enabled: bool = True, attempts: int = 2) -> None:
        self.enabled = enabled
        self.attempts = max(1, attempts)

    @abstractmethod
    def has_credentials(self) -> bool:
        """Whether the transport can be authenticated at all."""

    @abstractmethod
    async def _embed_remote(self, texts: list[str]) -> list[list[float]]:
        """Call the remote service."""

    async def embed(self, texts: list[str]) -> EmbeddingResult:
        """
        Embed texts via the remote service.

        Args:
            texts: Texts to embed

        Returns:
            EmbeddingResult: Batch on success, typed failure otherwise
        """
        if not self.enabled:
            return EmbeddingResult.failure(self.provider_id, FailureReason.DISABLED)
        if not self.has_credentials():
            return EmbeddingResult.failure(self.provider_id, FailureReason.MISSING_CREDENTIAL)

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.attempts),
                wait=wait_exponential_jitter(initial=0.5, max=4, jitter=0.5),
                before_sleep=lambda retry_state: logger.warning(
                    f"{__name__}:embed - {self.provider_id} retry "
                    f"{retry_state.attempt_number}/{self.attempts}"
                ),
                reraise=True,
            ):
                with attempt:
                    vectors = await self._embed_remote(texts)
        except Exception as e:
            logger.warning(
                f"{__name__}:embed - {self.provider_id} failed ({type(e).__name__}): {e}",
                extra={"provider": self.provider_id, "text_count": len(texts)},
            )
            return EmbeddingResult.failure(
                self.provider_id, FailureReason.TRANSPORT_ERROR, error=str(e)
            )

        if len(vectors) != len(texts) or not vectors:
            return EmbeddingResult.failure(
                self.provider_id,
                FailureReason.BAD_RESPONSE,
                error=f"expected {len(texts)} vectors, got {len(vectors)}",
            )
        dims = {len(vector) for vector in vectors}
        if len(dims) != 1 or 0 in dims:
            return EmbeddingResult.failure(
                self.provider_id,
                FailureReason.BAD_RESPONSE,
                error=f"inconsistent dimensions {sorted(dims)}",
            )

        return EmbeddingResult.success(
            EmbeddingBatch(
                vectors=[[float(x) for x in vector] for vector in vectors],
                dim=dims.pop(),
                provider=self.provider_id,
            )
        )
