"""
Explicit per-tier embedding outcomes.

Every tier of the fallback chain reports success or a typed failure reason
instead of raising, so the chain's decision to advance is visible and
testable.

Dependencies: pydantic models
System role: Result type for the embedding fallback chain
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from distill.models.embedding import EmbeddingBatch


class FailureReason(str, Enum):
    """Why a tier produced no vectors."""

    DISABLED = "disabled"
    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT_ERROR = "transport_error"
    BAD_RESPONSE = "bad_response"
    UNKNOWN_PROVIDER = "unknown_provider"


@dataclass(frozen=True)
class EmbeddingResult:
    """Outcome of one tier attempt."""

    provider: str
    batch: EmbeddingBatch | None = None
    reason: FailureReason | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.batch is not None

    @classmethod
    def success(cls, batch: EmbeddingBatch) -> "EmbeddingResult":
        return cls(provider=batch.provider, batch=batch)

    @classmethod
    def failure(
        cls,
        provider: str,
        reason: FailureReason,
        error: str | None = None,
    ) -> "EmbeddingResult":
        return cls(provider=provider, reason=reason, error=error)


class EmbeddingTier(Protocol):
    """One link of the fallback chain."""

    provider_id: str

    async def embed(self, texts: list[str]) -> EmbeddingResult:
        """Embed texts, reporting failure as a result rather than raising."""
        ...
