"""
Google Generative AI embeddings tier.

Wraps GoogleGenerativeAIEmbeddings to ensure consistent vector dimensions
across all embedding calls, and exposes it as the first remote tier of the
fallback chain. A missing API key disables the tier without a network call.

Dependencies: langchain_google_genai
System role: Remote embedding tier A
"""

import logging
import os

from langchain_google_genai import GoogleGenerativeAIEmbeddings

from distill.boundary.embeddings.base import RemoteEmbeddingTier

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """
    GoogleGenerativeAIEmbeddings wrapper with fixed output dimensionality.

    The base class ignores output_dimensionality in the constructor. This
    wrapper passes the configured dimension on every call so all vectors
    issued for one corpus share a width.
    """

    _output_dimensionality: int = 1536

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1536,
        **kwargs,
    ) -> None:
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality

    async def aembed_documents(
        self,
        texts: list[str],
        *,
        batch_size: int = 100,
        task_type: str | None = None,
        titles: list[str] | None = None,
        output_dimensionality: int | None = None,
    ) -> list[list[float]]:
        """Embed documents asynchronously with the configured dimension."""
        dim = output_dimensionality or self._output_dimensionality
        return await super().aembed_documents(
            texts,
            batch_size=batch_size,
            task_type=task_type,
            titles=titles,
            output_dimensionality=dim,
        )


class GoogleEmbeddingTier(RemoteEmbeddingTier):
    """Gemini embeddings as a fail-closed tier."""

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        dimension: int = 1536,
        api_key: str | None = None,
        enabled: bool = True,
        attempts: int = 2,
    ) -> None:
        super().__init__(enabled=enabled, attempts=attempts)
        self.model = model
        self.dimension = dimension
        self.provider_id = f"google:{model}"
        self._api_key = api_key or os.getenv("GOOGLE_API_KEY")
        self._client: FixedDimensionEmbeddings | None = None

    def has_credentials(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> FixedDimensionEmbeddings:
        if self._client is None:
            logger.info(
                f"{__name__}:_get_client - Creating FixedDimensionEmbeddings with "
                f"model={self.model}, dimension={self.dimension}"
            )
            self._client = FixedDimensionEmbeddings(
                model=self.model,
                output_dimensionality=self.dimension,
                google_api_key=self._api_key,
            )
        return self._client

    async def _embed_remote(self, texts: list[str]) -> list[list[float]]:
        return await self._get_client().aembed_documents(texts)
