"""
Amazon Bedrock Titan embeddings tier.

Second remote tier of the fallback chain. Credentials are resolved through
the standard boto3 chain; when none are found the tier reports a missing
credential instead of attempting a call.

Dependencies: langchain_aws, boto3
System role: Remote embedding tier B
"""

import logging

import boto3
from langchain_aws import BedrockEmbeddings

from distill.boundary.embeddings.base import RemoteEmbeddingTier

logger = logging.getLogger(__name__)


class BedrockEmbeddingTier(RemoteEmbeddingTier):
    """Titan embeddings as a fail-closed tier."""

    def __init__(
        self,
        model_id: str = "amazon.titan-embed-text-v2:0",
        region: str = "us-east-1",
        enabled: bool = True,
        attempts: int = 2,
    ) -> None:
        super().__init__(enabled=enabled, attempts=attempts)
        if not model_id:
            raise ValueError("model_id cannot be empty")
        self.model_id = model_id
        self.region = region
        self.provider_id = f"bedrock:{model_id}"
        self._client: BedrockEmbeddings | None = None

    def has_credentials(self) -> bool:
        try:
            return boto3.Session(region_name=self.region).get_credentials() is not None
        except Exception as e:
            logger.debug(f"{__name__}:has_credentials - credential lookup failed: {e}")
            return False

    def _get_client(self) -> BedrockEmbeddings:
        if self._client is None:
            self._client = BedrockEmbeddings(model_id=self.model_id, region_name=self.region)
        return self._client

    async def _embed_remote(self, texts: list[str]) -> list[list[float]]:
        return await self._get_client().aembed_documents(texts)
