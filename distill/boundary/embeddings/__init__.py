"""
Remote embedding transports.

Provides the two remote tiers of the embedding fallback chain.
- GoogleEmbeddingTier: Gemini embeddings (tier A)
- BedrockEmbeddingTier: Titan embeddings (tier B)

Dependencies: langchain_google_genai, langchain_aws, tenacity
System role: Embedding transport adapters
"""

from distill.boundary.embeddings.base import RemoteEmbeddingTier
from distill.boundary.embeddings.bedrock_embeddings import BedrockEmbeddingTier
from distill.boundary.embeddings.google_embeddings import GoogleEmbeddingTier

__all__ = ["RemoteEmbeddingTier", "GoogleEmbeddingTier", "BedrockEmbeddingTier"]
