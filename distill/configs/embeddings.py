"""
Embedding provider configuration.

Settings for the two remote tiers (Google Gemini, Amazon Bedrock), the
local hashing tier, batching of bulk embedding calls and the query cache.

Dependencies: pydantic, pydantic_settings
System role: Embedding fallback chain configuration
"""

from pydantic import Field, SecretStr

from distill.configs.base import BaseSettings, group_config


class EmbeddingSettings(BaseSettings):
    """Embedding tiers, batching and cache configuration."""

    model_config = group_config("EMBEDDING_")

    # Tier A
    google_enabled: bool = Field(default=True, description="Try Google Gemini embeddings first")
    google_api_key: SecretStr | None = Field(
        default=None,
        description="Gemini API key (falls back to GOOGLE_API_KEY)",
    )
    google_model: str = Field(
        default="models/gemini-embedding-001",
        description="Gemini embedding model ID",
    )
    google_dimension: int = Field(default=1536, description="Gemini output dimensionality")

    # Tier B
    bedrock_enabled: bool = Field(default=True, description="Try Bedrock Titan embeddings second")
    bedrock_model_id: str = Field(
        default="amazon.titan-embed-text-v2:0",
        description="Bedrock embedding model ID",
    )
    bedrock_region: str = Field(default="us-east-1", description="AWS region for Bedrock")

    # Local tier
    local_dimension: int = Field(
        default=768,
        description="Width of the deterministic hashing vectors",
    )

    transport_attempts: int = Field(
        default=2,
        description="Attempts per remote call before the tier fails closed",
    )
    batch_size: int = Field(default=32, description="Texts per bulk embedding request")
    cache_capacity: int = Field(default=200, description="Query embedding cache entries")
    cache_key_chars: int = Field(
        default=512,
        description="Leading characters of a text used in the cache key",
    )
