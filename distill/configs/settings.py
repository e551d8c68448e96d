"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from distill.configs.base import BaseSettings
from distill.configs.database import DatabaseSettings
from distill.configs.embeddings import EmbeddingSettings
from distill.configs.generation import GenerationSettings
from distill.configs.retrieval import RetrievalSettings
from distill.configs.state import StateSettings
from distill.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    app_name: str = Field(default="distill", description="Service name used in the API title")
    environment: str = Field(
        default="development",
        description="Deployment environment (development, staging, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    embeddings: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    state: StateSettings = Field(default_factory=StateSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once; tests build their own Settings
    instead of mutating this one.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
