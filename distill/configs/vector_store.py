"""
Vector store configuration settings.

Controls which backend is probed at startup and in which order, where the
durable blob table lives, and the per-backend result ceiling.

Dependencies: pydantic, pydantic_settings
System role: Vector index configuration for retrieval
"""

from pydantic import Field

from distill.configs.base import BaseSettings, group_config


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (pgvector, SQLite blob table, in-memory)."""

    model_config = group_config("VECTOR_STORE_")

    backends: list[str] = Field(
        default=["pgvector", "sqlite", "memory"],
        description="Backends probed at startup, first available wins",
    )
    sqlite_path: str = Field(
        default="./data/vectors.db",
        description="File backing the durable blob table",
    )
    max_top_k: int = Field(
        default=20,
        description="Upper bound on results requested from any backend",
    )
