"""
Database configuration settings.

Connection parameters for the PostgreSQL + pgvector columnar vector index.
Only consulted when the pgvector backend is probed at startup.

Dependencies: pydantic, pydantic_settings
System role: Columnar vector store connection configuration
"""

from pydantic import Field

from distill.configs.base import BaseSettings, group_config


class DatabaseSettings(BaseSettings):
    """PostgreSQL (pgvector) configuration."""

    model_config = group_config("POSTGRES_")

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="distill", description="PostgreSQL database name")

    pool_size: int = Field(default=5, description="Connection pool size")
    connect_timeout: float = Field(
        default=3.0,
        description="Seconds to wait for the startup probe connection",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def async_database_url(self) -> str:
        """
        Construct async PostgreSQL connection URL.

        Returns:
            str: SQLAlchemy asyncpg connection URL
        """
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}"
        )
