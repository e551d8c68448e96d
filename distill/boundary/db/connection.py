"""
Database connection management.

Builds the async engines and session factories used by the durable vector
backends. Engines are created once at startup by the vector store factory
and disposed when the store is closed.

Dependencies: sqlalchemy, asyncpg, aiosqlite
System role: Database connection lifecycle management
"""

from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from distill.configs.database import DatabaseSettings


def get_postgres_engine(db_config: DatabaseSettings) -> AsyncEngine:
    """
    Create async PostgreSQL engine with connection pooling.

    pool_pre_ping=True verifies connections before use; the connect timeout
    bounds the startup probe when the server is unreachable.

    Args:
        db_config: PostgreSQL connection settings

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine
    """
    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        pool_pre_ping=True,
        connect_args={"timeout": db_config.connect_timeout},
    )


def get_sqlite_engine(path: str, echo: bool = False) -> AsyncEngine:
    """
    Create async SQLite engine for a single database file.

    The parent directory is created when missing.

    Args:
        path: Database file path
        echo: Echo SQL statements to logs

    Returns:
        AsyncEngine: Configured aiosqlite engine
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    return create_async_engine(f"sqlite+aiosqlite:///{path}", echo=echo)


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create async session factory bound to an engine.

    Returns:
        async_sessionmaker: Factory with autoflush off and no expiry on commit

    Usage:
        SessionFactory = get_async_session_factory(engine)
        async with SessionFactory() as session:
            await session.execute(stmt)
            await session.commit()
    """
    return async_sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
