"""
Database boundary layer: ORM models and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_postgres_engine(), get_sqlite_engine(), get_async_session_factory()

Dependencies: sqlalchemy
System role: Database adapter for the durable vector backends
"""

from distill.boundary.db.base import Base, TimestampMixin
from distill.boundary.db.connection import (
    get_async_session_factory,
    get_postgres_engine,
    get_sqlite_engine,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "get_async_session_factory",
    "get_postgres_engine",
    "get_sqlite_engine",
]
