"""
SQLAlchemy declarative base and common mixins.

Provides the base class for the vector record models of both durable
backends and the timestamp mixin they share.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    Each backend creates only its own table from this metadata.
    """

    pass


class TimestampMixin:
    """
    Mixin providing automatic timestamp tracking.

    created_at is set once on row creation; updated_at is refreshed on every
    upsert. Both are UTC.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utc_now,
        onupdate=_utc_now,
        nullable=False,
    )
