"""
Vector record ORM models.

Both durable backends store one row per chunk keyed by chunk id. The blob
table keeps vectors as packed float32 bytes; the columnar table keeps them
in a pgvector column so ranking runs inside PostgreSQL.

Dependencies: sqlalchemy, pgvector
System role: Durable chunk vector persistence
"""

from pgvector.sqlalchemy import Vector
from sqlalchemy import Integer, LargeBinary, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from distill.boundary.db.base import Base, TimestampMixin


class BlobVectorRecord(Base, TimestampMixin):
    """Chunk vector stored as a float32 blob (SQLite)."""

    __tablename__ = "vector_blobs"

    chunk_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    source_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    embedding: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    dim: Mapped[int] = mapped_column(Integer, nullable=False)


class PgVectorRecord(Base, TimestampMixin):
    """Chunk vector stored in a pgvector column (PostgreSQL)."""

    __tablename__ = "vector_records"

    chunk_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    source_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    # Unsized: the corpus dimensionality may change after a reset.
    embedding = mapped_column(Vector(), nullable=False)
    dim: Mapped[int] = mapped_column(Integer, nullable=False)
