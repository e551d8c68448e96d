"""ORM models for durable vector records."""

from distill.boundary.db.models.vector_record_model import BlobVectorRecord, PgVectorRecord

__all__ = ["BlobVectorRecord", "PgVectorRecord"]
