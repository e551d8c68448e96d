"""
Vector database boundary layer.

Provides the vector store contract, its three backends and startup
selection.
- InMemoryVectorStore: process-local dictionary
- SQLiteBlobVectorStore: durable single-file blob table
- PgVectorStore: PostgreSQL + pgvector columnar index (imported lazily)

Dependencies: sqlalchemy, numpy, pgvector
System role: Vector store adapter for retrieval
"""

from distill.boundary.vdb.base import VectorStore
from distill.boundary.vdb.memory_store import InMemoryVectorStore
from distill.boundary.vdb.vector_schemas import VectorSearchResult, VectorStoreRecord
from distill.boundary.vdb.vector_store_factory import create_vector_store

__all__ = [
    "VectorStore",
    "InMemoryVectorStore",
    "VectorSearchResult",
    "VectorStoreRecord",
    "create_vector_store",
]
