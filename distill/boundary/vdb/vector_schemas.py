"""
Vector database schemas.

Pydantic models exchanged with every vector store backend.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from distill.models.source import utc_now


class VectorStoreRecord(BaseModel):
    """One chunk vector as written to a backend."""

    chunk_id: str = Field(description="Chunk identifier (primary key)")
    source_id: str = Field(description="Owning source ID, used for filtering")
    text: str = Field(description="Chunk text content")
    vector: list[float] = Field(description="Embedding vector")
    dim: int = Field(default=0, description="Vector length, derived when omitted")
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def _derive_dim(self) -> "VectorStoreRecord":
        if not self.dim:
            self.dim = len(self.vector)
        elif self.dim != len(self.vector):
            raise ValueError(f"dim {self.dim} does not match vector length {len(self.vector)}")
        return self


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    chunk_id: str = Field(description="Chunk identifier")
    source_id: str = Field(description="Owning source ID")
    content: str = Field(description="Chunk text content")
    similarity_score: float = Field(description="Cosine similarity to the query")
