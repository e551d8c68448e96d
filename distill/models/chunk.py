"""
Chunk domain model.

Represents one paragraph of a source with its position and, once embedded,
its dense vector.

Dependencies: pydantic
System role: Retrievable unit of source text
"""

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Paragraph-sized unit of a source."""

    id: str = Field(description="Chunk identifier")
    index: int = Field(description="Position within the owning source")
    text: str = Field(description="Chunk text content")
    source_id: str = Field(description="Owning source ID (lookup only)")
    vector: list[float] | None = Field(default=None, description="Embedding vector once indexed")
