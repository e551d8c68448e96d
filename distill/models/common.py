"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    details: dict | None = Field(default=None, description="Additional error context")


class IndexRebuildResponse(BaseModel):
    """Outcome of a full corpus re-embedding."""

    provider: str | None
    dim: int | None
    epoch: int | None
    embedded_chunks: int
    pending_chunks: int
    backend: str
