"""
Embedding domain models.

Dependencies: pydantic
System role: Vector batch and corpus index identity
"""

from pydantic import BaseModel, Field


class EmbeddingBatch(BaseModel):
    """Vectors produced by one provider tier in one call."""

    vectors: list[list[float]]
    dim: int = Field(description="Dimensionality shared by every vector")
    provider: str = Field(description="Identifier of the producing tier")


class IndexState(BaseModel):
    """Embedding identity recorded for the whole corpus.

    Vectors are comparable only within one (provider, dim) pair. The epoch is
    bumped every time prior vectors are invalidated.
    """

    provider: str
    dim: int
    epoch: int = 0

    def matches(self, provider: str, dim: int) -> bool:
        return self.provider == provider and self.dim == dim
