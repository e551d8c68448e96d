"""
Citation domain model.

Represents a scored snippet of source text offered as evidence for an
answer. Computed per request, never persisted.

Dependencies: pydantic
System role: Citation data structure
"""

from pydantic import BaseModel, Field


class Citation(BaseModel):
    """Citation model for source attribution."""

    source_id: str = Field(description="Cited source ID")
    source_name: str = Field(description="Cited source display name")
    snippet: str = Field(description="Leading characters of the cited chunk")
    score: int = Field(description="Keyword overlap count")
