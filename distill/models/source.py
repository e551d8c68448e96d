"""
Source domain models and schemas.

A source is one ingested document: its full text, ordered chunks and
extracted keywords. Request/response schemas for source operations live here
as well.

Dependencies: pydantic
System role: Source data structure and API contracts
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from distill.models.chunk import Chunk


class SourceType(str, Enum):
    """Kinds of ingested material."""

    TEXT = "text"
    URL = "url"
    PDF = "pdf"
    TABLE = "table"
    SUBTITLE = "subtitle"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Source(BaseModel):
    """Ingested document with its chunks."""

    id: str
    type: SourceType
    name: str
    url: str | None = None
    meta: dict[str, Any] = Field(default_factory=dict)
    text: str
    chunks: list[Chunk] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class SourceRef(BaseModel):
    """Minimal source reference returned alongside answers."""

    id: str
    name: str


class CreateSourceRequest(BaseModel):
    """Request schema for ingesting a source.

    `type` is validated by the service so a missing value is reported as a
    rejected request rather than a schema error.
    """

    type: SourceType | None = Field(default=None, description="Source type tag")
    name: str | None = Field(default=None, description="Display name")
    content: str | None = Field(default=None, description="Extracted plain text")
    url: str | None = Field(default=None, description="Origin URL")
    meta: dict[str, Any] | None = Field(default=None, description="Free-form metadata")


class SourceListItem(BaseModel):
    """Source without its full text."""

    id: str
    type: SourceType
    name: str
    url: str | None = None
    meta: dict[str, Any] = Field(default_factory=dict)
    chunk_count: int
    keywords: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_source(cls, source: Source) -> "SourceListItem":
        return cls(
            id=source.id,
            type=source.type,
            name=source.name,
            url=source.url,
            meta=source.meta,
            chunk_count=len(source.chunks),
            keywords=source.keywords,
            created_at=source.created_at,
            updated_at=source.updated_at,
        )


class SourceListResponse(BaseModel):
    """Response schema for source listing."""

    sources: list[SourceListItem]
    total: int


class SourceSummaryResponse(BaseModel):
    """Summary of a single source.

    `summary` holds generated text, or the placeholder structure when the
    generative collaborator is unavailable.
    """

    id: str
    name: str
    summary: str | dict[str, Any]
    degraded: bool = False
