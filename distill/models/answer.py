"""
Question answering schemas.

Dependencies: pydantic
System role: Ask API contracts
"""

from pydantic import BaseModel, Field

from distill.models.citation import Citation
from distill.models.source import SourceRef


class AskRequest(BaseModel):
    """Request schema for asking a question."""

    question: str | None = Field(default=None, description="Natural-language question")
    source_ids: list[str] | None = Field(default=None, description="Restrict to these sources")
    top_k: int | None = Field(default=None, description="Result-size hint, clamped")


class AnswerSummaries(BaseModel):
    """Answer condensed to three lengths."""

    short: str
    medium: str
    long: str


class AudienceVersions(BaseModel):
    """Answer rephrased for different readers."""

    student: str
    expert: str
    child: str


class AskResponse(BaseModel):
    """Response schema for a question."""

    question: str
    answer: str
    summaries: AnswerSummaries
    audiences: AudienceVersions
    citations: list[Citation]
    sources: list[SourceRef]
    retrieval_tier: str
    degraded: bool = False
