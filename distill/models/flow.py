"""
Flow domain models and schemas.

Dependencies: pydantic
System role: Multi-step generation contracts
"""

from typing import Any

from pydantic import BaseModel, Field

from distill.models.citation import Citation
from distill.models.source import SourceRef


class FlowStep(BaseModel):
    """One requested generation step."""

    id: str = Field(description="Step identifier, e.g. summarize, outline_slides, quiz")
    options: dict[str, Any] = Field(default_factory=dict, description="Per-step options")


class FlowStepResult(BaseModel):
    """Executed step with its output and citations."""

    id: str
    output: str
    citations: list[Citation]
    degraded: bool = Field(
        default=False,
        description="True when the deterministic placeholder replaced generated output",
    )


class FlowResult(BaseModel):
    """Result of a whole flow run."""

    steps: list[FlowStepResult]
    citations: list[Citation] = Field(description="Deduplicated across all steps")
    sources: list[SourceRef]


class FlowRequest(BaseModel):
    """Request schema for running a flow."""

    steps: list[FlowStep] | None = Field(
        default=None,
        description="Ordered steps (defaults to summarize, outline_slides, quiz)",
    )
    source_ids: list[str] | None = Field(default=None, description="Restrict to these sources")


class GenerateRequest(BaseModel):
    """Request schema for generating a single artifact."""

    type: str | None = Field(default=None, description="Step identifier to run")
    source_ids: list[str] | None = None
    options: dict[str, Any] = Field(default_factory=dict)
