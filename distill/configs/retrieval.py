"""
Retrieval and citation configuration.

Dependencies: pydantic, pydantic_settings
System role: Ranking bounds, flow context size and citation payload limits
"""

from pydantic import Field

from distill.configs.base import BaseSettings, group_config


class RetrievalSettings(BaseSettings):
    """Top-k bounds and citation limits."""

    model_config = group_config("RETRIEVAL_")

    default_top_k: int = Field(default=12, description="k used when the caller gives no hint")
    min_top_k: int = Field(default=4, description="Lower clamp for k")
    max_top_k: int = Field(default=20, description="Upper clamp for k")

    flow_top_k: int = Field(default=16, description="Shared context size for flows")
    flow_query: str = Field(
        default="overview main ideas key concepts findings conclusions",
        description="Broad query used to gather shared flow context",
    )

    citation_snippet_chars: int = Field(default=280, description="Snippet length per citation")
    citation_keywords: int = Field(
        default=16,
        description="Keywords extracted from question and answer for overlap scoring",
    )
    max_citations: int = Field(default=6, description="Citations returned per answer or step")
