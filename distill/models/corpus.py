"""
Corpus snapshot model.

The complete state handed to and received from the persistence collaborator.

Dependencies: pydantic
System role: Persisted state structure
"""

from datetime import datetime

from pydantic import BaseModel, Field

from distill.models.embedding import IndexState
from distill.models.source import Source, utc_now


class CorpusState(BaseModel):
    """All sources plus the corpus embedding identity."""

    sources: list[Source] = Field(default_factory=list)
    index: IndexState | None = None
    created_at: datetime = Field(default_factory=utc_now)

    def find_sources(self, ids: list[str] | None) -> list[Source]:
        """Return sources in corpus order, restricted to `ids` when given."""
        if ids is None:
            return list(self.sources)
        wanted = set(ids)
        return [source for source in self.sources if source.id in wanted]

    def get_source(self, source_id: str) -> Source | None:
        return next((s for s in self.sources if s.id == source_id), None)
