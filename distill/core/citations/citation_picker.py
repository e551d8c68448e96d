"""
Citation picking by keyword overlap.

Scores every chunk of the given sources by how many of the top keywords of
"question + answer" it contains, keeps chunks with a positive score and
returns the best ones with a leading snippet. Sort is stable: equal scores
keep source-then-chunk order.

Dependencies: distill.core.text
System role: Citation extraction business logic
"""

from collections.abc import Iterable

from distill.core.text.chunker import tokenize
from distill.core.text.keywords import top_keywords
from distill.models.citation import Citation
from distill.models.source import Source


class CitationPicker:
    """Overlap-based citation selection."""

    def __init__(
        self,
        keyword_count: int = 16,
        snippet_chars: int = 280,
        max_citations: int = 6,
    ) -> None:
        """
        Initialize citation picker.

        Args:
            keyword_count: Keywords drawn from question and answer
            snippet_chars: Snippet length per citation
            max_citations: Default result cap
        """
        self.keyword_count = keyword_count
        self.snippet_chars = snippet_chars
        self.max_citations = max_citations

    def pick(
        self,
        sources: Iterable[Source],
        question: str | None,
        answer: str | None,
        max_citations: int | None = None,
    ) -> list[Citation]:
        """
        Pick citations supporting an answer.

        Args:
            sources: Sources whose chunks may be cited
            question: Question or step title
            answer: Generated or placeholder text
            max_citations: Result cap (defaults to the configured cap)

        Returns:
            list[Citation]: Citations by descending overlap
        """
        limit = self.max_citations if max_citations is None else max_citations
        keywords = set(top_keywords(f"{question or ''} {answer or ''}", self.keyword_count))
        if not keywords or limit <= 0:
            return []

        citations: list[Citation] = []
        for source in sources:
            for chunk in source.chunks:
                overlap = len(keywords & set(tokenize(chunk.text)))
                if overlap > 0:
                    citations.append(
                        Citation(
                            source_id=source.id,
                            source_name=source.name,
                            snippet=chunk.text[: self.snippet_chars],
                            score=overlap,
                        )
                    )
        citations.sort(key=lambda citation: citation.score, reverse=True)
        return citations[:limit]


def dedupe_citations(citations: Iterable[Citation]) -> list[Citation]:
    """Keep the first citation per (source_id, snippet), preserving order."""
    seen: set[tuple[str, str]] = set()
    unique: list[Citation] = []
    for citation in citations:
        key = (citation.source_id, citation.snippet)
        if key in seen:
            continue
        seen.add(key)
        unique.append(citation)
    return unique
