"""Citation selection and deduplication."""

from distill.core.citations.citation_picker import CitationPicker, dedupe_citations

__all__ = ["CitationPicker", "dedupe_citations"]
