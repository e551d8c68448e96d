"""
Paragraph chunking and token normalization.

Splits raw text on blank-line boundaries into retrievable units and
provides the tokenizer shared by keyword extraction and TF-IDF scoring.

Dependencies: re
System role: First stage of source ingestion
"""

import re

_PARAGRAPH_BREAK = re.compile(r"\n{2,}")
_SENTENCE_END = re.compile(r"(?<=[.!?。！？])\s+")
_TOKEN = re.compile(r"[a-z0-9一-龥]+")


def split_paragraphs(text: str | None) -> list[str]:
    """
    Split text into non-empty, trimmed paragraphs.

    CRLF is normalized to LF first; any run of two or more newlines is a
    boundary. Empty input yields an empty list.

    Args:
        text: Raw document text

    Returns:
        list[str]: Paragraphs in document order
    """
    normalized = (text or "").replace("\r\n", "\n")
    return [part.strip() for part in _PARAGRAPH_BREAK.split(normalized) if part.strip()]


def split_sentences(text: str | None, max_sentences: int = 3) -> str:
    """Return the first `max_sentences` sentences joined by single spaces."""
    parts = [p.strip() for p in _SENTENCE_END.split(text or "") if p.strip()]
    return " ".join(parts[:max_sentences])


def tokenize(text: str | None) -> list[str]:
    """Lowercase alphanumeric (and CJK) runs."""
    return _TOKEN.findall((text or "").lower())
