"""Text utilities: paragraph chunking, sentence splitting and keyword extraction."""

from distill.core.text.chunker import split_paragraphs, split_sentences, tokenize
from distill.core.text.keywords import STOP_WORDS, top_keywords

__all__ = [
    "split_paragraphs",
    "split_sentences",
    "tokenize",
    "STOP_WORDS",
    "top_keywords",
]
