"""
Test suite for paragraph chunking, sentence splitting and keyword extraction.

System role: Verification of ingestion text utilities
"""

from distill.core.text.chunker import split_paragraphs, split_sentences, tokenize
from distill.core.text.keywords import STOP_WORDS, top_keywords


class TestSplitParagraphs:
    """Test suite for split_paragraphs."""

    def test_split_should_break_on_blank_lines_and_trim(self) -> None:
        """Runs of two or more newlines separate paragraphs."""
        text = "  First paragraph.  \n\n\n Second one.\nStill second.\n\nThird."

        assert split_paragraphs(text) == [
            "First paragraph.",
            "Second one.\nStill second.",
            "Third.",
        ]

    def test_split_should_normalize_crlf(self) -> None:
        assert split_paragraphs("One.\r\n\r\nTwo.") == ["One.", "Two."]

    def test_split_should_return_empty_list_for_empty_input(self) -> None:
        assert split_paragraphs("") == []
        assert split_paragraphs(None) == []
        assert split_paragraphs("\n\n   \n\n") == []

    def test_split_should_be_idempotent_on_rejoined_chunks(self) -> None:
        """Re-splitting chunks joined by a blank line reproduces them."""
        # Arrange
        text = "Alpha beta.\r\n\r\nGamma\ndelta.\n\n\n\nEpsilon."
        chunks = split_paragraphs(text)

        # Act
        again = split_paragraphs("\n\n".join(chunks))

        # Assert
        assert again == chunks


class TestSplitSentences:
    """Test suite for split_sentences."""

    def test_should_keep_first_n_sentences(self) -> None:
        text = "One. Two! Three? Four."

        assert split_sentences(text, 2) == "One. Two!"
        assert split_sentences(text, 10) == "One. Two! Three? Four."

    def test_should_handle_cjk_terminators(self) -> None:
        assert split_sentences("第一句。 第二句。 第三句。", 1) == "第一句。"

    def test_should_return_empty_string_for_none(self) -> None:
        assert split_sentences(None, 3) == ""


class TestTokenize:
    """Test suite for tokenize."""

    def test_should_lowercase_and_keep_alphanumeric_runs(self) -> None:
        assert tokenize("Hello, World-42!") == ["hello", "world", "42"]

    def test_should_keep_cjk_runs(self) -> None:
        assert tokenize("知识 distillation") == ["知识", "distillation"]


class TestTopKeywords:
    """Test suite for top_keywords."""

    def test_should_rank_by_frequency_and_skip_stop_words(self) -> None:
        text = "The cat and the dog. The cat sleeps. A dog barks, the cat purrs."

        keywords = top_keywords(text, 2)

        assert keywords == ["cat", "dog"]
        assert not set(keywords) & STOP_WORDS

    def test_ties_should_keep_first_seen_order(self) -> None:
        assert top_keywords("zebra apple mango", 3) == ["zebra", "apple", "mango"]

    def test_should_default_to_eight_keywords(self) -> None:
        text = " ".join(f"word{i}" for i in range(20))

        assert len(top_keywords(text)) == 8

    def test_should_return_empty_for_empty_text(self) -> None:
        assert top_keywords("") == []
        assert top_keywords(None) == []
