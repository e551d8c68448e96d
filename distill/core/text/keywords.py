"""
Frequency-based keyword extraction.

Used for citation overlap scoring, source keyword lists and deterministic
placeholder summaries.

Dependencies: distill.core.text.chunker
System role: Keyword ranking over normalized tokens
"""

from collections import Counter

from distill.core.text.chunker import tokenize

STOP_WORDS: frozenset[str] = frozenset(
    """
    the a an and or of to in is are for with on by from at as this that these those it be
    was were been being i you he she they we our your their its not no yes do does did done
    have has had can could may might must shall should will would if then else than when
    where who what why how which about into over under more less most least many few very
    just also even only other another some any each every because so therefore thus hence
    include including such per via across among between before after during within without
    """.split()
)


def top_keywords(text: str | None, k: int = 8) -> list[str]:
    """
    Return the `k` most frequent non-stop-word tokens.

    Ties keep first-seen order: Counter preserves insertion order and the
    sort is stable.

    Args:
        text: Text to analyse
        k: Number of keywords to return

    Returns:
        list[str]: Keywords by descending frequency
    """
    counts = Counter(token for token in tokenize(text) if token not in STOP_WORDS)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:k]]
