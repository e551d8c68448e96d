"""
Deterministic placeholder artifacts.

Used when the generative collaborator returns nothing usable. Every
placeholder is built only from the source text (sentence extracts,
paragraphs, keywords), so the same corpus always yields the same output.
"""

from dataclasses import dataclass, field
from typing import Any

from distill.core.text.chunker import split_paragraphs, split_sentences
from distill.core.text.keywords import top_keywords
from distill.models.chunk import Chunk
from distill.models.source import Source


@dataclass
class PlaceholderContext:
    """Inputs available to a placeholder builder."""

    title: str
    sources: list[Source]
    chunks: list[Chunk] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)
    prior_output: str | None = None

    @property
    def basis(self) -> str:
        """Text the placeholder is derived from."""
        if self.chunks:
            return "\n\n".join(chunk.text for chunk in self.chunks)
        return "\n\n".join(source.text for source in self.sources)


def summarize_placeholder(ctx: PlaceholderContext) -> str:
    basis = ctx.basis
    lines = [
        f"# Summary: {ctx.title}",
        "",
        f"Short: {split_sentences(basis, 2)}",
        "",
        f"Medium: {split_sentences(basis, 5)}",
        "",
        f"Key concepts: {', '.join(top_keywords(basis, 10))}",
    ]
    return "\n".join(lines)


def slides_placeholder(ctx: PlaceholderContext) -> str:
    basis = ctx.prior_output or ctx.basis
    slides = [(f"{ctx.title} overview", top_keywords(basis, 5))]
    for source in ctx.sources:
        points = [split_sentences(p, 1) for p in split_paragraphs(source.text)[:3]]
        slides.append((source.name, points))
    slides.append(("Conclusions and next steps", ["Key insights", "Recommended actions", "Open questions"]))

    template = ctx.options.get("template", "business")
    blocks = [f"Template: {template}"]
    for number, (title, points) in enumerate(slides, start=1):
        body = "\n".join(f"- {point}" for point in points)
        blocks.append(f"# Slide {number} {title}\n{body}")
    return "\n\n".join(blocks)


def quiz_placeholder(ctx: PlaceholderContext) -> str:
    basis = ctx.prior_output or ctx.basis
    keywords = top_keywords(basis, 3)
    focus = keywords[0] if keywords else "the material"
    items = [
        ("Single choice", f"Which topic is central to {ctx.title}?", f"{focus}"),
        ("True/False", "The conclusions apply without conditions.", "False, the sources state their limits."),
        ("Fill in", "The key concept is ____.", ", ".join(keywords) or "see source keywords"),
        ("Short answer", "Summarize the main findings.", split_sentences(ctx.basis, 4)),
    ]
    return "\n\n".join(
        f"{number}. [{kind}] {question}\n   Answer: {answer}"
        for number, (kind, question, answer) in enumerate(items, start=1)
    )


def flashcards_placeholder(ctx: PlaceholderContext) -> str:
    kinds = ("Concept", "Key fact", "Higher-order")
    cards = [
        f"[{kinds[i % 3]}] Q: What is {term}?\nA: Core definition and points about {term}."
        for i, term in enumerate(top_keywords(ctx.basis, 8))
    ]
    return "\n\n".join(cards) if cards else f"No flashcards could be derived for {ctx.title}."


def report_placeholder(ctx: PlaceholderContext) -> str:
    basis = ctx.basis
    style = ctx.options.get("style", "business report")
    insights = "\n".join(f"- Insight: {k}" for k in top_keywords(basis, 6))
    return (
        f"# Report: {ctx.title} ({style})\n\n"
        f"## Abstract\n{split_sentences(basis, 5)}\n\n"
        f"## Background\n{split_sentences(basis, 6)}\n\n"
        f"## Key insights\n{insights}\n\n"
        "## Reasoning\nPremise → Method → Findings → Conclusion\n\n"
        "## Conclusions and recommendations\n- Conclusion: ...\n- Recommendation: ..."
    )


def mind_map_placeholder(ctx: PlaceholderContext) -> str:
    lines = ["mindmap", f"  root(({ctx.title}))"]
    for source in ctx.sources:
        lines.append(f"    {source.name}")
        for paragraph in split_paragraphs(source.text)[:3]:
            lines.append(f"      {split_sentences(paragraph, 1)}")
    return "\n".join(lines)


def audio_overview_placeholder(ctx: PlaceholderContext) -> str:
    chapters = [
        f"Chapter {i}: {source.name}\n{split_sentences(source.text, 3)}"
        for i, source in enumerate(ctx.sources, start=1)
    ]
    minutes = max(3, len(chapters) * 2)
    return f"# Audio overview: {ctx.title}\nEstimated length: {minutes} minutes\n\n" + "\n\n".join(chapters)


def video_overview_placeholder(ctx: PlaceholderContext) -> str:
    scenes = [
        f"S{i} [00:20] Voiceover: {split_sentences(source.text, 3)}\n"
        "   Shot: medium push-in, cut to close-up\n"
        "   Visuals: key-point diagram, keyword captions"
        for i, source in enumerate(ctx.sources, start=1)
    ]
    return f"# Video overview: {ctx.title}\n\n" + "\n\n".join(scenes)


def generic_placeholder(ctx: PlaceholderContext) -> str:
    return (
        f"# {ctx.title}\n\n{split_sentences(ctx.basis, 5)}\n\n"
        f"Keywords: {', '.join(top_keywords(ctx.basis, 8))}"
    )
