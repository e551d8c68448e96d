"""
Ask service orchestrator.

Answers a question from retrieved chunks: builds the grounded prompt, asks
the generator (or builds a placeholder answer), picks citations from the
sources that contributed chunks and derives length and audience variants.

Dependencies: distill.core.retrieval, distill.core.citations, distill.boundary.llm
System role: Question answering use case orchestration
"""

import logging

from distill.application.context import AppContext
from distill.core.exceptions import ValidationError
from distill.core.text.chunker import split_sentences
from distill.core.text.keywords import top_keywords
from distill.models.answer import AnswerSummaries, AskRequest, AskResponse, AudienceVersions
from distill.models.chunk import Chunk
from distill.models.source import Source, SourceRef

logger = logging.getLogger(__name__)

ANSWER_SYSTEM_PROMPT = (
    "You are a NotebookLM-style knowledge distillation engine. Answer strictly from "
    "the provided excerpts and point to the evidence you use. Summarize short first, "
    "then medium, then long."
)


def build_answer_prompt(question: str, chunks: list[Chunk], sources: list[Source]) -> tuple[str, str]:
    """Group retrieved chunks by source name in first-seen order."""
    names = {source.id: source.name for source in sources}
    grouped: dict[str, list[str]] = {}
    for chunk in chunks:
        grouped.setdefault(names.get(chunk.source_id, chunk.source_id), []).append(chunk.text)

    context = "\n\n".join(
        f"[Source {i}: {name}]\n"
        + "\n".join(f"Excerpt {j}: {text}" for j, text in enumerate(texts, start=1))
        for i, (name, texts) in enumerate(grouped.items(), start=1)
    )
    user = (
        f"{context}\n\n"
        f"Question: {question}\n\n"
        "Constraints:\n"
        "- Use only the given excerpts as evidence\n"
        "- Answer in structured points, avoid speculation\n\n"
        "Output:\n"
        "1) A rigorous answer with its key evidence\n"
        "2) Layered summaries (short/medium/long)\n"
        "3) Versions for different audiences (student/expert/child)"
    )
    return ANSWER_SYSTEM_PROMPT, user


def placeholder_answer(question: str, chunks: list[Chunk]) -> str:
    if not chunks:
        return f"No source material is available to answer: {question}"
    basis = " ".join(split_sentences(chunk.text, 2) for chunk in chunks[:3])
    return f"Based on the sources: {basis}"


class AskService:
    """Ask service orchestrator."""

    def __init__(self, context: AppContext) -> None:
        self.context = context

    async def ask(self, request: AskRequest) -> AskResponse:
        """
        Answer a question.

        Args:
            request: Question, optional source filter and top-k hint

        Returns:
            AskResponse: Answer with variants, citations and cited sources

        Raises:
            ValidationError: If question is missing
        """
        question = (request.question or "").strip()
        if not question:
            raise ValidationError("Missing question", field="question")

        settings = self.context.settings.retrieval
        sources = self.context.corpus.find_sources(request.source_ids)
        k = request.top_k if request.top_k is not None else settings.default_top_k
        retrieval = await self.context.retriever.retrieve(question, sources, k)

        system, user = build_answer_prompt(question, retrieval.chunks, sources)
        answer = await self.context.generator.generate(system, user)
        degraded = not answer
        if degraded:
            answer = placeholder_answer(question, retrieval.chunks)

        contributing = {chunk.source_id for chunk in retrieval.chunks}
        cited_sources = [s for s in sources if s.id in contributing]
        citations = self.context.picker.pick(cited_sources, question, answer, settings.max_citations)

        logger.info(
            f"{__name__}:ask - Answered from {len(retrieval.chunks)} chunks",
            extra={
                "tier": retrieval.tier,
                "sources": len(cited_sources),
                "citations": len(citations),
                "degraded": degraded,
            },
        )

        short = split_sentences(answer, 2)
        medium = split_sentences(answer, 5)
        return AskResponse(
            question=question,
            answer=answer,
            summaries=AnswerSummaries(short=short, medium=medium, long=answer),
            audiences=AudienceVersions(
                student=f"{short} Key points: {', '.join(top_keywords(answer, 6))}.",
                expert=f"{medium} Methodology and assumptions are reflected in the answer.",
                child=f"{short} You can think of it as a simple story.",
            ),
            citations=citations,
            sources=[SourceRef(id=s.id, name=s.name) for s in cited_sources],
            retrieval_tier=retrieval.tier,
            degraded=degraded,
        )
