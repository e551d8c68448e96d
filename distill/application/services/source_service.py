"""
Source service orchestrator.

Coordinates ingestion, listing, lookup and summaries of sources.

Dependencies: distill.core.text, distill.core.retrieval, distill.boundary.llm
System role: Source use case orchestration
"""

import logging
import uuid

from distill.application.context import AppContext
from distill.core.exceptions import SourceNotFoundError, ValidationError
from distill.core.text.chunker import split_paragraphs, split_sentences
from distill.core.text.keywords import top_keywords
from distill.models.chunk import Chunk
from distill.models.source import (
    CreateSourceRequest,
    Source,
    SourceListItem,
    SourceListResponse,
    SourceSummaryResponse,
    utc_now,
)

logger = logging.getLogger(__name__)

SUMMARY_SYSTEM_PROMPT = (
    "You are a knowledge distillation engine. Summarize the material at several "
    "levels of detail and extract its key concepts."
)
SUMMARY_TEXT_CHARS = 6000


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def naive_summary(text: str) -> dict:
    """Deterministic summary used when no generator answers."""
    return {
        "summaries": {
            "short": split_sentences(text, 2),
            "medium": split_sentences(text, 5),
            "long": split_sentences(text, 12),
        },
        "keywords": top_keywords(text, 10),
        "notes": "Placeholder summary, generator unavailable",
    }


class SourceService:
    """Source service orchestrator."""

    def __init__(self, context: AppContext) -> None:
        """
        Initialize source service.

        Args:
            context: Application context
        """
        self.context = context

    async def ingest(self, request: CreateSourceRequest) -> Source:
        """
        Ingest a source: chunk, extract keywords, persist, embed when indexed.

        Args:
            request: Source payload

        Returns:
            Source: Created source

        Raises:
            ValidationError: If type is missing
        """
        if request.type is None:
            raise ValidationError("Missing type", field="type")

        source_id = new_id("src")
        text = request.content
        if not text:
            text = f"Pending fetch for {request.type.value}"
            if request.url:
                text += f" → {request.url}"

        chunks = [
            Chunk(id=new_id("chk"), index=i, text=paragraph, source_id=source_id)
            for i, paragraph in enumerate(split_paragraphs(text))
        ]
        now = utc_now()
        source = Source(
            id=source_id,
            type=request.type,
            name=request.name or source_id,
            url=request.url,
            meta=request.meta or {},
            text=text,
            chunks=chunks,
            keywords=top_keywords(text),
            created_at=now,
            updated_at=now,
        )
        self.context.corpus.sources.append(source)
        self.context.save()
        logger.info(
            f"{__name__}:ingest - Source ingested",
            extra={"source_id": source_id, "type": request.type.value, "chunks": len(chunks)},
        )

        embedded = await self.context.indexer.index_source(source)
        if embedded < len(chunks) and self.context.corpus.index is not None:
            logger.info(
                f"{__name__}:ingest - {len(chunks) - embedded} chunks left pending for backfill",
                extra={"source_id": source_id},
            )
        return source

    def list_sources(self) -> SourceListResponse:
        items = [SourceListItem.from_source(s) for s in self.context.corpus.sources]
        return SourceListResponse(sources=items, total=len(items))

    def get_source(self, source_id: str) -> Source:
        """
        Get source by ID.

        Raises:
            SourceNotFoundError: If no source has this ID
        """
        source = self.context.corpus.get_source(source_id)
        if source is None:
            raise SourceNotFoundError(source_id)
        return source

    async def summarize(self, source_id: str) -> SourceSummaryResponse:
        """
        Summarize one source with the generator, or a naive placeholder.

        Raises:
            SourceNotFoundError: If no source has this ID
        """
        source = self.get_source(source_id)
        user = (
            f"Source name: {source.name}\n\n"
            f"Text:\n{source.text[:SUMMARY_TEXT_CHARS]}\n\n"
            "Provide:\n"
            "- Summaries (short/medium/long)\n"
            "- Key concepts\n"
            "- Explanations for a student, an expert and a child"
        )
        output = await self.context.generator.generate(SUMMARY_SYSTEM_PROMPT, user)
        if output:
            return SourceSummaryResponse(id=source.id, name=source.name, summary=output)
        return SourceSummaryResponse(
            id=source.id,
            name=source.name,
            summary=naive_summary(source.text),
            degraded=True,
        )
