"""
Flow orchestration.

Runs generation steps strictly in sequence over one shared retrieval
context. Each step sees the previous step's output; a missing or too short
output is replaced by the step's deterministic placeholder. Citations are
picked per step and deduplicated across the flow.

Dependencies: distill.core.retrieval, distill.core.citations, distill.core.flow
System role: Multi-step artifact generation
"""

import logging
from typing import Literal, Protocol

from distill.core.citations.citation_picker import CitationPicker, dedupe_citations
from distill.core.flow.placeholders import PlaceholderContext
from distill.core.flow.steps import DEFAULT_FLOW, build_step_prompt, resolve_step
from distill.core.retrieval.retriever import Retriever
from distill.models.chunk import Chunk
from distill.models.citation import Citation
from distill.models.flow import FlowResult, FlowStep, FlowStepResult
from distill.models.source import Source, SourceRef

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(
        self,
        system: str | None,
        user: str,
        expect: Literal["text", "json"] = "text",
    ) -> str | None: ...


def default_steps() -> list[FlowStep]:
    return [FlowStep(id=step.value) for step in DEFAULT_FLOW]


class FlowOrchestrator:
    """Sequential multi-step generator."""

    def __init__(
        self,
        retriever: Retriever,
        generator: TextGenerator,
        picker: CitationPicker,
        context_query: str,
        context_k: int = 16,
        min_output_chars: int = 30,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            retriever: Retrieval cascade for the shared context
            generator: Generative collaborator
            picker: Citation picker
            context_query: Broad query gathering the shared context
            context_k: Shared context size
            min_output_chars: Shorter outputs are replaced by placeholders
        """
        self.retriever = retriever
        self.generator = generator
        self.picker = picker
        self.context_query = context_query
        self.context_k = context_k
        self.min_output_chars = min_output_chars

    async def run(self, steps: list[FlowStep] | None, sources: list[Source]) -> FlowResult:
        """
        Run a flow.

        Args:
            steps: Ordered steps (default summarize, outline_slides, quiz)
            sources: Sources the flow works on

        Returns:
            FlowResult: Per-step outputs and deduplicated citations
        """
        steps = steps or default_steps()
        retrieval = await self.retriever.retrieve(self.context_query, sources, self.context_k)
        logger.info(
            f"{__name__}:run - Running {len(steps)} steps over {len(retrieval.chunks)} chunks",
            extra={"steps": [s.id for s in steps], "tier": retrieval.tier},
        )

        results: list[FlowStepResult] = []
        collected: list[Citation] = []
        prior_output: str | None = None
        for step in steps:
            result = await self._execute(step, retrieval.chunks, sources, prior_output)
            results.append(result)
            collected.extend(result.citations)
            prior_output = result.output

        return FlowResult(
            steps=results,
            citations=dedupe_citations(collected),
            sources=[SourceRef(id=s.id, name=s.name) for s in sources],
        )

    async def run_step(self, step: FlowStep, sources: list[Source]) -> FlowResult:
        """Generate a single artifact."""
        return await self.run([step], sources)

    async def _execute(
        self,
        step: FlowStep,
        chunks: list[Chunk],
        sources: list[Source],
        prior_output: str | None,
    ) -> FlowStepResult:
        spec = resolve_step(step.id)
        system, user = build_step_prompt(spec, chunks, sources, step.options, prior_output)
        output = await self.generator.generate(system, user, expect="text")

        degraded = output is None or len(output.strip()) < self.min_output_chars
        if degraded:
            logger.info(f"{__name__}:_execute - Step {step.id} using placeholder output")
            title = step.options.get("title") or (sources[0].name if sources else spec.title)
            output = spec.placeholder(
                PlaceholderContext(
                    title=title,
                    sources=sources,
                    chunks=chunks,
                    options=step.options,
                    prior_output=prior_output,
                )
            )

        citations = self.picker.pick(sources, step.options.get("title") or spec.title, output)
        return FlowStepResult(id=step.id, output=output, citations=citations, degraded=degraded)
