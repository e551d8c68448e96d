"""
Flow step table.

Maps step identifiers to their title, generation instructions and
deterministic placeholder. Unknown identifiers resolve to a generic step.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from distill.core.flow.placeholders import (
    PlaceholderContext,
    audio_overview_placeholder,
    flashcards_placeholder,
    generic_placeholder,
    mind_map_placeholder,
    quiz_placeholder,
    report_placeholder,
    slides_placeholder,
    summarize_placeholder,
    video_overview_placeholder,
)
from distill.models.chunk import Chunk
from distill.models.source import Source

SYSTEM_PROMPT = (
    "You are a cross-media generator and instructional designer. Follow the requested "
    "structure exactly, ground every statement in the provided excerpts and quote the "
    "snippets you rely on."
)


class FlowStepType(str, Enum):
    """Known generation steps."""

    SUMMARIZE = "summarize"
    OUTLINE_SLIDES = "outline_slides"
    QUIZ = "quiz"
    FLASHCARDS = "flashcards"
    REPORT = "report"
    MIND_MAP = "mind_map"
    AUDIO_OVERVIEW = "audio_overview"
    VIDEO_OVERVIEW = "video_overview"

    @classmethod
    def parse(cls, value: str) -> "FlowStepType | None":
        value = (value or "").strip().lower()
        if value == "slides":
            return cls.OUTLINE_SLIDES
        try:
            return cls(value)
        except ValueError:
            return None


DEFAULT_FLOW: tuple[FlowStepType, ...] = (
    FlowStepType.SUMMARIZE,
    FlowStepType.OUTLINE_SLIDES,
    FlowStepType.QUIZ,
)


@dataclass(frozen=True)
class StepSpec:
    """How one step is prompted and what replaces a missing output."""

    title: str
    instructions: str
    placeholder: Callable[[PlaceholderContext], str]
    option_defaults: dict[str, Any] = field(default_factory=dict)

    def render_instructions(self, options: dict[str, Any]) -> str:
        values = {**self.option_defaults, **{k: v for k, v in options.items() if k in self.option_defaults}}
        return self.instructions.format(**values)


STEP_SPECS: dict[FlowStepType, StepSpec] = {
    FlowStepType.SUMMARIZE: StepSpec(
        title="Summary",
        instructions=(
            "Write a layered summary: a two-sentence short version, a five-sentence "
            "medium version and a full version, followed by the key concepts."
        ),
        placeholder=summarize_placeholder,
    ),
    FlowStepType.OUTLINE_SLIDES: StepSpec(
        title="Slide outline",
        instructions=(
            "Produce a slide deck outline as '# Slide N Title' headings with bullet "
            "points. Template style: {template}."
        ),
        placeholder=slides_placeholder,
        option_defaults={"template": "business"},
    ),
    FlowStepType.QUIZ: StepSpec(
        title="Quiz",
        instructions=(
            "Write a quiz with single choice, multiple choice, true/false, fill-in and "
            "short answer items, each with the correct answer and an explanation."
        ),
        placeholder=quiz_placeholder,
    ),
    FlowStepType.FLASHCARDS: StepSpec(
        title="Flashcards",
        instructions=(
            "Write Q/A flashcards: concept cards, key fact cards and higher-order "
            "(Bloom) question cards."
        ),
        placeholder=flashcards_placeholder,
    ),
    FlowStepType.REPORT: StepSpec(
        title="Report",
        instructions=(
            "Write a structured report: abstract, background, key insights, chain of "
            "reasoning, cited data, conclusions and recommendations. Style: {style}."
        ),
        placeholder=report_placeholder,
        option_defaults={"style": "business report"},
    ),
    FlowStepType.MIND_MAP: StepSpec(
        title="Mind map",
        instructions=(
            "Produce a mind map hierarchy (central idea, first, second and third level) "
            "and a Mermaid mindmap version."
        ),
        placeholder=mind_map_placeholder,
    ),
    FlowStepType.AUDIO_OVERVIEW: StepSpec(
        title="Audio overview",
        instructions=(
            "Produce an audio overview: cover title, chapter structure, a narration "
            "script ready to be read aloud and a duration estimate."
        ),
        placeholder=audio_overview_placeholder,
    ),
    FlowStepType.VIDEO_OVERVIEW: StepSpec(
        title="Video overview",
        instructions=(
            "Produce a video overview: narrated script, shot list, structure outline, "
            "visual suggestions and a timeline."
        ),
        placeholder=video_overview_placeholder,
    ),
}

GENERIC_SPEC = StepSpec(
    title="Overview",
    instructions="Produce a well structured overview of the material.",
    placeholder=generic_placeholder,
)


def resolve_step(step_id: str) -> StepSpec:
    step_type = FlowStepType.parse(step_id)
    if step_type is None:
        return GENERIC_SPEC
    return STEP_SPECS[step_type]


def build_step_prompt(
    spec: StepSpec,
    chunks: Sequence[Chunk],
    sources: Sequence[Source],
    options: dict[str, Any],
    prior_output: str | None,
) -> tuple[str, str]:
    """
    Build (system, user) prompts for one step.

    Excerpts are grouped by source in first-seen order. The previous step's
    output, when present, is included so steps build on each other.
    """
    names = {source.id: source.name for source in sources}
    grouped: dict[str, list[str]] = {}
    for chunk in chunks:
        grouped.setdefault(names.get(chunk.source_id, chunk.source_id), []).append(chunk.text)

    blocks = []
    for number, (name, texts) in enumerate(grouped.items(), start=1):
        excerpts = "\n".join(f"Excerpt {i}: {text}" for i, text in enumerate(texts, start=1))
        blocks.append(f"[Source {number}: {name}]\n{excerpts}")

    parts = ["\n\n".join(blocks) if blocks else "(no excerpts available)"]
    if prior_output:
        parts.append(f"Output of the previous step:\n{prior_output}")
    title = options.get("title")
    if title:
        parts.append(f"Title: {title}")
    parts.append(
        f"Task: {spec.render_instructions(options)}\n\n"
        "The output must be clearly structured, ready to copy and cite its sources."
    )
    return SYSTEM_PROMPT, "\n\n".join(parts)
