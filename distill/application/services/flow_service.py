"""
Flow service orchestrator.

Runs multi-step flows and single-artifact generation over selected sources.

Dependencies: distill.core.flow
System role: Generation use case orchestration
"""

from distill.application.context import AppContext
from distill.core.exceptions import ValidationError
from distill.models.flow import FlowRequest, FlowResult, FlowStep, GenerateRequest


class FlowService:
    """Flow service orchestrator."""

    def __init__(self, context: AppContext) -> None:
        self.context = context

    async def run_flow(self, request: FlowRequest) -> FlowResult:
        sources = self.context.corpus.find_sources(request.source_ids)
        return await self.context.orchestrator.run(request.steps, sources)

    async def generate(self, request: GenerateRequest) -> FlowResult:
        """
        Generate one artifact.

        Raises:
            ValidationError: If type is missing
        """
        if not request.type:
            raise ValidationError("Missing type", field="type")
        sources = self.context.corpus.find_sources(request.source_ids)
        step = FlowStep(id=request.type, options=request.options)
        return await self.context.orchestrator.run_step(step, sources)
