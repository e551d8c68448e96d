"""Multi-step generation flows."""

from distill.core.flow.orchestrator import FlowOrchestrator, default_steps
from distill.core.flow.steps import FlowStepType, StepSpec, build_step_prompt, resolve_step

__all__ = [
    "FlowOrchestrator",
    "FlowStepType",
    "StepSpec",
    "build_step_prompt",
    "default_steps",
    "resolve_step",
]
