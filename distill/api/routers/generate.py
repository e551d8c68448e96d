"""
Generation API endpoints.

Routes:
- POST /generate - Generate a single artifact
- POST /flows - Run a multi-step flow

Dependencies: distill.application.services
System role: Artifact generation HTTP API
"""

from fastapi import APIRouter, Depends

from distill.api.deps.dependencies import get_flow_service
from distill.application.services.flow_service import FlowService
from distill.models.flow import FlowRequest, FlowResult, GenerateRequest

router = APIRouter(tags=["generate"])


@router.post("/generate", response_model=FlowResult)
async def generate(
    request: GenerateRequest,
    flow_service: FlowService = Depends(get_flow_service),
) -> FlowResult:
    """
    Generate one artifact (summary, slides, quiz, report, ...).

    Raises:
        ValidationError (400): Missing type
    """
    return await flow_service.generate(request)


@router.post("/flows", response_model=FlowResult)
async def run_flow(
    request: FlowRequest,
    flow_service: FlowService = Depends(get_flow_service),
) -> FlowResult:
    """Run steps in order, each building on the previous output."""
    return await flow_service.run_flow(request)
