"""
Question answering API endpoint.

Routes: POST /ask

Dependencies: distill.application.services
System role: Q&A HTTP API
"""

from fastapi import APIRouter, Depends

from distill.api.deps.dependencies import get_ask_service
from distill.application.services.ask_service import AskService
from distill.models.answer import AskRequest, AskResponse

router = APIRouter(tags=["ask"])


@router.post("/ask", response_model=AskResponse)
async def ask(
    request: AskRequest,
    ask_service: AskService = Depends(get_ask_service),
) -> AskResponse:
    """
    Answer a question from the selected sources.

    Raises:
        ValidationError (400): Missing question
    """
    return await ask_service.ask(request)
