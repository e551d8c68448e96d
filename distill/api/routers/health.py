"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: distill.application.services
System role: Health check HTTP API
"""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from distill.api.deps.dependencies import get_index_service
from distill.application.services.index_service import IndexService


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    details: dict[str, Any] | None = None


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=HealthResponse)
async def health_check_vector_store(
    index_service: IndexService = Depends(get_index_service),
) -> HealthResponse:
    """Active vector backend, record count and corpus index identity."""
    details = await index_service.status()
    return HealthResponse(
        status="healthy",
        message=f"Vector store '{details['backend']}' accessible",
        details=details,
    )
