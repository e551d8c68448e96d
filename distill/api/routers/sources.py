"""
Source API endpoints.

Routes:
- GET /sources - List sources (without full text)
- POST /sources - Ingest a source
- GET /sources/{id} - Get a source with its chunks
- GET /sources/{id}/summary - Summarize a source

Dependencies: distill.application.services, distill.models
System role: Source management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from distill.api.deps.dependencies import get_source_service
from distill.application.services.source_service import SourceService
from distill.models.source import (
    CreateSourceRequest,
    Source,
    SourceListResponse,
    SourceSummaryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sources", tags=["sources"])


@router.get("", response_model=SourceListResponse)
async def list_sources(
    source_service: SourceService = Depends(get_source_service),
) -> SourceListResponse:
    return source_service.list_sources()


@router.post("", response_model=Source, status_code=201)
async def create_source(
    request: CreateSourceRequest,
    source_service: SourceService = Depends(get_source_service),
) -> Source:
    """
    Ingest a source.

    Args:
        request: Type (required), name, content, url, meta
        source_service: Injected SourceService

    Returns:
        Source: Created source with chunks and keywords

    Raises:
        ValidationError (400): Missing type
    """
    return await source_service.ingest(request)


@router.get("/{source_id}", response_model=Source)
async def get_source(
    source_id: str,
    source_service: SourceService = Depends(get_source_service),
) -> Source:
    return source_service.get_source(source_id)


@router.get("/{source_id}/summary", response_model=SourceSummaryResponse)
async def get_source_summary(
    source_id: str,
    source_service: SourceService = Depends(get_source_service),
) -> SourceSummaryResponse:
    return await source_service.summarize(source_id)
