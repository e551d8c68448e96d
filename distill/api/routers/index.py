"""
Index maintenance API endpoint.

Routes: POST /index/rebuild

Dependencies: distill.application.services
System role: Index maintenance HTTP API
"""

from fastapi import APIRouter, Depends

from distill.api.deps.dependencies import get_index_service
from distill.application.services.index_service import IndexService
from distill.models.common import IndexRebuildResponse

router = APIRouter(prefix="/index", tags=["index"])


@router.post("/rebuild", response_model=IndexRebuildResponse)
async def rebuild_index(
    index_service: IndexService = Depends(get_index_service),
) -> IndexRebuildResponse:
    """Discard all vectors and re-embed the corpus."""
    return await index_service.rebuild()
