"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    ask_router,
    generate_router,
    health_router,
    index_router,
    sources_router,
)

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(sources_router)
api_router.include_router(ask_router)
api_router.include_router(generate_router)
api_router.include_router(index_router)

__all__ = ["api_router"]
