"""API routers."""

from .ask import router as ask_router
from .generate import router as generate_router
from .health import router as health_router
from .index import router as index_router
from .sources import router as sources_router

__all__ = [
    "ask_router",
    "generate_router",
    "health_router",
    "index_router",
    "sources_router",
]
