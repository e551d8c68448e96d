"""FastAPI dependencies."""

from distill.api.deps.dependencies import (
    get_ask_service,
    get_context,
    get_flow_service,
    get_index_service,
    get_source_service,
)

__all__ = [
    "get_ask_service",
    "get_context",
    "get_flow_service",
    "get_index_service",
    "get_source_service",
]
