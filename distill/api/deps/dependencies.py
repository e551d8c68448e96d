"""
Dependency injection.

Resolves the application context built at startup from the app state and
wraps it in per-request service orchestrators.

Dependencies: fastapi, distill.application
System role: DI for service injection
"""

from fastapi import Depends, Request

from distill.application.context import AppContext
from distill.application.services import AskService, FlowService, IndexService, SourceService


def get_context(request: Request) -> AppContext:
    """
    Get the application context.

    Raises:
        RuntimeError: If the app was started without a context
    """
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise RuntimeError("Application context not initialized")
    return context


def get_source_service(context: AppContext = Depends(get_context)) -> SourceService:
    return SourceService(context)


def get_ask_service(context: AppContext = Depends(get_context)) -> AskService:
    return AskService(context)


def get_flow_service(context: AppContext = Depends(get_context)) -> FlowService:
    return FlowService(context)


def get_index_service(context: AppContext = Depends(get_context)) -> IndexService:
    return IndexService(context)
