"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures
lifespan.

Dependencies: fastapi, distill.api, distill.application, distill.observability
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from distill.api import api_router
from distill.api.errors import register_exception_handlers
from distill.application.context import AppContext, build_context
from distill.configs import Settings, get_settings
from distill.observability.logger import configure_logging
from distill.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, context: AppContext | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to build the context from (defaults to environment)
        context: Pre-built context; when given, startup builds nothing

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or (context.settings if context else get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        owns_context = context is None
        if owns_context:
            app.state.context = await build_context(settings)
        logger.info(
            f"{__name__}:lifespan - Application startup complete",
            extra={"environment": settings.environment, "backend": app.state.context.vector_store.kind},
        )

        yield

        if owns_context:
            await app.state.context.close()
        logger.info(f"{__name__}:lifespan - Application shutdown")

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Knowledge distillation backend: ingest, retrieve, cite and generate",
        version="0.1.0",
        lifespan=lifespan,
    )
    if context is not None:
        app.state.context = context

    # Added first = runs last
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "distill.main:create_app",
        factory=True,
        host="localhost",
        port=8082,
    )
