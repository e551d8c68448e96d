"""
API error handling.

Maps domain exceptions to HTTP responses with the ErrorResponse body:
ValidationError → 400, SourceNotFoundError → 404, any other domain error
→ 500.

Dependencies: fastapi, distill.core.exceptions
System role: Uniform error responses
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from distill.core.exceptions import DistillException, SourceNotFoundError, ValidationError
from distill.models.common import ErrorResponse
from distill.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


def error_response(status_code: int, exc: DistillException) -> JSONResponse:
    body = ErrorResponse(error=exc.message, details=exc.details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(
        f"{__name__}:handle_validation_error - {exc.message}",
        extra={"path": request.url.path, **exc.details},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, exc)


async def handle_not_found(request: Request, exc: SourceNotFoundError) -> JSONResponse:
    logger.warning(
        f"{__name__}:handle_not_found - {exc.message}",
        extra={"path": request.url.path, **exc.details},
    )
    return error_response(status.HTTP_404_NOT_FOUND, exc)


async def handle_domain_error(request: Request, exc: DistillException) -> JSONResponse:
    log_exception_with_context(logger, "Unhandled domain error", exc, path=request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(SourceNotFoundError, handle_not_found)
    app.add_exception_handler(DistillException, handle_domain_error)
