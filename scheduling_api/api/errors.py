"""
Exception handlers that turn every failure into the ErrorResponse envelope.

- ServiceError subclasses map through STATUS_BY_KIND (403/404/400/500)
- request validation failures are 400 with the list of issues
- anything else is a 500 whose details are only filled when EXPOSE_ERROR_DETAILS is on
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from scheduling_api.core.errors import ServiceError
from scheduling_api.core.settings import get_app_settings
from scheduling_api.schemas.common import ErrorInfo, ErrorResponse

logger = logging.getLogger(__name__)


def error_response(
    request: Request,
    status_code: int,
    error_type: str,
    message: str,
    details: Optional[Any] = None,
) -> JSONResponse:
    state = request.state
    body = ErrorResponse(
        status=status_code,
        error=ErrorInfo(type=error_type, message=message, details=details),
        correlation_id=getattr(state, "correlation_id", None),
        tenant_id=getattr(state, "tenant_id", None),
        path=request.url.path,
        method=request.method,
        timestamp=datetime.now(tz=timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def _on_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    if isinstance(exc.detail, str):
        message, details = exc.detail, None
    else:
        message, details = "HTTP Error", exc.detail
    return error_response(request, exc.status_code, "http_error", message, details)


async def _on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "validation_error",
        "Request validation failed",
        jsonable_encoder(exc.errors()),
    )


async def _on_service_error(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Service error: %s", exc.message)
    return error_response(
        request, exc.status_code, exc.kind.value, exc.message, jsonable_encoder(exc.details)
    )


async def _on_unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error processing request")
    details = str(exc) if get_app_settings().EXPOSE_ERROR_DETAILS else None
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "An unexpected error occurred",
        details,
    )


# PUBLIC_INTERFACE
def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on `app`."""
    app.add_exception_handler(HTTPException, _on_http_exception)
    app.add_exception_handler(RequestValidationError, _on_validation_error)
    app.add_exception_handler(ServiceError, _on_service_error)
    app.add_exception_handler(Exception, _on_unhandled)
