"""
Custom exception handlers for FastAPI.

Every error response has the shape {"error": message}. Request IDs are
logged server-side for tracing but not exposed in the body.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import structlog

from community_issues.errors import IssueReporterError
from community_issues.logging import get_logger

logger = get_logger("backend.errors")


def _get_request_id() -> str:
    """Get the current request ID from the logging context."""
    return structlog.contextvars.get_contextvars().get("request_id", "-")


def _error_payload(message: str) -> dict:
    return {"error": message}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(IssueReporterError)
    async def domain_error_handler(request: Request, exc: IssueReporterError):
        logger.info(
            "domain_error",
            error=exc.message,
            error_type=type(exc).__name__,
            status_code=exc.status_code,
            request_id=_get_request_id(),
        )
        return JSONResponse(status_code=exc.status_code, content=_error_payload(exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            "http_exception",
            detail=exc.detail,
            status_code=exc.status_code,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_payload(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "request_validation_error",
            errors=exc.errors(),
            request_id=_get_request_id(),
        )
        return JSONResponse(status_code=422, content=_error_payload("Validation error"))

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        # Log full details server-side; return a generic message
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=_get_request_id(),
        )
        return JSONResponse(status_code=500, content=_error_payload("Internal server error"))
