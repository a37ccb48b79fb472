"""
Error handlers for the FastAPI application.

The only place where failures become HTTP responses. Every error body is
a flat ``{"msg": str}``; no stack traces or internal details reach the client.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nc_news.core.errors import BadRequest, InternalError, NewsApiError

logger = logging.getLogger(__name__)

INVALID_ENDPOINT_MSG = "Invalid endpoint."


def _error_response(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


def unexpected_error_response(request: Request, exc: Exception) -> JSONResponse:
    """500 for anything unclassified. Also used by the request-id middleware."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}",
        exc_info=exc,
    )
    return _error_response(InternalError.status_code, InternalError.default_msg)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the application."""

    @app.exception_handler(NewsApiError)
    async def handle_classified(request: Request, exc: NewsApiError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.__cause__!r}"
            )
        else:
            logger.warning(
                f"{type(exc).__name__} on {request.method} {request.url.path}: "
                f"{getattr(exc, 'reason', None) or exc.msg}"
            )
        return _error_response(exc.status_code, exc.msg)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Raised by FastAPI itself, e.g. for a body that is not valid JSON.
        logger.warning(f"Request parsing failed on {request.method} {request.url.path}")
        return _error_response(BadRequest.status_code, BadRequest.default_msg)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # 405 means the path exists but not for this method: still no matching route.
        if exc.status_code in (404, 405):
            logger.warning(f"No route for {request.method} {request.url.path}")
            return _error_response(404, INVALID_ENDPOINT_MSG)
        logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        return unexpected_error_response(request, exc)
