"""
Centralized error handlers for FastAPI.

Maps domain errors, framework errors and unexpected failures to HTTP
responses. Every error body is {"msg": <fixed string>}; no stack
traces, SQL or other internal details are exposed to clients.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.news.errors import (
    BadRequestError,
    MissingInfoError,
    NewsDomainError,
    ResourceNotFoundError,
    UsernameAlreadyExistsError,
)
from app.shared.security.rate_limiting import rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_405 = 405
HTTP_500 = 500

NOT_FOUND = "NOT FOUND"
BAD_REQUEST = "BAD REQUEST"
MISSING_INFO = "MISSING INFO"
INVALID_METHOD = "INVALID METHOD"
INTERNAL_SERVER_ERROR = "INTERNAL SERVER ERROR"

# Pydantic error types meaning "field absent or empty".
_MISSING_FIELD_TYPES = frozenset({"missing", "string_too_short"})


def _error_response(
    status_code: int, msg: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"msg": msg}, headers=headers)


def _is_missing_info(request: Request, exc: RequestValidationError) -> bool:
    """True when a create payload failed only because fields were absent or empty."""
    if request.method != "POST":
        return False
    errors = exc.errors()
    return bool(errors) and all(error.get("type") in _MISSING_FIELD_TYPES for error in errors)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ResourceNotFoundError)
    async def handle_not_found(_request: Request, exc: ResourceNotFoundError) -> JSONResponse:
        """Handle lookups by a valid identifier that matched nothing."""
        logger.warning("Not found: %s %s", exc.resource, exc.identifier)
        return _error_response(HTTP_404, exc.client_message)

    @app.exception_handler(BadRequestError)
    async def handle_bad_request(_request: Request, exc: BadRequestError) -> JSONResponse:
        """Handle malformed identifiers, list parameters and vote deltas."""
        logger.warning("Bad request: field=%s", exc.field)
        return _error_response(HTTP_400, exc.client_message)

    @app.exception_handler(MissingInfoError)
    async def handle_missing_info(_request: Request, exc: MissingInfoError) -> JSONResponse:
        logger.warning("Missing info on %s: %s", exc.resource, ", ".join(exc.missing))
        return _error_response(HTTP_400, exc.client_message)

    @app.exception_handler(UsernameAlreadyExistsError)
    async def handle_username_taken(
        _request: Request, exc: UsernameAlreadyExistsError
    ) -> JSONResponse:
        logger.warning("Username already exists: %s", exc.username)
        return _error_response(HTTP_400, exc.client_message)

    @app.exception_handler(NewsDomainError)
    async def handle_news_domain(_request: Request, exc: NewsDomainError) -> JSONResponse:
        """Catch-all for unhandled news domain errors."""
        logger.error("Unhandled news domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_SERVER_ERROR)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Map request body/query validation failures.

        A POST whose only problems are absent or empty fields is a
        MISSING INFO; everything else is a BAD REQUEST.
        """
        if _is_missing_info(request, exc):
            logger.warning("Missing info on %s %s", request.method, request.url.path)
            return _error_response(HTTP_400, MISSING_INFO)
        logger.warning(
            "Request validation failed on %s %s (%d errors)",
            request.method,
            request.url.path,
            len(exc.errors()),
        )
        return _error_response(HTTP_400, BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle unmatched routes, unsupported methods and other HTTP errors."""
        if exc.status_code == HTTP_404:
            msg = NOT_FOUND
        elif exc.status_code == HTTP_405:
            msg = INVALID_METHOD
        else:
            msg = HTTPStatus(exc.status_code).phrase.upper()
        logger.warning("HTTP %d on %s %s", exc.status_code, request.method, request.url.path)
        return _error_response(exc.status_code, msg, headers=getattr(exc, "headers", None))

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_SERVER_ERROR)
