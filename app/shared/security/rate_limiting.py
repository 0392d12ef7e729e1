"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client default limit on every route.
The limit and an on/off switch come from settings.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger(__name__)

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard error envelope.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    logger.warning("Rate limit exceeded on %s: %s", request.url.path, exc.detail)
    return JSONResponse(status_code=429, content={"msg": "TOO MANY REQUESTS"})
