"""
Secure HTTP headers middleware.

Adds security-related headers to every response that passes through
the router, 4xx errors included. The API serves JSON only, so the
content security policy forbids everything.
"""

from collections.abc import Mapping
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Sets each configured header unless the route already set it."""

    def __init__(self, app: ASGIApp, headers: Optional[Mapping[str, str]] = None) -> None:
        super().__init__(app)
        self.headers = dict(SECURE_HEADERS if headers is None else headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response
