"""
Response headers middleware.

Adds standard security headers to every HTTP response and marks
diagnostic API responses as non-cacheable, since each one reflects the
database state at the moment of the request.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Injects security headers into all responses."""

    SECURITY_HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "strict-origin-when-cross-origin",
        "Content-Security-Policy": (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "script-src 'self'; "
            "img-src 'self' data:"
        ),
    }

    NO_CACHE_PREFIXES = ("/api/", "/health", "/actuator/")

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        for header, value in self.SECURITY_HEADERS.items():
            response.headers[header] = value

        if request.url.path.startswith(self.NO_CACHE_PREFIXES):
            response.headers["Cache-Control"] = "no-store"

        return response
