"""
CORS for the public surface (/api/v1 and the embed widget).

CORS_ALLOWED_ORIGINS is "*", a comma separated list, or empty. Empty means
no CORS headers are sent at all. Admin routes never receive CORS headers.
"""

from typing import Dict, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.core.config import config

PUBLIC_PATH_PREFIXES = ("/api/v1", "/embed")

ALLOW_METHODS = "GET, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization, X-API-Key"
MAX_AGE = "86400"


def is_origin_allowed(origin: Optional[str]) -> bool:
    if not origin:
        return False
    allowed = config.cors_origins
    return "*" in allowed or origin in allowed


def get_cors_headers(origin: Optional[str]) -> Dict[str, str]:
    """Headers for a response to the given Origin; empty when not allowed"""
    allowed = config.cors_origins
    if not allowed:
        return {}

    if "*" in allowed:
        return {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
            "Access-Control-Max-Age": MAX_AGE,
        }

    if is_origin_allowed(origin):
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
            "Access-Control-Allow-Credentials": "true",
            "Access-Control-Max-Age": MAX_AGE,
            "Vary": "Origin",
        }

    return {}


class PublicCorsMiddleware(BaseHTTPMiddleware):
    """Answers preflight requests and decorates public responses"""

    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith(PUBLIC_PATH_PREFIXES):
            return await call_next(request)

        headers = get_cors_headers(request.headers.get("Origin"))

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=headers)

        response = await call_next(request)
        for name, value in headers.items():
            response.headers[name] = value
        return response
