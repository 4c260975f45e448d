"""
Rate limiting for the public v1 API (slowapi).

Fixed one-minute windows, counted per API key when one is sent and per
client address otherwise. Rejected API keys are also counted per client
address. Counters live in process memory.
"""

import hashlib

from fastapi import Request
from fastapi.responses import JSONResponse
from limits import parse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from app.core.config import config
from app.core.logger import logger


def rate_limit_key(request: Request) -> str:
    """Bucket key: a digest of the API key, or the client address"""
    authorization = request.headers.get("Authorization")
    raw_key = None
    if authorization and authorization.startswith("Bearer "):
        raw_key = authorization[len("Bearer "):]
    raw_key = raw_key or request.headers.get("X-API-Key")
    if raw_key:
        return "key:" + hashlib.sha256(raw_key.encode("utf-8")).hexdigest()[:16]
    return "ip:" + get_remote_address(request)


def public_api_limit() -> str:
    return f"{config.rate_limit_per_minute}/minute"


AUTH_FAILURE_SCOPE = "api-key-failure"


limiter = Limiter(
    key_func=rate_limit_key,
    enabled=not config.rate_limit_disabled,
    headers_enabled=True,
    strategy="fixed-window",
)


def record_auth_failure(request: Request) -> bool:
    """
    Count a rejected API key against the caller's address.

    Rejections share one bucket per address whatever key was sent.
    Returns False once the allowance for the current window is spent.
    """
    if not limiter.enabled:
        return True
    return limiter.limiter.hit(parse(public_api_limit()), AUTH_FAILURE_SCOPE, get_remote_address(request))


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(
        "Rate limit exceeded",
        metadata={
            "event": "rate_limit_exceeded",
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
            "limit": str(exc.detail),
        }
    )
    response = JSONResponse(
        status_code=429,
        content={"error": "Too many requests. Please try again later."},
    )
    return request.app.state.limiter._inject_headers(response, request.state.view_rate_limit)
