"""
Admin session authentication for FastAPI.

Sessions are signed JWTs carried in an httpOnly cookie (or an
Authorization: Bearer header). Authentication is skipped entirely when
admin credentials are not configured or demo mode is on.
"""

import hmac
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Cookie, Header, HTTPException, Request, status

from app.core.config import config
from app.core.logger import logger


class AuthError(Exception):
    """Authentication failure with an HTTP status"""
    def __init__(self, message: str, status_code: int = 401):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def validate_credentials(username: str, password: str) -> bool:
    """Compare against the configured admin credentials in constant time"""
    if not config.admin_username or not config.admin_password:
        return False
    valid_username = hmac.compare_digest(username.encode(), config.admin_username.encode())
    valid_password = hmac.compare_digest(password.encode(), config.admin_password.encode())
    return valid_username and valid_password


def session_max_age() -> int:
    return config.admin_session_hours * 3600


def create_session_token(username: str) -> str:
    """Signed session token valid for the configured number of hours"""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "role": "admin",
        "iat": now,
        "exp": now + timedelta(hours=config.admin_session_hours),
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def decode_session_token(token: str) -> dict:
    """
    Decode and validate a session token

    Raises:
        AuthError: If token is invalid or expired
    """
    try:
        return jwt.decode(token, config.jwt_secret, algorithms=[config.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthError("Session has expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid session token: {str(e)}")
        raise AuthError("Invalid session")


def extract_session_token(request: Request, authorization: Optional[str]) -> Optional[str]:
    token = request.cookies.get(config.admin_session_cookie)
    if token:
        return token
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer "):].strip() or None
    return None


def is_authenticated(request: Request, authorization: Optional[str] = None) -> bool:
    token = extract_session_token(request, authorization)
    if not token:
        return False
    try:
        decode_session_token(token)
    except AuthError:
        return False
    return True


async def require_admin(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> Optional[str]:
    """
    Dependency guarding admin routers. Returns the session's username, or
    None when admin authentication is disabled.

    Usage:
        router = APIRouter(dependencies=[Depends(require_admin)])
    """
    if not config.admin_auth_enabled:
        return None

    token = extract_session_token(request, authorization)
    if not token:
        logger.warning(
            "Authentication required: no admin session",
            metadata={"event": "admin_auth_missing", "path": request.url.path}
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_session_token(token)
    except AuthError as e:
        logger.warning(
            f"Admin authentication failed: {e.message}",
            metadata={"event": "admin_auth_failed", "path": request.url.path}
        )
        raise HTTPException(
            status_code=e.status_code,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return payload.get("sub")
