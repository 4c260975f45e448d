"""
Admin session and demo reset endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Request, Response

from app.core.config import config
from app.core.errors import ErrorResponse, ErrorResponseModel
from app.core.logger import logger
from app.dependencies.auth import (
    create_session_token,
    is_authenticated,
    session_max_age,
    validate_credentials,
)
from app.dependencies.services import get_demo_service
from app.schemas.auth import AdminLogin
from app.services.demo import DemoService, check_demo_access

router = APIRouter()


def _set_session_cookie(response: Response, token: str, max_age: int) -> None:
    response.set_cookie(
        key=config.admin_session_cookie,
        value=token,
        max_age=max_age,
        httponly=True,
        secure=config.environment == "production",
        samesite="lax",
        path="/",
    )


@router.post(
    "/auth",
    response_model=dict,
    responses={400: {"model": ErrorResponseModel}, 401: {"model": ErrorResponseModel}},
)
async def login(data: AdminLogin, response: Response):
    """Start an admin session; succeeds trivially when authentication is disabled"""
    if not config.admin_auth_enabled:
        return {"success": True, "message": "Authentication not required"}

    if not validate_credentials(data.username, data.password):
        logger.warning("Admin login failed", metadata={"event": "admin_login_failed"})
        raise ErrorResponse("Invalid credentials", status_code=401)

    _set_session_cookie(response, create_session_token(data.username), session_max_age())
    logger.info("Admin login succeeded", metadata={"event": "admin_login"})
    return {"success": True, "message": "Login successful"}


@router.delete("/auth", response_model=dict)
async def logout(response: Response):
    _set_session_cookie(response, "", 0)
    return {"success": True, "message": "Logged out successfully"}


@router.get("/auth", response_model=dict)
async def auth_status(request: Request, authorization: Optional[str] = Header(None)):
    enabled = config.admin_auth_enabled
    return {
        "auth_enabled": enabled,
        "authenticated": (not enabled) or is_authenticated(request, authorization),
    }


@router.post(
    "/demo-reset",
    response_model=dict,
    responses={401: {"model": ErrorResponseModel}, 403: {"model": ErrorResponseModel}},
)
async def demo_reset(
    authorization: Optional[str] = Header(None),
    service: DemoService = Depends(get_demo_service),
):
    """
    Restore the demo dataset.
    Intended to be called by a scheduler twice a day (00:00 and 12:00 UTC).
    """
    check_demo_access(authorization)
    return await service.reset()


@router.get("/demo-reset", response_model=dict)
async def demo_status():
    """Whether demo mode is on, with the last and next reset times"""
    return DemoService.status()
