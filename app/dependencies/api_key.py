"""
API key authentication for the public v1 API.

Keys are read from "Authorization: Bearer <key>" first, then "X-API-Key".
A key is only required when API_AUTH_REQUIRED is set, but a key that is
sent is always validated.
"""

from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status

from app.core.config import config
from app.core.logger import logger
from app.core.rate_limit import record_auth_failure
from app.dependencies.services import get_api_key_service
from app.models.api_key import ApiScope
from app.services.api_key import ApiKeyService, ApiKeyValidation, has_scope


def extract_api_key(request: Request) -> Optional[str]:
    authorization = request.headers.get("Authorization")
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer "):]
    return request.headers.get("X-API-Key")


def require_scope(scope: ApiScope) -> Callable:
    """
    Build a dependency that authenticates the caller for one scope.

    Usage:
        @router.get("/size-charts")
        async def list_charts(api_key=Depends(require_scope(ApiScope.READ_SIZE_CHARTS))):
            ...
    """

    async def dependency(
        request: Request,
        service: ApiKeyService = Depends(get_api_key_service),
    ) -> Optional[ApiKeyValidation]:
        raw_key = extract_api_key(request)
        if not raw_key and not config.api_auth_required:
            return None

        validation = await service.validate_key(raw_key)
        if not validation.valid:
            logger.warning(
                f"API key rejected: {validation.error}",
                metadata={"event": "api_key_rejected", "path": request.url.path}
            )
            if not record_auth_failure(request):
                raise HTTPException(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    detail="Too many requests. Please try again later.",
                )
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=validation.error)

        if not has_scope(validation.scopes, scope.value):
            logger.warning(
                f"API key {validation.key['id']} lacks scope {scope.value}",
                metadata={"event": "api_key_forbidden", "api_key_id": validation.key["id"], "scope": scope.value}
            )
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")

        request.state.api_key_id = validation.key["id"]
        return validation

    return dependency
