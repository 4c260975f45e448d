"""
API key service: issuing, managing and validating public API credentials.

Only the sha256 hash of a key is stored. The raw key is returned once, when
it is created.
"""

import hashlib
import hmac
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.models.api_key import (
    API_KEY_DISPLAY_PREFIX_LENGTH,
    API_KEY_PREFIX,
    API_KEY_RANDOM_LENGTH,
    DEFAULT_SCOPES,
)
from app.repositories.api_key import ApiKeyRepository
from app.schemas.api_key import ApiKeyCreate, ApiKeyUpdate


def generate_api_key() -> Dict[str, str]:
    """Create a raw key with its storage hash and display prefix"""
    random_part = secrets.token_urlsafe(API_KEY_RANDOM_LENGTH)[:API_KEY_RANDOM_LENGTH]
    raw = f"{API_KEY_PREFIX}{random_part}"
    return {"raw": raw, "hash": hash_api_key(raw), "prefix": raw[:API_KEY_DISPLAY_PREFIX_LENGTH]}


def hash_api_key(raw_key: str) -> str:
    return hashlib.sha256(raw_key.encode("utf-8")).hexdigest()


def _as_aware(value: datetime) -> datetime:
    # MongoDB returns naive UTC datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class ApiKeyValidation:
    valid: bool
    key: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    scopes: List[str] = field(default_factory=list)


class ApiKeyService:
    """Service layer for API keys"""

    def __init__(self, repository: ApiKeyRepository):
        self.repository = repository

    @staticmethod
    def _public_view(doc: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in doc.items() if k != "key"}

    async def list_keys(self) -> List[Dict[str, Any]]:
        return [self._public_view(doc) for doc in await self.repository.list_recent()]

    async def get_key(self, key_id: str) -> Dict[str, Any]:
        doc = await self.repository.find_by_id(key_id)
        if not doc:
            raise ErrorResponse("API key not found", status_code=404)
        return self._public_view(doc)

    async def create_key(self, data: ApiKeyCreate) -> Dict[str, Any]:
        generated = generate_api_key()
        doc = await self.repository.insert({
            "name": data.name,
            "key": generated["hash"],
            "key_prefix": generated["prefix"],
            "scopes": data.scopes or list(DEFAULT_SCOPES),
            "is_active": True,
            "last_used_at": None,
            "expires_at": data.expires_at,
        })
        logger.info(
            f"Created API key {doc['id']}",
            metadata={"event": "create_api_key", "api_key_id": doc["id"], "key_prefix": generated["prefix"]}
        )
        result = self._public_view(doc)
        result["key"] = generated["raw"]
        result["message"] = "Save this API key - it won't be shown again"
        return result

    async def update_key(self, key_id: str, data: ApiKeyUpdate) -> Dict[str, Any]:
        fields = data.model_dump(exclude_unset=True)
        for required in ("name", "scopes", "is_active"):
            if required in fields and fields[required] is None:
                fields.pop(required)

        doc = await self.repository.update_by_id(key_id, fields)
        if not doc:
            raise ErrorResponse("API key not found", status_code=404)
        logger.info(
            f"Updated API key {key_id}",
            metadata={"event": "update_api_key", "api_key_id": key_id, "fields": list(fields)}
        )
        return self._public_view(doc)

    async def delete_key(self, key_id: str) -> Dict[str, Any]:
        if not await self.repository.delete_by_id(key_id):
            raise ErrorResponse("API key not found", status_code=404)
        logger.info(f"Revoked API key {key_id}", metadata={"event": "delete_api_key", "api_key_id": key_id})
        return {"success": True, "message": "API key revoked and deleted"}

    async def validate_key(self, raw_key: Optional[str]) -> ApiKeyValidation:
        """
        Validate a raw key: format, prefix lookup, constant-time hash
        comparison, active flag and expiry. Records last use on success.
        """
        if not raw_key:
            return ApiKeyValidation(valid=False, error="Missing API key")
        if not raw_key.startswith(API_KEY_PREFIX):
            return ApiKeyValidation(valid=False, error="Invalid API key format")

        key_hash = hash_api_key(raw_key)
        candidates = await self.repository.find_by_prefix(raw_key[:API_KEY_DISPLAY_PREFIX_LENGTH])
        match = next(
            (doc for doc in candidates if hmac.compare_digest(doc.get("key", ""), key_hash)),
            None,
        )
        if match is None:
            return ApiKeyValidation(valid=False, error="Invalid API key")
        if not match.get("is_active", False):
            return ApiKeyValidation(valid=False, error="API key is inactive")
        expires_at = match.get("expires_at")
        if expires_at and _as_aware(expires_at) < datetime.now(timezone.utc):
            return ApiKeyValidation(valid=False, error="API key has expired")

        await self.repository.touch_last_used(match["id"])
        return ApiKeyValidation(
            valid=True,
            key={"id": match["id"], "name": match["name"]},
            scopes=list(match.get("scopes", [])),
        )


def has_scope(scopes: List[str], required: str) -> bool:
    return required in scopes
