"""
API key repository
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from app.repositories.base import BaseRepository, to_object_id


class ApiKeyRepository(BaseRepository):
    """Data access for hashed public API keys"""

    entity_name = "API key"

    async def list_recent(self) -> List[Dict[str, Any]]:
        return await self.find_many({}, sort=[("created_at", DESCENDING)])

    async def find_by_prefix(self, key_prefix: str) -> List[Dict[str, Any]]:
        return await self.find_many({"key_prefix": key_prefix})

    async def touch_last_used(self, key_id: str) -> None:
        """Record usage without bumping updated_at"""
        obj_id = to_object_id(key_id)
        if obj_id is None:
            return
        try:
            await self.collection.update_one(
                {"_id": obj_id},
                {"$set": {"last_used_at": datetime.now(timezone.utc)}},
            )
        except PyMongoError as e:
            raise self._db_error("update", e)
