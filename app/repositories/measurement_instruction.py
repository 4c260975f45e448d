"""
Measurement instruction repository
"""

from typing import Any, Dict, List, Optional

from pymongo import ASCENDING

from app.repositories.base import BaseRepository


class MeasurementInstructionRepository(BaseRepository):
    """Data access for "how to measure" instructions"""

    entity_name = "measurement instruction"
    duplicate_message = "An instruction with this key already exists"

    async def list_ordered(self) -> List[Dict[str, Any]]:
        return await self.find_many({}, sort=[("sort_order", ASCENDING), ("name", ASCENDING)])

    async def find_by_key(self, key: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"key": key})

    async def find_by_keys(self, keys: List[str]) -> List[Dict[str, Any]]:
        if not keys:
            return []
        return await self.find_many({"key": {"$in": list(keys)}})

    async def upsert_by_key(self, key: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return await self.upsert_by({"key": key}, {**fields, "key": key})
