"""
Size label and label type configuration repositories
"""

import re
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from app.repositories.base import BaseRepository


class SizeLabelRepository(BaseRepository):
    """Data access for reusable size labels"""

    entity_name = "label"
    duplicate_message = "A label with this key already exists"

    async def list_filtered(
        self, label_type: Optional[str] = None, search: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        query: Dict[str, Any] = {}
        if label_type:
            query["label_type"] = label_type
        if search:
            pattern = {"$regex": re.escape(search), "$options": "i"}
            query["$or"] = [{"key": pattern}, {"display_value": pattern}]
        return await self.find_many(
            query,
            sort=[("label_type", ASCENDING), ("sort_order", ASCENDING), ("display_value", ASCENDING)],
        )

    async def find_by_key(self, key: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"key": key})

    async def find_by_keys(self, keys: List[str]) -> List[Dict[str, Any]]:
        if not keys:
            return []
        return await self.find_many({"key": {"$in": list(keys)}})

    async def upsert_by_key(self, key: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return await self.upsert_by({"key": key}, {**fields, "key": key})


class LabelTypeConfigRepository(BaseRepository):
    """Per-label-type display overrides"""

    entity_name = "label type config"

    async def list_all(self) -> List[Dict[str, Any]]:
        return await self.find_many({})

    async def find_by_type(self, label_type: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"label_type": label_type})

    async def upsert_for_type(self, label_type: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return await self.upsert_by({"label_type": label_type}, {**fields, "label_type": label_type})

    async def delete_for_type(self, label_type: str) -> bool:
        try:
            result = await self.collection.delete_one({"label_type": label_type})
            return result.deleted_count > 0
        except PyMongoError as e:
            raise self._db_error("deletion", e)
