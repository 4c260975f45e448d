"""
Category and subcategory repositories
"""

import re
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING

from app.repositories.base import BaseRepository, to_object_id


class CategoryRepository(BaseRepository):
    """Data access for top-level categories"""

    entity_name = "category"
    duplicate_message = "A category with this name or slug already exists"

    async def list_ordered(self) -> List[Dict[str, Any]]:
        return await self.find_many({}, sort=[("display_order", ASCENDING), ("name", ASCENDING)])

    async def find_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"slug": slug})

    async def find_conflict(self, name: str, slug: str, exclude_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Find another category with the same slug or (case-insensitive) name"""
        query: Dict[str, Any] = {
            "$or": [
                {"slug": slug},
                {"name": {"$regex": f"^{re.escape(name)}$", "$options": "i"}},
            ]
        }
        if exclude_id:
            query["_id"] = {"$ne": to_object_id(exclude_id)}
        return await self.find_one(query)

    async def last_display_order(self) -> Optional[int]:
        last = await self.find_many({}, sort=[("display_order", DESCENDING)], limit=1)
        return last[0].get("display_order", 0) if last else None


class SubcategoryRepository(BaseRepository):
    """Data access for subcategories; slugs are unique per category"""

    entity_name = "subcategory"
    duplicate_message = "A subcategory with this slug already exists in this category"

    async def list_ordered(self) -> List[Dict[str, Any]]:
        return await self.find_many({}, sort=[("display_order", ASCENDING), ("name", ASCENDING)])

    async def find_by_category(self, category_id: str) -> List[Dict[str, Any]]:
        return await self.find_many(
            {"category_id": category_id},
            sort=[("display_order", ASCENDING), ("name", ASCENDING)],
        )

    async def find_by_slug(self, category_id: str, slug: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"category_id": category_id, "slug": slug})

    async def find_all_by_slug(self, slug: str) -> List[Dict[str, Any]]:
        """Subcategories with this slug in any category"""
        return await self.find_many({"slug": slug})

    async def find_conflict(
        self, category_id: str, name: str, slug: str, exclude_id: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        query: Dict[str, Any] = {
            "category_id": category_id,
            "$or": [
                {"slug": slug},
                {"name": {"$regex": f"^{re.escape(name)}$", "$options": "i"}},
            ],
        }
        if exclude_id:
            query["_id"] = {"$ne": to_object_id(exclude_id)}
        return await self.find_one(query)

    async def last_display_order(self, category_id: str) -> Optional[int]:
        last = await self.find_many(
            {"category_id": category_id}, sort=[("display_order", DESCENDING)], limit=1
        )
        return last[0].get("display_order", 0) if last else None
