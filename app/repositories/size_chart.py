"""
Size chart repository.

Charts embed their columns, rows, cells and link lists, so structural
updates are single document writes.
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from app.repositories.base import BaseRepository, to_object_id


class SizeChartRepository(BaseRepository):
    """Data access for size charts"""

    entity_name = "size chart"
    duplicate_message = "A size chart with this slug already exists"

    @staticmethod
    def build_filter_query(
        subcategory_ids: Optional[List[str]] = None,
        search: Optional[str] = None,
        is_published: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Build a MongoDB query from admin list filters"""
        query: Dict[str, Any] = {}
        if subcategory_ids is not None:
            query["subcategories.subcategory_id"] = {"$in": subcategory_ids}
        if search:
            pattern = {"$regex": re.escape(search), "$options": "i"}
            query["$or"] = [{"name": pattern}, {"description": pattern}, {"slug": pattern}]
        if is_published is not None:
            query["is_published"] = is_published
        return query

    async def search(
        self,
        query: Dict[str, Any],
        page: int = 1,
        limit: int = 20,
    ) -> Tuple[List[Dict[str, Any]], int]:
        """Return one page of charts sorted by name, plus the total match count"""
        skip = (page - 1) * limit
        charts = await self.find_many(query, sort=[("name", ASCENDING)], skip=skip, limit=limit)
        total = await self.count(query)
        return charts, total

    async def find_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        return await self.find_one({"slug": slug})

    async def slug_exists(self, slug: str, exclude_id: Optional[str] = None) -> bool:
        query: Dict[str, Any] = {"slug": slug}
        if exclude_id:
            query["_id"] = {"$ne": to_object_id(exclude_id)}
        return await self.find_one(query) is not None

    async def find_by_subcategories(
        self, subcategory_ids: List[str], published_only: bool = False
    ) -> List[Dict[str, Any]]:
        query: Dict[str, Any] = {"subcategories.subcategory_id": {"$in": subcategory_ids}}
        if published_only:
            query["is_published"] = True
        return await self.find_many(query, sort=[("name", ASCENDING)])

    async def list_navigation_entries(self) -> List[Dict[str, Any]]:
        """Every chart reduced to what the navigation tree shows, sorted by name"""
        return await self.find_many(
            {},
            sort=[("name", ASCENDING)],
            projection={"name": 1, "slug": 1, "is_published": 1, "subcategories": 1},
        )

    async def count_by_subcategories(self, subcategory_ids: List[str]) -> int:
        return await self.count({"subcategories.subcategory_id": {"$in": subcategory_ids}})

    async def chart_counts_by_subcategory(self, published_only: bool = False) -> Dict[str, int]:
        """Map subcategory id to the number of charts linked to it"""
        pipeline: List[Dict[str, Any]] = []
        if published_only:
            pipeline.append({"$match": {"is_published": True}})
        pipeline.extend([
            {"$unwind": "$subcategories"},
            {"$group": {"_id": "$subcategories.subcategory_id", "count": {"$sum": 1}}},
        ])
        try:
            cursor = self.collection.aggregate(pipeline)
            results = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._db_error("aggregation", e)
        return {result["_id"]: result["count"] for result in results}

    async def count_label_usage(self, label_id: str) -> int:
        """Number of cells across all charts that reference a label"""
        pipeline = [
            {"$match": {"rows.cells.label_id": label_id}},
            {"$unwind": "$rows"},
            {"$unwind": "$rows.cells"},
            {"$match": {"rows.cells.label_id": label_id}},
            {"$count": "count"},
        ]
        try:
            cursor = self.collection.aggregate(pipeline)
            results = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._db_error("aggregation", e)
        return results[0]["count"] if results else 0

    async def find_by_instruction(self, instruction_id: str) -> List[Dict[str, Any]]:
        return await self.find_many(
            {"measurement_instructions.instruction_id": instruction_id},
            sort=[("name", ASCENDING)],
        )

    async def instruction_counts(self) -> Dict[str, int]:
        """Map measurement instruction id to the number of linked charts"""
        pipeline = [
            {"$unwind": "$measurement_instructions"},
            {"$group": {"_id": "$measurement_instructions.instruction_id", "count": {"$sum": 1}}},
        ]
        try:
            cursor = self.collection.aggregate(pipeline)
            results = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._db_error("aggregation", e)
        return {result["_id"]: result["count"] for result in results}

    async def unlink_instruction(self, instruction_id: str) -> int:
        """Remove an instruction link from every chart, returning the number of charts changed"""
        try:
            result = await self.collection.update_many(
                {"measurement_instructions.instruction_id": instruction_id},
                {"$pull": {"measurement_instructions": {"instruction_id": instruction_id}}},
            )
            return result.modified_count
        except PyMongoError as e:
            raise self._db_error("update", e)

    async def set_published(self, chart_ids: List[str], is_published: bool) -> int:
        obj_ids = [oid for oid in (to_object_id(i) for i in chart_ids) if oid is not None]
        if not obj_ids:
            return 0
        try:
            result = await self.collection.update_many(
                {"_id": {"$in": obj_ids}},
                {"$set": {"is_published": is_published, "updated_at": datetime.now(timezone.utc)}},
            )
            return result.modified_count
        except PyMongoError as e:
            raise self._db_error("update", e)

    async def delete_many_by_ids(self, chart_ids: List[str]) -> int:
        obj_ids = [oid for oid in (to_object_id(i) for i in chart_ids) if oid is not None]
        if not obj_ids:
            return 0
        try:
            result = await self.collection.delete_many({"_id": {"$in": obj_ids}})
            return result.deleted_count
        except PyMongoError as e:
            raise self._db_error("deletion", e)
