"""
Base repository for MongoDB data access.

Documents leave the repository layer as plain dicts with a string "id"
in place of the ObjectId "_id". Driver failures are logged and surfaced as
503 errors; unique index violations become 409 conflicts.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import ErrorResponse
from app.core.logger import logger


def to_object_id(document_id: str) -> Optional[ObjectId]:
    """Parse an id, returning None when it is not a valid ObjectId"""
    if isinstance(document_id, ObjectId):
        return document_id
    if not document_id or not ObjectId.is_valid(document_id):
        return None
    return ObjectId(document_id)


class BaseRepository:
    """
    Generic CRUD operations shared by all collection repositories.

    Subclasses set `entity_name` (used in error messages) and may set
    `duplicate_message` for unique index violations.
    """

    entity_name = "document"
    duplicate_message = "A document with these values already exists"

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @staticmethod
    def _doc_to_dict(doc: Optional[dict]) -> Optional[Dict[str, Any]]:
        """Convert MongoDB document to a plain dict with string id"""
        if not doc:
            return None
        doc = dict(doc)
        doc["id"] = str(doc.pop("_id"))
        return doc

    def _db_error(self, action: str, error: PyMongoError) -> ErrorResponse:
        if isinstance(error, DuplicateKeyError):
            return ErrorResponse(self.duplicate_message, status_code=409)
        logger.error(
            f"MongoDB error during {self.entity_name} {action}",
            error=error,
            metadata={"event": "mongodb_error", "collection": self.collection.name, "action": action}
        )
        return ErrorResponse(f"Database error during {self.entity_name} {action}", status_code=503)

    async def find_by_id(self, document_id: str) -> Optional[Dict[str, Any]]:
        """Find a document by id; invalid ids simply do not match"""
        obj_id = to_object_id(document_id)
        if obj_id is None:
            return None
        try:
            doc = await self.collection.find_one({"_id": obj_id})
            return self._doc_to_dict(doc)
        except PyMongoError as e:
            raise self._db_error("retrieval", e)

    async def find_by_ids(self, document_ids: Iterable[str]) -> List[Dict[str, Any]]:
        obj_ids = [oid for oid in (to_object_id(i) for i in document_ids) if oid is not None]
        if not obj_ids:
            return []
        return await self.find_many({"_id": {"$in": obj_ids}})

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            doc = await self.collection.find_one(query)
            return self._doc_to_dict(doc)
        except PyMongoError as e:
            raise self._db_error("retrieval", e)

    async def find_many(
        self,
        query: Dict[str, Any],
        sort: Optional[List[tuple]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
        projection: Optional[Dict[str, int]] = None,
    ) -> List[Dict[str, Any]]:
        try:
            cursor = self.collection.find(query, projection) if projection else self.collection.find(query)
            if sort:
                cursor = cursor.sort(sort)
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)
            docs = await cursor.to_list(length=None)
            return [self._doc_to_dict(doc) for doc in docs]
        except PyMongoError as e:
            raise self._db_error("listing", e)

    async def count(self, query: Dict[str, Any]) -> int:
        try:
            return await self.collection.count_documents(query)
        except PyMongoError as e:
            raise self._db_error("count", e)

    async def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document, stamping timestamps, and return it with its id"""
        now = datetime.now(timezone.utc)
        document = dict(document)
        document.setdefault("created_at", now)
        document.setdefault("updated_at", now)
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            raise self._db_error("creation", e)
        document["_id"] = result.inserted_id
        return self._doc_to_dict(document)

    async def update_by_id(self, document_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Set fields on a document and return the updated version"""
        obj_id = to_object_id(document_id)
        if obj_id is None:
            return None
        update = dict(fields)
        update["updated_at"] = datetime.now(timezone.utc)
        try:
            doc = await self.collection.find_one_and_update(
                {"_id": obj_id},
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )
            return self._doc_to_dict(doc)
        except PyMongoError as e:
            raise self._db_error("update", e)

    async def replace_by_id(self, document_id: str, document: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Replace a whole document in one write"""
        obj_id = to_object_id(document_id)
        if obj_id is None:
            return None
        document = {k: v for k, v in document.items() if k not in ("id", "_id")}
        document["updated_at"] = datetime.now(timezone.utc)
        try:
            doc = await self.collection.find_one_and_replace(
                {"_id": obj_id},
                document,
                return_document=ReturnDocument.AFTER,
            )
            return self._doc_to_dict(doc)
        except PyMongoError as e:
            raise self._db_error("update", e)

    async def delete_by_id(self, document_id: str) -> bool:
        obj_id = to_object_id(document_id)
        if obj_id is None:
            return False
        try:
            result = await self.collection.delete_one({"_id": obj_id})
            return result.deleted_count > 0
        except PyMongoError as e:
            raise self._db_error("deletion", e)

    async def upsert_by(self, query: Dict[str, Any], fields: Dict[str, Any]) -> Dict[str, Any]:
        """Update the document matching query, creating it when absent"""
        now = datetime.now(timezone.utc)
        try:
            doc = await self.collection.find_one_and_update(
                query,
                {"$set": {**fields, "updated_at": now}, "$setOnInsert": {"created_at": now}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
            return self._doc_to_dict(doc)
        except PyMongoError as e:
            raise self._db_error("upsert", e)
