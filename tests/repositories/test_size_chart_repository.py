"""Tests for SizeChartRepository"""
import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
from pymongo import ASCENDING

from app.repositories.size_chart import SizeChartRepository


@pytest.fixture
def repo(mock_collection):
    return SizeChartRepository(mock_collection)


class TestSetPublished:
    @pytest.mark.asyncio
    async def test_stamps_updated_at(self, repo, mock_collection):
        ids = [str(ObjectId()), str(ObjectId())]
        mock_collection.update_many.return_value = MagicMock(modified_count=2)

        modified = await repo.set_published(ids, True)

        assert modified == 2
        query, update = mock_collection.update_many.call_args[0]
        assert query == {"_id": {"$in": [ObjectId(i) for i in ids]}}
        assert update["$set"]["is_published"] is True
        assert isinstance(update["$set"]["updated_at"], datetime)
        assert update["$set"]["updated_at"].tzinfo is not None

    @pytest.mark.asyncio
    async def test_invalid_ids_skip_update(self, repo, mock_collection):
        assert await repo.set_published(["not-an-id"], False) == 0
        mock_collection.update_many.assert_not_called()


class TestNavigationEntries:
    @pytest.mark.asyncio
    async def test_projects_navigation_fields(self, repo, mock_collection):
        oid = ObjectId()
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.to_list = AsyncMock(return_value=[
            {"_id": oid, "name": "Men's Tops", "slug": "mens-tops", "is_published": True, "subcategories": []},
        ])
        mock_collection.find = MagicMock(return_value=cursor)

        entries = await repo.list_navigation_entries()

        mock_collection.find.assert_called_once_with(
            {}, {"name": 1, "slug": 1, "is_published": 1, "subcategories": 1}
        )
        cursor.sort.assert_called_once_with([("name", ASCENDING)])
        assert entries == [
            {"id": str(oid), "name": "Men's Tops", "slug": "mens-tops", "is_published": True, "subcategories": []},
        ]
