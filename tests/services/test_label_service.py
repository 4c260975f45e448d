"""Tests for LabelService"""
import pytest
from unittest.mock import AsyncMock

from app.core.errors import ErrorResponse
from app.schemas.size_label import LabelTypeConfigUpdate, SizeLabelCreate, SizeLabelUpdate
from app.services.label import LabelService


@pytest.fixture
def label_type_repo():
    return AsyncMock()


@pytest.fixture
def service(label_repo, chart_repo, label_type_repo):
    return LabelService(label_repo, chart_repo, label_type_repo)


class TestLabels:
    @pytest.mark.asyncio
    async def test_create_defaults_sort_order(self, service, label_repo):
        label_repo.find_by_key.return_value = None
        label_repo.insert.side_effect = lambda doc: {"id": "l1", **doc}

        label = await service.create_label(SizeLabelCreate(key="SIZE_XS", display_value="XS", label_type="ALPHA_SIZE"))

        assert label["sort_order"] == 0
        assert label["label_type"] == "ALPHA_SIZE"

    @pytest.mark.asyncio
    async def test_create_duplicate_key(self, service, label_repo):
        label_repo.find_by_key.return_value = {"id": "l1"}

        with pytest.raises(ErrorResponse) as exc_info:
            await service.create_label(SizeLabelCreate(key="SIZE_XS", display_value="XS", label_type="ALPHA_SIZE"))

        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_get_includes_usage_count(self, service, label_repo, chart_repo):
        label_repo.find_by_id.return_value = {"id": "l1", "key": "SIZE_XS"}
        chart_repo.count_label_usage.return_value = 7

        label = await service.get_label("l1")

        assert label["usage_count"] == 7

    @pytest.mark.asyncio
    async def test_update_rename_key_conflict(self, service, label_repo):
        label_repo.find_by_id.return_value = {"id": "l1", "key": "SIZE_XS"}
        label_repo.find_by_key.return_value = {"id": "l2", "key": "SIZE_SM"}

        with pytest.raises(ErrorResponse) as exc_info:
            await service.update_label("l1", SizeLabelUpdate(key="SIZE_SM"))

        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_update_ignores_null_required_fields(self, service, label_repo):
        label_repo.find_by_id.return_value = {"id": "l1", "key": "SIZE_XS"}
        label_repo.update_by_id.return_value = {"id": "l1"}

        await service.update_label("l1", SizeLabelUpdate(display_value=None, description=None))

        label_repo.update_by_id.assert_awaited_once_with("l1", {"description": None})

    @pytest.mark.asyncio
    async def test_delete_label_in_use(self, service, label_repo, chart_repo):
        label_repo.find_by_id.return_value = {"id": "l1"}
        chart_repo.count_label_usage.return_value = 4

        with pytest.raises(ErrorResponse) as exc_info:
            await service.delete_label("l1")

        assert exc_info.value.status_code == 409
        assert "4 cell(s)" in exc_info.value.message
        label_repo.delete_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_missing_label(self, service, label_repo):
        label_repo.find_by_id.return_value = None

        with pytest.raises(ErrorResponse) as exc_info:
            await service.delete_label("nope")

        assert exc_info.value.status_code == 404


class TestLabelTypes:
    @pytest.mark.asyncio
    async def test_list_merges_overrides(self, service, label_type_repo):
        label_type_repo.list_all.return_value = [
            {"id": "cfg1", "label_type": "ALPHA_SIZE", "display_name": "Letter Size", "description": None},
        ]

        types = await service.list_label_types()
        by_type = {t["label_type"]: t for t in types}

        assert len(types) == 12
        assert by_type["ALPHA_SIZE"]["display_name"] == "Letter Size"
        assert by_type["ALPHA_SIZE"]["is_customized"] is True
        assert by_type["CUP_SIZE"]["display_name"] == "Cup Size"
        assert by_type["CUP_SIZE"]["is_customized"] is False

    @pytest.mark.asyncio
    async def test_update_rejects_unknown_type(self, service, label_type_repo):
        with pytest.raises(ErrorResponse) as exc_info:
            await service.update_label_type(LabelTypeConfigUpdate(label_type="SLEEVE", display_name="Sleeve"))

        assert exc_info.value.status_code == 400
        label_type_repo.upsert_for_type.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_upserts_override(self, service, label_type_repo):
        label_type_repo.upsert_for_type.return_value = {
            "id": "cfg1", "label_type": "BAND_SIZE", "display_name": "Band", "description": None,
        }

        result = await service.update_label_type(LabelTypeConfigUpdate(label_type="BAND_SIZE", display_name="Band"))

        label_type_repo.upsert_for_type.assert_awaited_once_with("BAND_SIZE", {"display_name": "Band", "description": None})
        assert result["is_customized"] is True

    @pytest.mark.asyncio
    async def test_reset_returns_defaults(self, service, label_type_repo):
        result = await service.reset_label_type("NUMERIC_SIZE")

        label_type_repo.delete_for_type.assert_awaited_once_with("NUMERIC_SIZE")
        assert result["display_name"] == "Numeric Size"
        assert result["is_customized"] is False

    @pytest.mark.asyncio
    async def test_reset_requires_label_type(self, service):
        with pytest.raises(ErrorResponse) as exc_info:
            await service.reset_label_type(None)

        assert exc_info.value.status_code == 400
