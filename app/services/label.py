"""
Size label service: label CRUD and label type display overrides
"""

from typing import Any, Dict, List, Optional

from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.models.size_chart import LABEL_TYPE_DEFAULTS, LabelType
from app.repositories.size_chart import SizeChartRepository
from app.repositories.size_label import LabelTypeConfigRepository, SizeLabelRepository
from app.schemas.size_label import LabelTypeConfigUpdate, SizeLabelCreate, SizeLabelUpdate


class LabelService:
    """Service layer for size labels"""

    def __init__(
        self,
        label_repo: SizeLabelRepository,
        chart_repo: SizeChartRepository,
        label_type_repo: LabelTypeConfigRepository,
    ):
        self.label_repo = label_repo
        self.chart_repo = chart_repo
        self.label_type_repo = label_type_repo

    async def list_labels(self, label_type: Optional[str] = None, search: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self.label_repo.list_filtered(label_type=label_type, search=search)

    async def get_label(self, label_id: str) -> Dict[str, Any]:
        label = await self.label_repo.find_by_id(label_id)
        if not label:
            raise ErrorResponse("Label not found", status_code=404)
        label["usage_count"] = await self.chart_repo.count_label_usage(label_id)
        return label

    async def create_label(self, data: SizeLabelCreate) -> Dict[str, Any]:
        if await self.label_repo.find_by_key(data.key):
            raise ErrorResponse("A label with this key already exists", status_code=409)

        fields = data.model_dump()
        if fields["sort_order"] is None:
            fields["sort_order"] = 0
        label = await self.label_repo.insert(fields)
        logger.info(
            f"Created label {label['key']}",
            metadata={"event": "create_label", "label_id": label["id"], "label_type": label["label_type"]}
        )
        return label

    async def update_label(self, label_id: str, data: SizeLabelUpdate) -> Dict[str, Any]:
        existing = await self.label_repo.find_by_id(label_id)
        if not existing:
            raise ErrorResponse("Label not found", status_code=404)

        fields = data.model_dump(exclude_unset=True)
        for required in ("key", "display_value", "label_type", "sort_order"):
            if fields.get(required, "") is None:
                fields.pop(required)

        if fields.get("key") and fields["key"] != existing["key"]:
            if await self.label_repo.find_by_key(fields["key"]):
                raise ErrorResponse("A label with this key already exists", status_code=409)

        label = await self.label_repo.update_by_id(label_id, fields)
        if not label:
            raise ErrorResponse("Label not found", status_code=404)
        logger.info(f"Updated label {label_id}", metadata={"event": "update_label", "label_id": label_id})
        return label

    async def delete_label(self, label_id: str) -> None:
        """Delete a label that no cell references"""
        if not await self.label_repo.find_by_id(label_id):
            raise ErrorResponse("Label not found", status_code=404)

        usage = await self.chart_repo.count_label_usage(label_id)
        if usage > 0:
            raise ErrorResponse(f"Cannot delete label: it's being used in {usage} cell(s)", status_code=409)

        await self.label_repo.delete_by_id(label_id)
        logger.info(f"Deleted label {label_id}", metadata={"event": "delete_label", "label_id": label_id})

    async def list_label_types(self) -> List[Dict[str, Any]]:
        """Every label type with its default display name merged with any override"""
        overrides = {cfg["label_type"]: cfg for cfg in await self.label_type_repo.list_all()}
        result = []
        for label_type, defaults in LABEL_TYPE_DEFAULTS.items():
            override = overrides.get(label_type.value)
            result.append({
                "id": override["id"] if override else None,
                "label_type": label_type.value,
                "display_name": override["display_name"] if override else defaults["label"],
                "description": override.get("description") if override else defaults["description"],
                "is_customized": override is not None,
            })
        return result

    @staticmethod
    def _check_label_type(label_type: str) -> None:
        if label_type not in {t.value for t in LabelType}:
            raise ErrorResponse("Invalid label type", status_code=400)

    async def update_label_type(self, data: LabelTypeConfigUpdate) -> Dict[str, Any]:
        self._check_label_type(data.label_type)
        config = await self.label_type_repo.upsert_for_type(
            data.label_type,
            {"display_name": data.display_name, "description": data.description},
        )
        logger.info(
            f"Customized label type {data.label_type}",
            metadata={"event": "update_label_type", "label_type": data.label_type}
        )
        return {**config, "is_customized": True}

    async def reset_label_type(self, label_type: Optional[str]) -> Dict[str, Any]:
        """Remove an override so the default display name applies again"""
        if not label_type:
            raise ErrorResponse("labelType is required", status_code=400)
        self._check_label_type(label_type)
        await self.label_type_repo.delete_for_type(label_type)
        defaults = LABEL_TYPE_DEFAULTS[LabelType(label_type)]
        return {
            "id": None,
            "label_type": label_type,
            "display_name": defaults["label"],
            "description": defaults["description"],
            "is_customized": False,
        }
