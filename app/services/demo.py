"""
Demo reset service.

Restores the factory dataset by upserting instructions, labels, categories,
subcategories and the demo charts. Content under other slugs is untouched.
"""

import time
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from app.core.config import config
from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.db import demo_data
from app.repositories.category import CategoryRepository, SubcategoryRepository
from app.repositories.measurement_instruction import MeasurementInstructionRepository
from app.repositories.size_chart import SizeChartRepository
from app.repositories.size_label import SizeLabelRepository
from app.services.public_api import to_iso
from app.services.template import build_template_document
from app.templates import get_all_templates, get_template_by_id
from app.utils.demo_slugs import DEMO_CATEGORY_SLUGS, DEMO_SUBCATEGORY_SLUGS, all_demo_subcategory_slugs

RESET_INTERVAL_HOURS = 12

# Process-local, lost on restart
_last_reset: Optional[str] = None


def next_reset_time(now: Optional[datetime] = None) -> datetime:
    """Next scheduled reset at 00:00 or 12:00 UTC"""
    now = now or datetime.now(timezone.utc)
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if now.hour < 12:
        return midnight + timedelta(hours=12)
    return midnight + timedelta(days=1)


def get_last_reset() -> Optional[str]:
    return _last_reset


def check_demo_access(authorization: Optional[str]) -> None:
    """Demo mode must be on; a configured cron secret must be presented as a bearer token"""
    if not config.demo_mode:
        logger.info("Demo reset attempted but demo mode is not enabled")
        raise ErrorResponse("Demo mode is not enabled", status_code=403)
    if config.cron_secret and authorization != f"Bearer {config.cron_secret}":
        logger.warning("Demo reset unauthorized: invalid cron secret")
        raise ErrorResponse("Unauthorized", status_code=401)


class DemoService:
    """Service layer for demo mode"""

    def __init__(
        self,
        category_repo: CategoryRepository,
        subcategory_repo: SubcategoryRepository,
        chart_repo: SizeChartRepository,
        instruction_repo: MeasurementInstructionRepository,
        label_repo: SizeLabelRepository,
    ):
        self.category_repo = category_repo
        self.subcategory_repo = subcategory_repo
        self.chart_repo = chart_repo
        self.instruction_repo = instruction_repo
        self.label_repo = label_repo

    @staticmethod
    def status() -> Dict[str, Any]:
        if not config.demo_mode:
            return {"demo_mode": False}
        return {
            "demo_mode": True,
            "last_reset": get_last_reset(),
            "next_reset": to_iso(next_reset_time()),
            "reset_interval_hours": RESET_INTERVAL_HOURS,
        }

    async def _upsert_instructions(self) -> Dict[str, str]:
        ids = {}
        for sort_order, data in enumerate(demo_data.MEASUREMENT_INSTRUCTIONS):
            fields = {"name": data["name"], "instruction": data["instruction"], "sort_order": sort_order}
            instruction = await self.instruction_repo.upsert_by_key(data["key"], fields)
            ids[instruction["key"]] = instruction["id"]
        return ids

    async def _upsert_labels(self) -> None:
        for label in demo_data.SIZE_LABELS:
            fields = {k: v for k, v in label.items() if k != "key"}
            await self.label_repo.upsert_by_key(label["key"], fields)

    async def _upsert_categories(self) -> Dict[tuple, str]:
        """Upsert demo categories and subcategories, keyed (category slug, subcategory slug)"""
        subcategory_ids = {}
        for category_data in demo_data.CATEGORIES:
            category = await self.category_repo.upsert_by(
                {"slug": category_data["slug"]},
                {"name": category_data["name"], "display_order": category_data["display_order"]},
            )
            for display_order, sub_slug in enumerate(DEMO_SUBCATEGORY_SLUGS[category_data["slug"]]):
                subcategory = await self.subcategory_repo.upsert_by(
                    {"category_id": category["id"], "slug": sub_slug},
                    {"name": demo_data.subcategory_name(sub_slug), "display_order": display_order},
                )
                subcategory_ids[(category_data["slug"], sub_slug)] = subcategory["id"]
        return subcategory_ids

    async def _upsert_chart(self, chart_data: Dict[str, Any], subcategory_ids: Dict[tuple, str],
                            instruction_ids: Dict[str, str]) -> None:
        template = get_template_by_id(chart_data["template"])
        if template is None:
            raise ErrorResponse(f"Template not found: {chart_data['template']}", status_code=500)

        document = build_template_document(
            template,
            name=chart_data["name"],
            slug=chart_data["slug"],
            description=template.description,
            is_published=True,
            subcategory_ids=[subcategory_ids[placement] for placement in chart_data["placements"]],
            instruction_ids_by_key=instruction_ids,
            variant_key=chart_data.get("variant"),
        ).to_mongo()

        existing = await self.chart_repo.find_by_slug(chart_data["slug"])
        if existing:
            document["created_at"] = existing.get("created_at", document["created_at"])
            await self.chart_repo.replace_by_id(existing["id"], document)
        else:
            await self.chart_repo.insert(document)

    async def seed(self) -> Dict[str, int]:
        """Upsert the full factory dataset and return what it holds"""
        instruction_ids = await self._upsert_instructions()
        await self._upsert_labels()
        subcategory_ids = await self._upsert_categories()
        for chart_data in demo_data.SIZE_CHARTS:
            await self._upsert_chart(chart_data, subcategory_ids, instruction_ids)

        return {
            "categories": len(DEMO_CATEGORY_SLUGS),
            "subcategories": len(all_demo_subcategory_slugs()),
            "size_charts": len(demo_data.SIZE_CHARTS),
            "templates": len(get_all_templates()),
        }

    async def reset(self) -> Dict[str, Any]:
        global _last_reset
        started = time.monotonic()
        logger.info("Starting demo database reset", metadata={"event": "demo_reset_started"})

        try:
            data = await self.seed()
        except ErrorResponse as e:
            duration = int((time.monotonic() - started) * 1000)
            logger.error(
                "Error resetting demo database",
                error=e,
                metadata={"event": "demo_reset_failed", "duration_ms": duration}
            )
            raise ErrorResponse("Failed to reset demo database", status_code=500)

        duration = int((time.monotonic() - started) * 1000)
        _last_reset = to_iso(datetime.now(timezone.utc))
        logger.info(
            f"Demo database reset completed in {duration}ms",
            metadata={"event": "demo_reset_completed", "duration_ms": duration, **data}
        )
        return {
            "success": True,
            "message": "Demo database reset completed",
            "timestamp": _last_reset,
            "duration": duration,
            "data": data,
        }
