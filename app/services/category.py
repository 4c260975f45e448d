"""
Category service containing business logic for categories and subcategories
"""

from typing import Any, Dict, List, Tuple

from app.core.config import config
from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.repositories.category import CategoryRepository, SubcategoryRepository
from app.repositories.size_chart import SizeChartRepository
from app.schemas.category import CategoryCreate, CategoryUpdate, SubcategoryCreate, SubcategoryUpdate
from app.utils.demo_slugs import is_demo_category_slug, is_demo_subcategory_slug
from app.utils.slugs import generate_slug


class CategoryService:
    """Service layer for the category hierarchy"""

    def __init__(
        self,
        category_repo: CategoryRepository,
        subcategory_repo: SubcategoryRepository,
        chart_repo: SizeChartRepository,
    ):
        self.category_repo = category_repo
        self.subcategory_repo = subcategory_repo
        self.chart_repo = chart_repo

    async def list_categories(self) -> List[Dict[str, Any]]:
        """Categories in display order with their subcategories and chart counts"""
        categories = await self.category_repo.list_ordered()
        subcategories = await self.subcategory_repo.list_ordered()
        counts = await self.chart_repo.chart_counts_by_subcategory()

        by_category: Dict[str, List[Dict[str, Any]]] = {}
        for sub in subcategories:
            sub["chart_count"] = counts.get(sub["id"], 0)
            by_category.setdefault(sub["category_id"], []).append(sub)

        for category in categories:
            category["subcategories"] = by_category.get(category["id"], [])
        return categories

    async def navigation_tree(self, include_charts: bool = False) -> List[Dict[str, Any]]:
        """
        Category tree for size guide navigation.

        Every subcategory carries its chart count; with include_charts each
        also lists its charts (id, name, slug, is_published) in link order.
        """
        categories = await self.list_categories()
        if not include_charts:
            return categories

        linked: Dict[str, List[Tuple[int, Dict[str, Any]]]] = {}
        for chart in await self.chart_repo.list_navigation_entries():
            entry = {
                "id": chart["id"],
                "name": chart["name"],
                "slug": chart["slug"],
                "is_published": chart.get("is_published", False),
            }
            for link in chart.get("subcategories", []):
                linked.setdefault(link["subcategory_id"], []).append((link.get("display_order", 0), entry))

        for category in categories:
            for sub in category["subcategories"]:
                entries = sorted(linked.get(sub["id"], []), key=lambda item: item[0])
                sub["size_charts"] = [entry for _, entry in entries]
        return categories

    async def get_category(self, category_id: str) -> Dict[str, Any]:
        category = await self.category_repo.find_by_id(category_id)
        if not category:
            raise ErrorResponse("Category not found", status_code=404)
        counts = await self.chart_repo.chart_counts_by_subcategory()
        subcategories = await self.subcategory_repo.find_by_category(category_id)
        for sub in subcategories:
            sub["chart_count"] = counts.get(sub["id"], 0)
        category["subcategories"] = subcategories
        return category

    async def create_category(self, data: CategoryCreate) -> Dict[str, Any]:
        slug = data.slug or generate_slug(data.name)
        if not slug:
            raise ErrorResponse("A slug could not be generated from this name", status_code=400)

        if await self.category_repo.find_conflict(data.name, slug):
            raise ErrorResponse("A category with this name or slug already exists", status_code=409)

        display_order = data.display_order
        if display_order is None:
            last = await self.category_repo.last_display_order()
            display_order = 0 if last is None else last + 1

        category = await self.category_repo.insert({
            "name": data.name,
            "slug": slug,
            "display_order": display_order,
        })
        logger.info(
            f"Created category {category['id']}",
            metadata={"event": "create_category", "category_id": category["id"], "slug": slug}
        )
        category["subcategories"] = []
        return category

    async def update_category(self, category_id: str, data: CategoryUpdate) -> Dict[str, Any]:
        existing = await self.category_repo.find_by_id(category_id)
        if not existing:
            raise ErrorResponse("Category not found", status_code=404)

        fields = data.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in fields and "slug" not in fields:
            fields["slug"] = generate_slug(fields["name"])

        new_slug = fields.get("slug")
        if new_slug and new_slug != existing["slug"]:
            if config.demo_mode and is_demo_category_slug(existing["slug"]):
                raise ErrorResponse("Cannot change slug of demo category in demo mode", status_code=403)

        if "name" in fields or "slug" in fields:
            conflict = await self.category_repo.find_conflict(
                fields.get("name", existing["name"]),
                fields.get("slug", existing["slug"]),
                exclude_id=category_id,
            )
            if conflict:
                raise ErrorResponse("A category with this name or slug already exists", status_code=409)

        category = await self.category_repo.update_by_id(category_id, fields)
        if not category:
            raise ErrorResponse("Category not found", status_code=404)
        logger.info(
            f"Updated category {category_id}",
            metadata={"event": "update_category", "category_id": category_id, "fields": list(fields)}
        )
        return category

    async def delete_category(self, category_id: str) -> None:
        """Delete an empty category together with its subcategories"""
        category = await self.category_repo.find_by_id(category_id)
        if not category:
            raise ErrorResponse("Category not found", status_code=404)

        subcategories = await self.subcategory_repo.find_by_category(category_id)
        subcategory_ids = [sub["id"] for sub in subcategories]
        if subcategory_ids and await self.chart_repo.count_by_subcategories(subcategory_ids) > 0:
            raise ErrorResponse(
                "Cannot delete category that contains size charts. Remove charts first.",
                status_code=409
            )

        for sub_id in subcategory_ids:
            await self.subcategory_repo.delete_by_id(sub_id)
        await self.category_repo.delete_by_id(category_id)
        logger.info(
            f"Deleted category {category_id}",
            metadata={"event": "delete_category", "category_id": category_id}
        )

    async def get_subcategory(self, subcategory_id: str) -> Dict[str, Any]:
        subcategory = await self.subcategory_repo.find_by_id(subcategory_id)
        if not subcategory:
            raise ErrorResponse("Subcategory not found", status_code=404)
        subcategory["category"] = await self.category_repo.find_by_id(subcategory["category_id"])
        subcategory["chart_count"] = await self.chart_repo.count_by_subcategories([subcategory_id])
        return subcategory

    async def create_subcategory(self, data: SubcategoryCreate) -> Dict[str, Any]:
        category = await self.category_repo.find_by_id(data.category_id)
        if not category:
            raise ErrorResponse("Category not found", status_code=404)

        slug = data.slug or generate_slug(data.name)
        if not slug:
            raise ErrorResponse("A slug could not be generated from this name", status_code=400)

        if await self.subcategory_repo.find_conflict(data.category_id, data.name, slug):
            raise ErrorResponse("A subcategory with this name already exists in this category", status_code=409)

        display_order = data.display_order
        if display_order is None:
            last = await self.subcategory_repo.last_display_order(data.category_id)
            display_order = 0 if last is None else last + 1

        subcategory = await self.subcategory_repo.insert({
            "name": data.name,
            "slug": slug,
            "category_id": data.category_id,
            "display_order": display_order,
        })
        logger.info(
            f"Created subcategory {subcategory['id']}",
            metadata={"event": "create_subcategory", "subcategory_id": subcategory["id"], "category_id": data.category_id}
        )
        return subcategory

    async def update_subcategory(self, subcategory_id: str, data: SubcategoryUpdate) -> Dict[str, Any]:
        existing = await self.subcategory_repo.find_by_id(subcategory_id)
        if not existing:
            raise ErrorResponse("Subcategory not found", status_code=404)

        fields = data.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in fields and "slug" not in fields:
            fields["slug"] = generate_slug(fields["name"])

        target_category_id = fields.get("category_id", existing["category_id"])
        if target_category_id != existing["category_id"]:
            if not await self.category_repo.find_by_id(target_category_id):
                raise ErrorResponse("Category not found", status_code=404)

        new_slug = fields.get("slug")
        if config.demo_mode and new_slug and new_slug != existing["slug"]:
            category = await self.category_repo.find_by_id(existing["category_id"])
            if category and is_demo_subcategory_slug(category["slug"], existing["slug"]):
                raise ErrorResponse("Cannot change slug of demo subcategory in demo mode", status_code=403)

        slug = fields.get("slug", existing["slug"])
        if new_slug or target_category_id != existing["category_id"]:
            duplicate = await self.subcategory_repo.find_by_slug(target_category_id, slug)
            if duplicate and duplicate["id"] != subcategory_id:
                raise ErrorResponse("A subcategory with this slug already exists in this category", status_code=409)

        subcategory = await self.subcategory_repo.update_by_id(subcategory_id, fields)
        if not subcategory:
            raise ErrorResponse("Subcategory not found", status_code=404)
        logger.info(
            f"Updated subcategory {subcategory_id}",
            metadata={"event": "update_subcategory", "subcategory_id": subcategory_id}
        )
        return subcategory

    async def delete_subcategory(self, subcategory_id: str) -> None:
        subcategory = await self.subcategory_repo.find_by_id(subcategory_id)
        if not subcategory:
            raise ErrorResponse("Subcategory not found", status_code=404)

        if await self.chart_repo.count_by_subcategories([subcategory_id]) > 0:
            raise ErrorResponse(
                "Cannot delete subcategory that contains size charts. Remove or reassign charts first.",
                status_code=409
            )

        await self.subcategory_repo.delete_by_id(subcategory_id)
        logger.info(
            f"Deleted subcategory {subcategory_id}",
            metadata={"event": "delete_subcategory", "subcategory_id": subcategory_id}
        )
