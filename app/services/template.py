"""
Template service: browsing the catalog and creating charts from templates
"""

from typing import Any, Dict, List, Optional

from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.models.size_chart import InstructionLink, SizeChartDocument, SubcategoryLink
from app.repositories.category import SubcategoryRepository
from app.repositories.measurement_instruction import MeasurementInstructionRepository
from app.repositories.size_chart import SizeChartRepository
from app.schemas.template import ApplyTemplateRequest, SizeChartTemplate
from app.services.chart_builder import build_columns, build_rows
from app.services.size_chart import SizeChartService
from app.templates import (
    get_all_template_tags,
    get_all_templates,
    get_template_by_id,
    get_template_category_counts,
    get_templates_by_category,
    get_templates_by_tags,
    search_templates,
)
from app.utils.slugs import generate_slug, is_valid_slug


def build_template_document(
    template: SizeChartTemplate,
    name: str,
    slug: str,
    description: Optional[str],
    is_published: bool,
    subcategory_ids: List[str],
    instruction_ids_by_key: Dict[str, str],
    variant_key: Optional[str] = None,
) -> SizeChartDocument:
    """Chart document for a template; cm values are derived from the template's inches"""
    rows = template.rows
    if variant_key and template.variants and variant_key in template.variants:
        rows = template.variants[variant_key].rows

    columns = build_columns([column.model_dump() for column in template.columns])
    instruction_ids = [
        instruction_ids_by_key[key] for key in template.measurement_instructions if key in instruction_ids_by_key
    ]
    return SizeChartDocument(
        name=name,
        slug=slug,
        description=description,
        is_published=is_published,
        subcategories=[SubcategoryLink(subcategory_id=sub_id, display_order=i) for i, sub_id in enumerate(subcategory_ids)],
        measurement_instructions=[
            InstructionLink(instruction_id=inst_id, display_order=i) for i, inst_id in enumerate(instruction_ids)
        ],
        columns=columns,
        rows=build_rows(columns, rows, from_template=True),
    )


class TemplateService:
    """Service layer for the template catalog"""

    def __init__(
        self,
        chart_repo: SizeChartRepository,
        subcategory_repo: SubcategoryRepository,
        instruction_repo: MeasurementInstructionRepository,
        chart_service: SizeChartService,
    ):
        self.chart_repo = chart_repo
        self.subcategory_repo = subcategory_repo
        self.instruction_repo = instruction_repo
        self.chart_service = chart_service

    @staticmethod
    def list_templates(
        category: Optional[str] = None,
        search: Optional[str] = None,
        tags: Optional[List[str]] = None,
        include_counts: bool = False,
        include_tags: bool = False,
    ) -> Dict[str, Any]:
        """Templates filtered by category, search text and tags (any match)"""
        if search:
            templates = search_templates(search)
            if category:
                templates = [t for t in templates if t.category == category]
        elif category:
            templates = get_templates_by_category(category)
        else:
            templates = get_all_templates()

        if tags:
            tagged = {t.id for t in get_templates_by_tags(tags)}
            templates = [t for t in templates if t.id in tagged]

        result: Dict[str, Any] = {"templates": [t.model_dump(exclude_none=True) for t in templates]}
        if include_counts:
            result["category_counts"] = get_template_category_counts()
        if include_tags:
            result["tags"] = get_all_template_tags()
        return result

    @staticmethod
    def get_template(template_id: str) -> SizeChartTemplate:
        template = get_template_by_id(template_id)
        if not template:
            raise ErrorResponse("Template not found", status_code=404)
        return template

    async def apply_template(self, template_id: str, data: ApplyTemplateRequest) -> Dict[str, Any]:
        """Create a chart with the template's columns, rows and instructions"""
        template = self.get_template(template_id)

        variant = None
        if data.variant_key:
            if not template.variants or data.variant_key not in template.variants:
                raise ErrorResponse(f"Unknown variant '{data.variant_key}' for this template", status_code=400)
            variant = template.variants[data.variant_key]

        name = data.name or (f"{template.name} ({variant.name})" if variant else template.name)
        slug = data.slug or generate_slug(name)
        if not is_valid_slug(slug):
            raise ErrorResponse("A slug could not be generated from this name", status_code=400)
        if await self.chart_repo.slug_exists(slug):
            raise ErrorResponse("A size chart with this slug already exists", status_code=409)

        unique_ids = list(dict.fromkeys(data.subcategory_ids))
        if len(await self.subcategory_repo.find_by_ids(unique_ids)) != len(unique_ids):
            raise ErrorResponse("One or more subcategories not found", status_code=400)

        instructions = await self.instruction_repo.find_by_keys(template.measurement_instructions)
        document = build_template_document(
            template,
            name=name,
            slug=slug,
            description=data.description or template.description,
            is_published=data.is_published,
            subcategory_ids=unique_ids,
            instruction_ids_by_key={inst["key"]: inst["id"] for inst in instructions},
            variant_key=data.variant_key,
        )
        chart = await self.chart_repo.insert(document.to_mongo())
        logger.info(
            f"Applied template {template_id} as size chart {chart['id']}",
            metadata={
                "event": "apply_template",
                "template_id": template_id,
                "variant_key": data.variant_key,
                "size_chart_id": chart["id"],
            }
        )
        return {"size_chart": await self.chart_service.get_chart(chart["id"])}
