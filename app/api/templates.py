"""
Size chart template catalog endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.core.errors import ErrorResponseModel
from app.dependencies.services import get_template_service
from app.schemas.template import ApplyTemplateRequest, SizeChartTemplate
from app.services.template import TemplateService

router = APIRouter()


@router.get("", response_model=dict)
async def list_templates(
    category: Optional[str] = Query(None, pattern="^(apparel|youth|footwear|accessories)$"),
    search: Optional[str] = Query(None, description="Match on template name or description"),
    tags: Optional[str] = Query(None, description="Comma separated tags; templates with any of them match"),
    include_counts: bool = Query(False, description="Include template counts per category"),
    include_tags: bool = Query(False, description="Include every tag used in the catalog"),
):
    tag_list = [tag.strip() for tag in tags.split(",") if tag.strip()] if tags else None
    return TemplateService.list_templates(
        category=category,
        search=search,
        tags=tag_list,
        include_counts=include_counts,
        include_tags=include_tags,
    )


@router.get(
    "/{template_id}",
    response_model=SizeChartTemplate,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_template(template_id: str):
    return TemplateService.get_template(template_id)


@router.post(
    "/{template_id}/apply",
    response_model=dict,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponseModel},
        404: {"model": ErrorResponseModel},
        409: {"model": ErrorResponseModel},
    },
)
async def apply_template(
    template_id: str,
    data: ApplyTemplateRequest,
    service: TemplateService = Depends(get_template_service),
):
    """
    Create a size chart from a template.

    The chart gets the template's columns, rows (or a variant's rows) and
    measurement instructions, with centimetre values derived from inches.
    """
    return await service.apply_template(template_id, data)
