"""
Public v1 API consumed by storefronts and the embed widget.

Read-only and camelCase. API keys are optional unless API_AUTH_REQUIRED is
set; every endpoint is rate limited per key or client address.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response

from app.core.errors import ErrorResponseModel
from app.core.rate_limit import limiter, public_api_limit
from app.dependencies.api_key import require_scope
from app.dependencies.services import get_public_api_service
from app.models.api_key import ApiScope
from app.models.size_chart import LabelType
from app.services.public_api import PublicApiService

router = APIRouter()

AUTH_RESPONSES = {
    401: {"model": ErrorResponseModel},
    403: {"model": ErrorResponseModel},
    429: {"model": ErrorResponseModel, "description": "Rate limit exceeded"},
}


@router.get(
    "/size-charts",
    responses={**AUTH_RESPONSES, 404: {"model": ErrorResponseModel}},
)
@limiter.limit(public_api_limit)
async def get_size_charts(
    request: Request,
    response: Response,
    id: Optional[str] = Query(None, description="Fetch one chart by id"),
    slug: Optional[str] = Query(None, description="Fetch one chart by slug"),
    category: Optional[str] = Query(None, description="Category slug"),
    subcategory: Optional[str] = Query(None, description="Subcategory slug"),
    include_unpublished: bool = Query(False, alias="includeUnpublished"),
    api_key=Depends(require_scope(ApiScope.READ_SIZE_CHARTS)),
    service: PublicApiService = Depends(get_public_api_service),
):
    """
    One chart (by id or slug) or a list filtered by category and subcategory slugs.

    Unknown categories or subcategories yield an empty list rather than 404.
    """
    if id:
        return await service.get_chart_by_id(id, include_unpublished)
    if slug:
        return await service.get_chart_by_slug(slug, include_unpublished)
    return await service.list_charts(category, subcategory, include_unpublished)


@router.get("/categories", responses=AUTH_RESPONSES)
@limiter.limit(public_api_limit)
async def get_categories(
    request: Request,
    response: Response,
    api_key=Depends(require_scope(ApiScope.READ_CATEGORIES)),
    service: PublicApiService = Depends(get_public_api_service),
):
    """Categories with the subcategories that hold published charts"""
    return await service.list_categories()


@router.get("/labels", responses=AUTH_RESPONSES)
@limiter.limit(public_api_limit)
async def get_labels(
    request: Request,
    response: Response,
    type: Optional[LabelType] = Query(None, description="Only labels of this type"),
    api_key=Depends(require_scope(ApiScope.READ_LABELS)),
    service: PublicApiService = Depends(get_public_api_service),
):
    """Labels grouped by label type"""
    return await service.list_labels(type.value if type else None)
