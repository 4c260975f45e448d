"""
Admin size chart API endpoints
CRUD, bulk operations, duplication and import/export
"""

import io
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import StreamingResponse

from app.core.errors import ErrorResponseModel
from app.dependencies.services import get_category_service, get_import_export_service, get_size_chart_service
from app.schemas.import_export import ImportResponse
from app.schemas.size_chart import (
    BulkOperation,
    BulkOperationResponse,
    DuplicateSizeChart,
    SizeChartCreate,
    SizeChartFilters,
    SizeChartUpdate,
)
from app.services.category import CategoryService
from app.services.import_export import ImportExportService
from app.services.size_chart import SizeChartService

router = APIRouter()


@router.get("", response_model=dict)
async def list_size_charts(
    category_id: Optional[str] = Query(None, description="Filter by category id"),
    subcategory_id: Optional[str] = Query(None, description="Filter by subcategory id"),
    search: Optional[str] = Query(None, description="Case-insensitive match on name, description or slug"),
    is_published: Optional[bool] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    service: SizeChartService = Depends(get_size_chart_service),
):
    """
    List size charts sorted by name.

    Returns:
    - data: chart summaries with column and row counts
    - pagination: page, limit, total, total_pages
    """
    filters = SizeChartFilters(
        category_id=category_id,
        subcategory_id=subcategory_id,
        search=search,
        is_published=is_published,
        page=page,
        limit=limit,
    )
    return await service.list_charts(filters)


@router.post(
    "",
    response_model=dict,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def create_size_chart(
    data: SizeChartCreate,
    service: SizeChartService = Depends(get_size_chart_service),
):
    """Create a chart with its columns, rows and cells; cm values are derived from inches"""
    return await service.create_chart(data)


@router.post(
    "/import",
    response_model=ImportResponse,
    responses={400: {"model": ErrorResponseModel}},
)
async def import_size_charts(
    payload: Any = Body(...),
    mode: str = Query("create", pattern="^(create|skip|upsert)$", description="How to treat existing slugs"),
    service: ImportExportService = Depends(get_import_export_service),
):
    """
    Import charts from the JSON export format.

    Each chart is imported independently; per-chart failures are reported
    in `results` and counted in `summary.errors`.
    """
    return await service.import_charts(payload, mode)


@router.get(
    "/export",
    responses={
        200: {"description": "Charts as a JSON, CSV or XLSX download"},
        404: {"model": ErrorResponseModel},
    },
)
async def export_size_charts(
    id: Optional[str] = Query(None, description="Export a single chart"),
    category: Optional[str] = Query(None, description="Category slug"),
    subcategory: Optional[str] = Query(None, description="Subcategory slug"),
    format: str = Query("json", pattern="^(json|csv|xlsx)$", description="Export format"),
    service: ImportExportService = Depends(get_import_export_service),
):
    """Export charts as a downloadable file named size-charts-YYYY-MM-DD.<format>"""
    export = await service.export_charts(chart_id=id, category=category, subcategory=subcategory, export_format=format)
    stream = io.BytesIO(export.content) if isinstance(export.content, bytes) else io.StringIO(export.content)
    return StreamingResponse(
        stream,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.post(
    "/bulk",
    response_model=BulkOperationResponse,
    responses={400: {"model": ErrorResponseModel}},
)
async def bulk_size_charts(
    data: BulkOperation,
    service: SizeChartService = Depends(get_size_chart_service),
):
    """Delete, publish or unpublish several charts at once"""
    return await service.bulk_operation(data)


@router.post(
    "/duplicate",
    response_model=dict,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponseModel}},
)
async def duplicate_size_chart(
    data: DuplicateSizeChart,
    service: SizeChartService = Depends(get_size_chart_service),
):
    """Copy a chart as an unpublished draft with a unique slug"""
    return await service.duplicate_chart(data)


@router.get(
    "/public",
    response_model=dict,
    responses={400: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}},
)
async def get_published_size_chart(
    category: Optional[str] = Query(None, description="Category slug"),
    subcategory: Optional[str] = Query(None, description="Subcategory slug"),
    chart: Optional[str] = Query(None, description="Chart slug"),
    service: SizeChartService = Depends(get_size_chart_service),
):
    """
    Preview a published chart the way a storefront addresses it.

    All three slugs are required. The chart must be published and linked to
    the named subcategory, which is returned as "subcategory".
    """
    return await service.get_published_chart(category, subcategory, chart)


@router.get("/categories", response_model=List[dict])
async def size_chart_categories(
    include_charts: bool = Query(False, alias="includeCharts", description="List each subcategory's charts"),
    service: CategoryService = Depends(get_category_service),
):
    """Category tree with chart counts, optionally listing the charts under each subcategory"""
    return await service.navigation_tree(include_charts)


@router.get(
    "/{chart_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_size_chart(
    chart_id: str,
    service: SizeChartService = Depends(get_size_chart_service),
):
    return await service.get_chart(chart_id)


@router.put(
    "/{chart_id}",
    response_model=dict,
    responses={
        400: {"model": ErrorResponseModel},
        403: {"model": ErrorResponseModel},
        404: {"model": ErrorResponseModel},
        409: {"model": ErrorResponseModel},
    },
)
async def update_size_chart(
    chart_id: str,
    data: SizeChartUpdate,
    service: SizeChartService = Depends(get_size_chart_service),
):
    """
    Partially update a chart.

    Columns and rows not listed are removed; listed ids are updated and
    entries without an id are created.
    """
    return await service.update_chart(chart_id, data)


@router.delete(
    "/{chart_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}},
)
async def delete_size_chart(
    chart_id: str,
    service: SizeChartService = Depends(get_size_chart_service),
):
    return await service.delete_chart(chart_id)
