"""
Admin size label and label type API endpoints
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.core.errors import ErrorResponseModel
from app.dependencies.services import get_label_service
from app.models.size_chart import LabelType
from app.schemas.size_label import (
    LabelTypeConfigResponse,
    LabelTypeConfigUpdate,
    SizeLabelCreate,
    SizeLabelResponse,
    SizeLabelUpdate,
)
from app.services.label import LabelService

router = APIRouter()
label_types_router = APIRouter()


@router.get("", response_model=List[SizeLabelResponse])
async def list_labels(
    type: Optional[LabelType] = Query(None, description="Filter by label type"),
    search: Optional[str] = Query(None, description="Match on key or display value"),
    service: LabelService = Depends(get_label_service),
):
    """Labels ordered by type, sort order and display value"""
    return await service.list_labels(label_type=type.value if type else None, search=search)


@router.post(
    "",
    response_model=SizeLabelResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponseModel}},
)
async def create_label(
    data: SizeLabelCreate,
    service: LabelService = Depends(get_label_service),
):
    return await service.create_label(data)


@router.get(
    "/{label_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_label(
    label_id: str,
    service: LabelService = Depends(get_label_service),
):
    """A label with the number of chart cells that reference it"""
    return await service.get_label(label_id)


@router.put(
    "/{label_id}",
    response_model=SizeLabelResponse,
    responses={404: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def update_label(
    label_id: str,
    data: SizeLabelUpdate,
    service: LabelService = Depends(get_label_service),
):
    return await service.update_label(label_id, data)


@router.delete(
    "/{label_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def delete_label(
    label_id: str,
    service: LabelService = Depends(get_label_service),
):
    """Delete a label; labels still used by chart cells cannot be deleted"""
    await service.delete_label(label_id)
    return {"success": True}


@label_types_router.get("", response_model=List[LabelTypeConfigResponse])
async def list_label_types(service: LabelService = Depends(get_label_service)):
    """All label types with their default or customized display names"""
    return await service.list_label_types()


@label_types_router.post(
    "",
    response_model=LabelTypeConfigResponse,
    responses={400: {"model": ErrorResponseModel}},
)
async def update_label_type(
    data: LabelTypeConfigUpdate,
    service: LabelService = Depends(get_label_service),
):
    return await service.update_label_type(data)


@label_types_router.delete(
    "",
    response_model=LabelTypeConfigResponse,
    responses={400: {"model": ErrorResponseModel}},
)
async def reset_label_type(
    label_type: Optional[str] = Query(None, alias="labelType"),
    service: LabelService = Depends(get_label_service),
):
    """Drop a customization so the default display name applies again"""
    return await service.reset_label_type(label_type)
