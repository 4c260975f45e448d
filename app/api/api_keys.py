"""
Admin API key management endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, status

from app.core.errors import ErrorResponseModel
from app.dependencies.services import get_api_key_service
from app.schemas.api_key import ApiKeyCreate, ApiKeyCreatedResponse, ApiKeyResponse, ApiKeyUpdate
from app.services.api_key import ApiKeyService

router = APIRouter()


@router.get("", response_model=List[ApiKeyResponse])
async def list_api_keys(service: ApiKeyService = Depends(get_api_key_service)):
    """Keys newest first; only the display prefix of each key is returned"""
    return await service.list_keys()


@router.post(
    "",
    response_model=ApiKeyCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_api_key(
    data: ApiKeyCreate,
    service: ApiKeyService = Depends(get_api_key_service),
):
    """
    Issue a new key.
    The raw key is in the response and cannot be retrieved again.
    """
    return await service.create_key(data)


@router.get(
    "/{key_id}",
    response_model=ApiKeyResponse,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_api_key(
    key_id: str,
    service: ApiKeyService = Depends(get_api_key_service),
):
    return await service.get_key(key_id)


@router.put(
    "/{key_id}",
    response_model=ApiKeyResponse,
    responses={404: {"model": ErrorResponseModel}},
)
async def update_api_key(
    key_id: str,
    data: ApiKeyUpdate,
    service: ApiKeyService = Depends(get_api_key_service),
):
    return await service.update_key(key_id, data)


@router.delete(
    "/{key_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}},
)
async def delete_api_key(
    key_id: str,
    service: ApiKeyService = Depends(get_api_key_service),
):
    return await service.delete_key(key_id)
