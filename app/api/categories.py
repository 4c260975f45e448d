"""
Admin category and subcategory API endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, status

from app.core.errors import ErrorResponseModel
from app.dependencies.services import get_category_service
from app.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    SubcategoryCreate,
    SubcategoryResponse,
    SubcategoryUpdate,
)
from app.services.category import CategoryService

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def list_categories(service: CategoryService = Depends(get_category_service)):
    """Categories in display order, each with its subcategories and their chart counts"""
    return await service.list_categories()


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def create_category(
    data: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
):
    """
    Create a category.
    The slug is derived from the name when omitted and display_order defaults to the end.
    """
    return await service.create_category(data)


# Subcategory routes are declared before /{category_id} so the literal path wins
@router.post(
    "/subcategories",
    response_model=SubcategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def create_subcategory(
    data: SubcategoryCreate,
    service: CategoryService = Depends(get_category_service),
):
    return await service.create_subcategory(data)


@router.get(
    "/subcategories/{subcategory_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_subcategory(
    subcategory_id: str,
    service: CategoryService = Depends(get_category_service),
):
    return await service.get_subcategory(subcategory_id)


@router.put(
    "/subcategories/{subcategory_id}",
    response_model=SubcategoryResponse,
    responses={403: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def update_subcategory(
    subcategory_id: str,
    data: SubcategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    return await service.update_subcategory(subcategory_id, data)


@router.delete(
    "/subcategories/{subcategory_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def delete_subcategory(
    subcategory_id: str,
    service: CategoryService = Depends(get_category_service),
):
    """Delete a subcategory that no chart is linked to"""
    await service.delete_subcategory(subcategory_id)
    return {"success": True}


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
):
    return await service.get_category(category_id)


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={403: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    """Update a category; a new name re-derives the slug unless one is given"""
    return await service.update_category(category_id, data)


@router.delete(
    "/{category_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
):
    """Delete a category and its subcategories when none of them hold charts"""
    await service.delete_category(category_id)
    return {"success": True}
