"""
Admin measurement instruction API endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, status

from app.core.errors import ErrorResponseModel
from app.dependencies.services import get_instruction_service
from app.schemas.measurement_instruction import MeasurementInstructionCreate, MeasurementInstructionUpdate
from app.services.measurement_instruction import MeasurementInstructionService

router = APIRouter()


@router.get("", response_model=List[dict])
async def list_instructions(service: MeasurementInstructionService = Depends(get_instruction_service)):
    """Instructions in sort order with the number of charts using each"""
    return await service.list_instructions()


@router.post(
    "",
    response_model=dict,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponseModel}},
)
async def create_instruction(
    data: MeasurementInstructionCreate,
    service: MeasurementInstructionService = Depends(get_instruction_service),
):
    return await service.create_instruction(data)


@router.get(
    "/{instruction_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_instruction(
    instruction_id: str,
    service: MeasurementInstructionService = Depends(get_instruction_service),
):
    return await service.get_instruction(instruction_id)


@router.put(
    "/{instruction_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def update_instruction(
    instruction_id: str,
    data: MeasurementInstructionUpdate,
    service: MeasurementInstructionService = Depends(get_instruction_service),
):
    return await service.update_instruction(instruction_id, data)


@router.delete(
    "/{instruction_id}",
    response_model=dict,
    responses={404: {"model": ErrorResponseModel}},
)
async def delete_instruction(
    instruction_id: str,
    service: MeasurementInstructionService = Depends(get_instruction_service),
):
    """Delete an instruction and unlink it from every chart"""
    return await service.delete_instruction(instruction_id)
