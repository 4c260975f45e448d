"""
Measurement instruction service
"""

from typing import Any, Dict, List

from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.repositories.measurement_instruction import MeasurementInstructionRepository
from app.repositories.size_chart import SizeChartRepository
from app.schemas.measurement_instruction import MeasurementInstructionCreate, MeasurementInstructionUpdate


class MeasurementInstructionService:
    """Service layer for "how to measure" instructions"""

    def __init__(self, instruction_repo: MeasurementInstructionRepository, chart_repo: SizeChartRepository):
        self.instruction_repo = instruction_repo
        self.chart_repo = chart_repo

    async def list_instructions(self) -> List[Dict[str, Any]]:
        instructions = await self.instruction_repo.list_ordered()
        counts = await self.chart_repo.instruction_counts()
        for instruction in instructions:
            instruction["chart_count"] = counts.get(instruction["id"], 0)
        return instructions

    async def get_instruction(self, instruction_id: str) -> Dict[str, Any]:
        instruction = await self.instruction_repo.find_by_id(instruction_id)
        if not instruction:
            raise ErrorResponse("Measurement instruction not found", status_code=404)
        charts = await self.chart_repo.find_by_instruction(instruction_id)
        instruction["size_charts"] = [
            {"id": chart["id"], "name": chart["name"], "slug": chart["slug"]} for chart in charts
        ]
        return instruction

    async def create_instruction(self, data: MeasurementInstructionCreate) -> Dict[str, Any]:
        if await self.instruction_repo.find_by_key(data.key):
            raise ErrorResponse("An instruction with this key already exists", status_code=409)

        fields = data.model_dump()
        if fields["sort_order"] is None:
            fields["sort_order"] = 0
        instruction = await self.instruction_repo.insert(fields)
        logger.info(
            f"Created measurement instruction {instruction['key']}",
            metadata={"event": "create_instruction", "instruction_id": instruction["id"]}
        )
        return instruction

    async def update_instruction(self, instruction_id: str, data: MeasurementInstructionUpdate) -> Dict[str, Any]:
        existing = await self.instruction_repo.find_by_id(instruction_id)
        if not existing:
            raise ErrorResponse("Measurement instruction not found", status_code=404)

        fields = data.model_dump(exclude_unset=True, exclude_none=True)
        if fields.get("key") and fields["key"] != existing["key"]:
            if await self.instruction_repo.find_by_key(fields["key"]):
                raise ErrorResponse("An instruction with this key already exists", status_code=409)

        instruction = await self.instruction_repo.update_by_id(instruction_id, fields)
        if not instruction:
            raise ErrorResponse("Measurement instruction not found", status_code=404)
        return instruction

    async def delete_instruction(self, instruction_id: str) -> Dict[str, Any]:
        """Delete an instruction and unlink it from every chart"""
        if not await self.instruction_repo.find_by_id(instruction_id):
            raise ErrorResponse("Measurement instruction not found", status_code=404)

        unlinked = await self.chart_repo.unlink_instruction(instruction_id)
        await self.instruction_repo.delete_by_id(instruction_id)
        logger.info(
            f"Deleted measurement instruction {instruction_id}",
            metadata={"event": "delete_instruction", "instruction_id": instruction_id, "unlinked_charts": unlinked}
        )
        message = (
            f"Deleted instruction and removed from {unlinked} size chart(s)"
            if unlinked > 0 else "Deleted instruction"
        )
        return {"success": True, "message": message}
