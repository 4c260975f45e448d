"""Tests for MeasurementInstructionService"""
import pytest

from app.core.errors import ErrorResponse
from app.schemas.measurement_instruction import MeasurementInstructionCreate, MeasurementInstructionUpdate
from app.services.measurement_instruction import MeasurementInstructionService


@pytest.fixture
def service(instruction_repo, chart_repo):
    return MeasurementInstructionService(instruction_repo, chart_repo)


class TestMeasurementInstructionService:
    @pytest.mark.asyncio
    async def test_list_includes_chart_counts(self, service, instruction_repo, chart_repo):
        instruction_repo.list_ordered.return_value = [{"id": "i1", "key": "chest"}, {"id": "i2", "key": "waist"}]
        chart_repo.instruction_counts.return_value = {"i1": 3}

        instructions = await service.list_instructions()

        assert [i["chart_count"] for i in instructions] == [3, 0]

    @pytest.mark.asyncio
    async def test_get_lists_linked_charts(self, service, instruction_repo, chart_repo):
        instruction_repo.find_by_id.return_value = {"id": "i1", "key": "chest"}
        chart_repo.find_by_instruction.return_value = [
            {"id": "c1", "name": "Men's Tops", "slug": "mens-tops", "rows": []},
        ]

        instruction = await service.get_instruction("i1")

        assert instruction["size_charts"] == [{"id": "c1", "name": "Men's Tops", "slug": "mens-tops"}]

    @pytest.mark.asyncio
    async def test_create_duplicate_key(self, service, instruction_repo):
        instruction_repo.find_by_key.return_value = {"id": "i1"}

        with pytest.raises(ErrorResponse) as exc_info:
            await service.create_instruction(
                MeasurementInstructionCreate(key="chest", name="Chest", instruction="Measure around.")
            )

        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_update_missing(self, service, instruction_repo):
        instruction_repo.find_by_id.return_value = None

        with pytest.raises(ErrorResponse) as exc_info:
            await service.update_instruction("nope", MeasurementInstructionUpdate(name="Chest"))

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unlinks_from_charts(self, service, instruction_repo, chart_repo):
        instruction_repo.find_by_id.return_value = {"id": "i1"}
        chart_repo.unlink_instruction.return_value = 2

        result = await service.delete_instruction("i1")

        chart_repo.unlink_instruction.assert_awaited_once_with("i1")
        instruction_repo.delete_by_id.assert_awaited_once_with("i1")
        assert result == {"success": True, "message": "Deleted instruction and removed from 2 size chart(s)"}

    @pytest.mark.asyncio
    async def test_delete_unused_instruction(self, service, instruction_repo, chart_repo):
        instruction_repo.find_by_id.return_value = {"id": "i1"}
        chart_repo.unlink_instruction.return_value = 0

        result = await service.delete_instruction("i1")

        assert result["message"] == "Deleted instruction"
