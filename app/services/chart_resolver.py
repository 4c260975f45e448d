"""
Batch loading of the entities a size chart references.

Charts store subcategory, instruction and label ids; admin graphs, public
responses and exports all need the referenced documents. The resolver loads
them with one query per collection for any number of charts.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from app.repositories.category import CategoryRepository, SubcategoryRepository
from app.repositories.measurement_instruction import MeasurementInstructionRepository
from app.repositories.size_label import SizeLabelRepository


@dataclass
class ChartReferences:
    """Referenced documents keyed by id"""
    subcategories: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    categories: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    instructions: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    labels: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def category_for(self, subcategory: Dict[str, Any]) -> Dict[str, Any]:
        return self.categories.get(subcategory.get("category_id"), {})


def sorted_columns(chart: Dict[str, Any]) -> List[Dict[str, Any]]:
    return sorted(chart.get("columns", []), key=lambda c: c.get("display_order", 0))


def sorted_rows(chart: Dict[str, Any]) -> List[Dict[str, Any]]:
    return sorted(chart.get("rows", []), key=lambda r: r.get("display_order", 0))


def sorted_links(links: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(links, key=lambda link: link.get("display_order", 0))


class ChartReferenceResolver:
    """Load subcategories, categories, instructions and labels for charts"""

    def __init__(
        self,
        category_repo: CategoryRepository,
        subcategory_repo: SubcategoryRepository,
        instruction_repo: MeasurementInstructionRepository,
        label_repo: SizeLabelRepository,
    ):
        self.category_repo = category_repo
        self.subcategory_repo = subcategory_repo
        self.instruction_repo = instruction_repo
        self.label_repo = label_repo

    async def resolve(self, charts: List[Dict[str, Any]]) -> ChartReferences:
        subcategory_ids = set()
        instruction_ids = set()
        label_ids = set()
        for chart in charts:
            subcategory_ids.update(link["subcategory_id"] for link in chart.get("subcategories", []))
            instruction_ids.update(link["instruction_id"] for link in chart.get("measurement_instructions", []))
            for row in chart.get("rows", []):
                label_ids.update(cell["label_id"] for cell in row.get("cells", []) if cell.get("label_id"))

        refs = ChartReferences()
        if subcategory_ids:
            subcategories = await self.subcategory_repo.find_by_ids(subcategory_ids)
            refs.subcategories = {sub["id"]: sub for sub in subcategories}
            category_ids = {sub["category_id"] for sub in subcategories}
            if category_ids:
                categories = await self.category_repo.find_by_ids(category_ids)
                refs.categories = {cat["id"]: cat for cat in categories}
        if instruction_ids:
            instructions = await self.instruction_repo.find_by_ids(instruction_ids)
            refs.instructions = {inst["id"]: inst for inst in instructions}
        if label_ids:
            labels = await self.label_repo.find_by_ids(label_ids)
            refs.labels = {label["id"]: label for label in labels}
        return refs
