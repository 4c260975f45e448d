"""
Dependency injection for repositories and services
"""

from fastapi import Depends

from app.db.mongodb import (
    API_KEYS,
    CATEGORIES,
    LABEL_TYPE_CONFIGS,
    MEASUREMENT_INSTRUCTIONS,
    SIZE_CHARTS,
    SIZE_LABELS,
    SUBCATEGORIES,
    get_collection,
)
from app.repositories.api_key import ApiKeyRepository
from app.repositories.category import CategoryRepository, SubcategoryRepository
from app.repositories.measurement_instruction import MeasurementInstructionRepository
from app.repositories.size_chart import SizeChartRepository
from app.repositories.size_label import LabelTypeConfigRepository, SizeLabelRepository
from app.services.api_key import ApiKeyService
from app.services.category import CategoryService
from app.services.chart_resolver import ChartReferenceResolver
from app.services.demo import DemoService
from app.services.import_export import ImportExportService
from app.services.label import LabelService
from app.services.measurement_instruction import MeasurementInstructionService
from app.services.public_api import PublicApiService
from app.services.size_chart import SizeChartService
from app.services.template import TemplateService


async def get_category_repository() -> CategoryRepository:
    return CategoryRepository(await get_collection(CATEGORIES))


async def get_subcategory_repository() -> SubcategoryRepository:
    return SubcategoryRepository(await get_collection(SUBCATEGORIES))


async def get_size_chart_repository() -> SizeChartRepository:
    return SizeChartRepository(await get_collection(SIZE_CHARTS))


async def get_size_label_repository() -> SizeLabelRepository:
    return SizeLabelRepository(await get_collection(SIZE_LABELS))


async def get_label_type_repository() -> LabelTypeConfigRepository:
    return LabelTypeConfigRepository(await get_collection(LABEL_TYPE_CONFIGS))


async def get_instruction_repository() -> MeasurementInstructionRepository:
    return MeasurementInstructionRepository(await get_collection(MEASUREMENT_INSTRUCTIONS))


async def get_api_key_repository() -> ApiKeyRepository:
    return ApiKeyRepository(await get_collection(API_KEYS))


async def get_chart_resolver(
    category_repo: CategoryRepository = Depends(get_category_repository),
    subcategory_repo: SubcategoryRepository = Depends(get_subcategory_repository),
    instruction_repo: MeasurementInstructionRepository = Depends(get_instruction_repository),
    label_repo: SizeLabelRepository = Depends(get_size_label_repository),
) -> ChartReferenceResolver:
    """Resolver for the entities a chart references"""
    return ChartReferenceResolver(category_repo, subcategory_repo, instruction_repo, label_repo)


async def get_size_chart_service(
    chart_repo: SizeChartRepository = Depends(get_size_chart_repository),
    subcategory_repo: SubcategoryRepository = Depends(get_subcategory_repository),
    label_repo: SizeLabelRepository = Depends(get_size_label_repository),
    instruction_repo: MeasurementInstructionRepository = Depends(get_instruction_repository),
    resolver: ChartReferenceResolver = Depends(get_chart_resolver),
) -> SizeChartService:
    """Get size chart service instance"""
    return SizeChartService(chart_repo, subcategory_repo, label_repo, instruction_repo, resolver)


async def get_category_service(
    category_repo: CategoryRepository = Depends(get_category_repository),
    subcategory_repo: SubcategoryRepository = Depends(get_subcategory_repository),
    chart_repo: SizeChartRepository = Depends(get_size_chart_repository),
) -> CategoryService:
    return CategoryService(category_repo, subcategory_repo, chart_repo)


async def get_label_service(
    label_repo: SizeLabelRepository = Depends(get_size_label_repository),
    chart_repo: SizeChartRepository = Depends(get_size_chart_repository),
    label_type_repo: LabelTypeConfigRepository = Depends(get_label_type_repository),
) -> LabelService:
    return LabelService(label_repo, chart_repo, label_type_repo)


async def get_instruction_service(
    instruction_repo: MeasurementInstructionRepository = Depends(get_instruction_repository),
    chart_repo: SizeChartRepository = Depends(get_size_chart_repository),
) -> MeasurementInstructionService:
    return MeasurementInstructionService(instruction_repo, chart_repo)


async def get_api_key_service(
    repository: ApiKeyRepository = Depends(get_api_key_repository),
) -> ApiKeyService:
    return ApiKeyService(repository)


async def get_template_service(
    chart_repo: SizeChartRepository = Depends(get_size_chart_repository),
    subcategory_repo: SubcategoryRepository = Depends(get_subcategory_repository),
    instruction_repo: MeasurementInstructionRepository = Depends(get_instruction_repository),
    chart_service: SizeChartService = Depends(get_size_chart_service),
) -> TemplateService:
    return TemplateService(chart_repo, subcategory_repo, instruction_repo, chart_service)


async def get_import_export_service(
    chart_repo: SizeChartRepository = Depends(get_size_chart_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
    subcategory_repo: SubcategoryRepository = Depends(get_subcategory_repository),
    instruction_repo: MeasurementInstructionRepository = Depends(get_instruction_repository),
    label_repo: SizeLabelRepository = Depends(get_size_label_repository),
    resolver: ChartReferenceResolver = Depends(get_chart_resolver),
) -> ImportExportService:
    return ImportExportService(chart_repo, category_repo, subcategory_repo, instruction_repo, label_repo, resolver)


async def get_public_api_service(
    chart_repo: SizeChartRepository = Depends(get_size_chart_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
    subcategory_repo: SubcategoryRepository = Depends(get_subcategory_repository),
    label_repo: SizeLabelRepository = Depends(get_size_label_repository),
    resolver: ChartReferenceResolver = Depends(get_chart_resolver),
) -> PublicApiService:
    """Get the read-only service behind /api/v1"""
    return PublicApiService(chart_repo, category_repo, subcategory_repo, label_repo, resolver)


async def get_demo_service(
    category_repo: CategoryRepository = Depends(get_category_repository),
    subcategory_repo: SubcategoryRepository = Depends(get_subcategory_repository),
    chart_repo: SizeChartRepository = Depends(get_size_chart_repository),
    instruction_repo: MeasurementInstructionRepository = Depends(get_instruction_repository),
    label_repo: SizeLabelRepository = Depends(get_size_label_repository),
) -> DemoService:
    return DemoService(category_repo, subcategory_repo, chart_repo, instruction_repo, label_repo)
