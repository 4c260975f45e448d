"""
Services module initialization
"""

from .api_key import ApiKeyService
from .category import CategoryService
from .chart_resolver import ChartReferenceResolver
from .demo import DemoService
from .import_export import ImportExportService
from .label import LabelService
from .measurement_instruction import MeasurementInstructionService
from .public_api import PublicApiService
from .size_chart import SizeChartService
from .template import TemplateService

__all__ = [
    "ApiKeyService",
    "CategoryService",
    "ChartReferenceResolver",
    "DemoService",
    "ImportExportService",
    "LabelService",
    "MeasurementInstructionService",
    "PublicApiService",
    "SizeChartService",
    "TemplateService",
]
