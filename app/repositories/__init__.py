"""
Repositories module initialization
"""

from .api_key import ApiKeyRepository
from .base import BaseRepository
from .category import CategoryRepository, SubcategoryRepository
from .measurement_instruction import MeasurementInstructionRepository
from .size_chart import SizeChartRepository
from .size_label import LabelTypeConfigRepository, SizeLabelRepository

__all__ = [
    "ApiKeyRepository",
    "BaseRepository",
    "CategoryRepository",
    "SubcategoryRepository",
    "MeasurementInstructionRepository",
    "SizeChartRepository",
    "LabelTypeConfigRepository",
    "SizeLabelRepository",
]
