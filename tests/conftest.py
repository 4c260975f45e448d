"""Shared test fixtures"""
import pytest
from unittest.mock import AsyncMock
from datetime import datetime, timezone

from app.core.config import config


@pytest.fixture
def mock_collection():
    """Mock MongoDB collection for testing"""
    return AsyncMock()


@pytest.fixture
def category_repo():
    return AsyncMock()


@pytest.fixture
def subcategory_repo():
    return AsyncMock()


@pytest.fixture
def chart_repo():
    return AsyncMock()


@pytest.fixture
def label_repo():
    return AsyncMock()


@pytest.fixture
def instruction_repo():
    return AsyncMock()


@pytest.fixture
def demo_mode():
    """Run a test with DEMO_MODE switched on"""
    original = config.demo_mode
    config.demo_mode = True
    yield
    config.demo_mode = original


@pytest.fixture
def sample_chart():
    """Stored size chart as returned by the repository layer"""
    now = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    return {
        "id": "chart1",
        "name": "Men's Tops",
        "slug": "mens-tops",
        "description": "Shirts and jackets",
        "is_published": True,
        "subcategories": [{"subcategory_id": "sub1", "display_order": 0}],
        "measurement_instructions": [{"instruction_id": "inst1", "display_order": 0}],
        "columns": [
            {"id": "col-size", "name": "Size", "column_type": "SIZE_LABEL", "label_type": "ALPHA_SIZE", "display_order": 0},
            {"id": "col-chest", "name": "Chest", "column_type": "MEASUREMENT", "label_type": None, "display_order": 1},
            {"id": "col-fit", "name": "Fit", "column_type": "TEXT", "label_type": None, "display_order": 2},
        ],
        "rows": [
            {
                "id": "row1",
                "display_order": 0,
                "cells": [
                    {"id": "cell1", "column_id": "col-size", "label_id": "label-sm"},
                    {"id": "cell2", "column_id": "col-chest", "value_min_inches": 34.0, "value_max_inches": 36.0,
                     "value_min_cm": 86.4, "value_max_cm": 91.4},
                    {"id": "cell3", "column_id": "col-fit", "value_text": "Regular"},
                ],
            },
            {
                "id": "row2",
                "display_order": 1,
                "cells": [
                    {"id": "cell4", "column_id": "col-size", "value_text": "MD"},
                    {"id": "cell5", "column_id": "col-chest", "value_inches": 38.5, "value_cm": 97.8},
                ],
            },
        ],
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def sample_refs():
    """Documents referenced by sample_chart"""
    from app.services.chart_resolver import ChartReferences

    return ChartReferences(
        subcategories={"sub1": {"id": "sub1", "name": "Tops", "slug": "tops", "category_id": "cat1", "display_order": 0}},
        categories={"cat1": {"id": "cat1", "name": "Men's", "slug": "mens", "display_order": 0}},
        instructions={"inst1": {"id": "inst1", "key": "chest", "name": "Chest", "instruction": "Measure around the chest."}},
        labels={"label-sm": {"id": "label-sm", "key": "SIZE_SM", "display_value": "SM", "label_type": "ALPHA_SIZE", "sort_order": 3}},
    )
