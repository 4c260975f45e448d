"""Fixtures for API tests: the real app with services replaced by mocks"""
import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from main import app
from app.core.config import config
from app.core.rate_limit import limiter
from app.dependencies import services
from app.services.api_key import ApiKeyValidation


@pytest.fixture(autouse=True)
def open_admin():
    """Admin auth off, keys optional and no demo mode unless a test says otherwise"""
    saved = (
        config.admin_username,
        config.admin_password,
        config.demo_mode,
        config.api_auth_required,
        config.cron_secret,
        config.cors_allowed_origins,
        config.rate_limit_per_minute,
    )
    config.admin_username = ""
    config.admin_password = ""
    config.demo_mode = False
    config.api_auth_required = False
    config.cron_secret = ""
    config.cors_allowed_origins = ""
    limiter.reset()
    yield
    (
        config.admin_username,
        config.admin_password,
        config.demo_mode,
        config.api_auth_required,
        config.cron_secret,
        config.cors_allowed_origins,
        config.rate_limit_per_minute,
    ) = saved
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Test client without lifespan, so no MongoDB connection is made"""
    return TestClient(app)


def _override(getter):
    mock = AsyncMock()
    app.dependency_overrides[getter] = lambda: mock
    return mock


@pytest.fixture
def size_chart_service():
    return _override(services.get_size_chart_service)


@pytest.fixture
def import_export_service():
    return _override(services.get_import_export_service)


@pytest.fixture
def category_service():
    return _override(services.get_category_service)


@pytest.fixture
def label_service():
    return _override(services.get_label_service)


@pytest.fixture
def instruction_service():
    return _override(services.get_instruction_service)


@pytest.fixture
def template_service():
    return _override(services.get_template_service)


@pytest.fixture
def demo_service():
    return _override(services.get_demo_service)


@pytest.fixture
def public_service():
    return _override(services.get_public_api_service)


@pytest.fixture
def api_key_service():
    """API key service whose validate_key rejects everything by default"""
    mock = _override(services.get_api_key_service)
    mock.validate_key.return_value = ApiKeyValidation(valid=False, error="Invalid API key")
    return mock
