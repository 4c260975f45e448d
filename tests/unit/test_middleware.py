"""Unit tests for middleware components"""
import uuid

import pytest
from unittest.mock import Mock, patch

from app.middleware.correlation_id import (
    MAX_CORRELATION_ID_LENGTH,
    CorrelationIdMiddleware,
    get_correlation_id,
    set_correlation_id,
)
from app.middleware.cors import PublicCorsMiddleware, get_cors_headers, is_origin_allowed


class MockRequest:
    def __init__(self, headers=None, path="/api/v1/size-charts", method="GET"):
        self.headers = headers or {}
        self.state = Mock()
        self.method = method
        self.url = Mock()
        self.url.path = path


def make_call_next(captured=None):
    async def call_next(req):
        if captured is not None:
            captured.append(get_correlation_id())
        response = Mock()
        response.headers = {}
        return response
    return call_next


class TestCorrelationIdMiddleware:
    """Test CorrelationIdMiddleware functionality"""

    @pytest.mark.asyncio
    @patch('app.middleware.correlation_id.config')
    async def test_correlation_id_from_header(self, mock_config):
        """Test reusing the correlation ID sent by the caller"""
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = CorrelationIdMiddleware(Mock())
        captured = []

        response = await middleware.dispatch(
            MockRequest({"X-Correlation-ID": "test-correlation-123"}), make_call_next(captured)
        )

        assert captured == ["test-correlation-123"]
        assert response.headers["X-Correlation-ID"] == "test-correlation-123"

    @pytest.mark.asyncio
    @patch('app.middleware.correlation_id.config')
    async def test_correlation_id_generated(self, mock_config):
        """Test generating a new correlation ID when none is provided"""
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = CorrelationIdMiddleware(Mock())
        captured = []

        response = await middleware.dispatch(MockRequest(), make_call_next(captured))

        generated_id = captured[0]
        assert uuid.UUID(generated_id)
        assert response.headers["X-Correlation-ID"] == generated_id

    @pytest.mark.asyncio
    @patch('app.middleware.correlation_id.config')
    async def test_oversized_correlation_id_replaced(self, mock_config):
        """Test that an overlong incoming ID is not trusted"""
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = CorrelationIdMiddleware(Mock())
        too_long = "x" * (MAX_CORRELATION_ID_LENGTH + 1)

        response = await middleware.dispatch(
            MockRequest({"X-Correlation-ID": too_long}), make_call_next()
        )

        assert response.headers["X-Correlation-ID"] != too_long

    def test_set_and_get_correlation_id(self):
        """Test setting and getting correlation ID"""
        set_correlation_id("test-correlation-456")
        assert get_correlation_id() == "test-correlation-456"

    def test_get_correlation_id_none(self):
        """Test getting correlation ID returns None when cleared"""
        set_correlation_id(None)
        assert get_correlation_id() is None


class TestCorsHeaders:
    """Test CORS header computation for the public API"""

    @patch('app.middleware.cors.config')
    def test_no_origins_configured(self, mock_config):
        mock_config.cors_origins = []
        assert get_cors_headers("https://shop.example.com") == {}
        assert is_origin_allowed("https://shop.example.com") is False

    @patch('app.middleware.cors.config')
    def test_wildcard_origin(self, mock_config):
        """Wildcard answers with * and never allows credentials"""
        mock_config.cors_origins = ["*"]

        headers = get_cors_headers("https://shop.example.com")

        assert headers["Access-Control-Allow-Origin"] == "*"
        assert "Access-Control-Allow-Credentials" not in headers
        assert headers["Access-Control-Allow-Methods"] == "GET, OPTIONS"
        assert "X-API-Key" in headers["Access-Control-Allow-Headers"]

    @patch('app.middleware.cors.config')
    def test_listed_origin_echoed(self, mock_config):
        mock_config.cors_origins = ["https://shop.example.com", "https://other.example.com"]

        headers = get_cors_headers("https://shop.example.com")

        assert headers["Access-Control-Allow-Origin"] == "https://shop.example.com"
        assert headers["Access-Control-Allow-Credentials"] == "true"
        assert headers["Vary"] == "Origin"
        assert headers["Access-Control-Max-Age"] == "86400"

    @patch('app.middleware.cors.config')
    def test_unlisted_origin_gets_nothing(self, mock_config):
        mock_config.cors_origins = ["https://shop.example.com"]
        assert get_cors_headers("https://evil.example.com") == {}
        assert get_cors_headers(None) == {}


class TestPublicCorsMiddleware:
    """Test PublicCorsMiddleware dispatch"""

    @pytest.mark.asyncio
    @patch('app.middleware.cors.config')
    async def test_preflight_short_circuits(self, mock_config):
        mock_config.cors_origins = ["*"]
        middleware = PublicCorsMiddleware(Mock())
        request = MockRequest({"Origin": "https://shop.example.com"}, method="OPTIONS")

        async def call_next(req):
            raise AssertionError("preflight must not reach the route")

        response = await middleware.dispatch(request, call_next)

        assert response.status_code == 204
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    @pytest.mark.asyncio
    @patch('app.middleware.cors.config')
    async def test_public_response_decorated(self, mock_config):
        mock_config.cors_origins = ["https://shop.example.com"]
        middleware = PublicCorsMiddleware(Mock())
        request = MockRequest({"Origin": "https://shop.example.com"}, path="/embed/size-charts.js")

        response = await middleware.dispatch(request, make_call_next())

        assert response.headers["Access-Control-Allow-Origin"] == "https://shop.example.com"

    @pytest.mark.asyncio
    @patch('app.middleware.cors.config')
    async def test_admin_routes_untouched(self, mock_config):
        mock_config.cors_origins = ["*"]
        middleware = PublicCorsMiddleware(Mock())
        request = MockRequest({"Origin": "https://shop.example.com"}, path="/api/size-charts")

        response = await middleware.dispatch(request, make_call_next())

        assert response.headers == {}
