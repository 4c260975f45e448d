"""
FastAPI Application - Size Chart Service
Admin API for managing size charts plus a public, read-only v1 API
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import (
    admin,
    api_keys,
    categories,
    embed,
    health,
    labels,
    measurement_instructions,
    size_charts,
    templates,
    v1,
)
from app.core.config import config
from app.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.core.logger import logger
from app.core.rate_limit import limiter, rate_limit_exceeded_handler
from app.core.telemetry import instrument_app
from app.db.mongodb import close_mongo_connection, connect_to_mongo, ensure_indexes
from app.dependencies.auth import require_admin
from app.middleware.correlation_id import CorrelationIdMiddleware
from app.middleware.cors import PublicCorsMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info("Starting Size Chart Service...")
    await connect_to_mongo()
    await ensure_indexes()

    logger.info(
        "Size Chart Service started successfully",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port,
            "demo_mode": config.demo_mode,
            "admin_auth_enabled": config.admin_auth_enabled,
        }
    )

    yield

    # Shutdown
    logger.info("Shutting down Size Chart Service...")
    await close_mongo_connection()


app = FastAPI(
    title="Size Chart Service",
    description="Size chart management with a public read API and embeddable widget",
    version=config.service_version,
    lifespan=lifespan
)

instrument_app(app)

# Error handlers: every failure is returned as {"error": ...}
app.add_exception_handler(ErrorResponse, error_response_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# Rate limiter used by the public API decorators
app.state.limiter = limiter

# Last added runs first: CORS wraps correlation so preflights short-circuit early
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(PublicCorsMiddleware)

admin_only = [Depends(require_admin)]

# Health checks (public)
app.include_router(health.router, prefix="/api", tags=["health"])

# Admin API
app.include_router(size_charts.router, prefix="/api/size-charts", tags=["size-charts"], dependencies=admin_only)
app.include_router(categories.router, prefix="/api/categories", tags=["categories"], dependencies=admin_only)
app.include_router(labels.router, prefix="/api/labels", tags=["labels"], dependencies=admin_only)
app.include_router(labels.label_types_router, prefix="/api/label-types", tags=["labels"], dependencies=admin_only)
app.include_router(
    measurement_instructions.router,
    prefix="/api/measurement-instructions",
    tags=["measurement-instructions"],
    dependencies=admin_only,
)
app.include_router(api_keys.router, prefix="/api/api-keys", tags=["api-keys"], dependencies=admin_only)
app.include_router(templates.router, prefix="/api/templates", tags=["templates"], dependencies=admin_only)

# Session and demo endpoints guard themselves
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])

# Public API and widget
app.include_router(v1.router, prefix="/api/v1", tags=["public-v1"])
app.include_router(embed.router, prefix="/embed", tags=["embed"])


if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"Starting {config.service_name} on port {config.port}",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port
        }
    )

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.environment == "development"
    )
