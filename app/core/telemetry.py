"""
OpenTelemetry instrumentation for FastAPI and MongoDB.

Spans are created for incoming requests and for pymongo operations (which
motor uses underneath). Export is configured through the standard OTEL_*
environment variables.
"""

from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.pymongo import PymongoInstrumentor

from app.core.config import config
from app.core.logger import logger


def instrument_app(app):
    """
    Instrument the FastAPI application and the MongoDB driver.

    Args:
        app: FastAPI application instance
    """
    if not config.enable_tracing:
        logger.info("OpenTelemetry instrumentation disabled")
        return

    try:
        FastAPIInstrumentor.instrument_app(app, excluded_urls="api/health.*")
        PymongoInstrumentor().instrument()
        logger.info("FastAPI and PyMongo instrumented with OpenTelemetry")
    except Exception as e:
        # Tracing is optional; the service keeps running without it
        logger.error(f"Failed to instrument application: {e}", exc_info=True)
