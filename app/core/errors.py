"""
Error handling utilities.
Every error leaves the service as JSON with an "error" message.
"""

import traceback
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.config import config
from app.core.logger import logger


class ErrorResponse(Exception):
    """Custom exception for application errors"""

    def __init__(self, message: str, status_code: int = 400, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    error: str
    details: Optional[Any] = None


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for custom ErrorResponse exceptions"""
    metadata = {
        "event": "error_response",
        "status_code": exc.status_code,
        "url": str(request.url),
        "method": request.method,
    }
    if exc.details:
        metadata["details"] = exc.details

    if config.environment == "development" and exc.status_code >= 500:
        metadata["traceback"] = traceback.format_exc()

    if exc.status_code >= 500:
        logger.error(f"Error: {exc.message}", metadata=metadata)
    else:
        logger.warning(f"Error: {exc.message}", metadata=metadata)

    content: Dict[str, Any] = {"error": exc.message}
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(content))


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handler for FastAPI HTTPException"""
    logger.warning(
        f"HTTPException: {exc.detail}",
        metadata={
            "event": "http_exception",
            "status_code": exc.status_code,
            "url": str(request.url),
            "method": request.method,
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Schema validation failures are client errors (400)"""
    logger.info(
        "Request validation failed",
        metadata={"event": "validation_failed", "url": str(request.url), "method": request.method}
    )
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({"error": "Validation failed", "details": exc.errors()}),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler so unexpected failures still answer with JSON"""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}",
        error=exc,
        metadata={"event": "unhandled_exception"},
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
