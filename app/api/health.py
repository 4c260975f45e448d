"""
Health and operational API endpoints
"""

import asyncio
import time
from datetime import datetime
from typing import Any, Dict, List

import psutil
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.core.config import config
from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.db.mongodb import CATEGORIES, SIZE_CHARTS, connect_to_mongo, db

router = APIRouter()

# Track service start time
start_time = time.time()


@router.get("/health")
def health_check(request: Request):
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "version": config.api_version,
    }


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness probe - MongoDB reachable and system resources in bounds"""
    health_checks = await perform_health_checks()
    failed_checks = [check for check in health_checks if check["status"] == "unhealthy"]

    if not failed_checks:
        return {
            "status": "ready",
            "service": config.service_name,
            "timestamp": datetime.now().isoformat(),
            "checks": health_checks,
        }

    logger.warning(
        f"Readiness check failed - {len(failed_checks)} checks failed",
        metadata={
            "failed_checks": [check["name"] for check in failed_checks],
            "event": "readiness_check_failed"
        }
    )
    return JSONResponse(
        status_code=503,
        content={
            "status": "not ready",
            "service": config.service_name,
            "timestamp": datetime.now().isoformat(),
            "checks": health_checks,
            "errors": [f"{check['name']}: {check.get('error', 'Unknown error')}" for check in failed_checks],
        },
    )


@router.get("/health/live")
def liveness_check(request: Request):
    """Liveness probe - check if the app is running"""
    return {
        "status": "alive",
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "uptime": time.time() - start_time,
    }


async def perform_health_checks() -> List[Dict[str, Any]]:
    """Run the dependency checks concurrently"""
    return list(await asyncio.gather(check_database_health(), check_catalog_data(), check_system_resources()))


async def check_database_health() -> Dict[str, Any]:
    """Check MongoDB database connectivity"""
    check_start = time.time()

    try:
        if not db.client:
            await connect_to_mongo()

        await db.client.admin.command('ping')
        response_time_ms = (time.time() - check_start) * 1000

        logger.debug(
            "Database health check passed",
            metadata={
                "response_time_ms": response_time_ms,
                "database": config.mongodb_database,
                "event": "health_check_database_success"
            }
        )

        return {
            "name": "database",
            "status": "healthy",
            "response_time_ms": round(response_time_ms, 2),
            "database": config.mongodb_database,
            "timestamp": datetime.now().isoformat(),
        }

    except (PyMongoError, ErrorResponse) as e:
        response_time_ms = (time.time() - check_start) * 1000
        error_msg = str(e)

        logger.error(
            f"Database health check failed: {error_msg}",
            metadata={
                "response_time_ms": response_time_ms,
                "database_host": config.mongodb_host,
                "event": "health_check_database_failed"
            }
        )

        return {
            "name": "database",
            "status": "unhealthy",
            "error": error_msg,
            "response_time_ms": round(response_time_ms, 2),
            "timestamp": datetime.now().isoformat(),
        }


async def check_catalog_data() -> Dict[str, Any]:
    """
    Report how much size chart data is stored.
    An empty catalog is "degraded", not unhealthy: a fresh install has no charts yet.
    """
    try:
        if db.database is None:
            await connect_to_mongo()
        charts = db.database[SIZE_CHARTS]
        total_charts = await charts.count_documents({})
        published_charts = await charts.count_documents({"is_published": True})
        categories = await db.database[CATEGORIES].count_documents({})
    except (PyMongoError, ErrorResponse) as e:
        logger.error(
            f"Catalog data check failed: {str(e)}",
            metadata={"event": "health_check_catalog_failed"}
        )
        return {
            "name": "catalog",
            "status": "unhealthy",
            "error": str(e),
            "timestamp": datetime.now().isoformat(),
        }

    return {
        "name": "catalog",
        "status": "healthy" if total_charts else "degraded",
        "size_charts": total_charts,
        "published_size_charts": published_charts,
        "categories": categories,
        "demo_mode": config.demo_mode,
        "timestamp": datetime.now().isoformat(),
    }


async def check_system_resources() -> Dict[str, Any]:
    """Check system resources (memory, CPU, disk space)"""
    try:
        process = psutil.Process()
        memory_info = process.memory_info()
        cpu_percent = process.cpu_percent()
        system_memory = psutil.virtual_memory()
        disk_usage = psutil.disk_usage('/')
    except psutil.Error as e:
        logger.error(
            f"System resources check failed: {str(e)}",
            metadata={"event": "health_check_resources_failed"}
        )
        return {
            "name": "system_resources",
            "status": "unhealthy",
            "error": f"System resources check failed: {str(e)}",
            "timestamp": datetime.now().isoformat(),
        }

    warnings = []
    if system_memory.percent > 90:
        warnings.append(f"High system memory usage: {system_memory.percent:.1f}%")
    if disk_usage.percent > 85:
        warnings.append(f"High disk usage: {disk_usage.percent:.1f}%")
    if cpu_percent > 95:
        warnings.append(f"High CPU usage: {cpu_percent:.1f}%")

    result = {
        "name": "system_resources",
        "status": "healthy" if not warnings else "degraded",
        "metrics": {
            "process_memory_mb": round(memory_info.rss / 1024 / 1024, 2),
            "process_cpu_percent": round(cpu_percent, 2),
            "system_memory_percent": round(system_memory.percent, 2),
            "disk_usage_percent": round(disk_usage.percent, 2),
            "uptime_seconds": round(time.time() - start_time, 2),
        },
        "timestamp": datetime.now().isoformat(),
    }
    if warnings:
        result["warnings"] = warnings
    return result
