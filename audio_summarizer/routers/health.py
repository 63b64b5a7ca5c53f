"""
Health check router for monitoring API status
"""

import platform
import time
from datetime import datetime
from typing import Dict

import psutil
from fastapi import APIRouter
from loguru import logger

from .. import __version__
from ..models.requests import HealthResponse
from ..services.transcription_service import transcription_service
from ..services.summary_service import summary_service
from ..config import settings

router = APIRouter(prefix="/health", tags=["health"])

# Track application start time
app_start_time = time.time()


def _service_status(service) -> str:
    return "configured" if service.is_configured else "not_configured"


@router.get("", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint to verify API and service status
    """
    services = {
        "transcription": _service_status(transcription_service),
        "summarization": _service_status(summary_service),
    }

    if any(status != "configured" for status in services.values()):
        overall_status = "partial"
    else:
        overall_status = "healthy"

    return HealthResponse(
        status=overall_status,
        timestamp=datetime.utcnow(),
        version=__version__,
        services=services,
        uptime_seconds=time.time() - app_start_time
    )


@router.get("/detailed", response_model=Dict)
async def detailed_health_check():
    """
    Detailed health check with system metrics
    """
    health_data = await health_check()
    detailed_info = health_data.model_dump(mode="json")

    try:
        detailed_info["system_info"] = {
            "platform": platform.platform(),
            "python_version": platform.python_version(),
            "cpu_percent": psutil.cpu_percent(interval=None),
            "memory_percent": psutil.virtual_memory().percent,
            "disk_usage_percent": psutil.disk_usage('/').percent
        }
    except Exception as e:
        logger.warning(f"System metrics unavailable: {e}")
        detailed_info["system_info"] = {"error": str(e)}

    # Configuration info (non-sensitive)
    detailed_info["configuration"] = {
        "debug_mode": settings.debug_mode,
        "api_version": settings.api_version,
        "max_file_size_mb": settings.max_file_size_mb,
        "enforce_media_types": settings.enforce_media_types,
        "transcription_model": settings.transcription_model,
        "summary_model": settings.summary_model
    }

    return detailed_info
