"""Health Probe — liveness endpoint for the hosting platform.

Invariants:
    - GET /api/health always returns 200 if the process is up
    - No readiness probe: the service has no downstream dependencies to check
"""

import logging
from fastapi import APIRouter, status

from meeting_assistant.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }
