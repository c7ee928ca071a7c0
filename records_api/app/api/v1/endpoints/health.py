"""
Health check endpoint.

Reports that the process is up and which build is running.  It does
not touch storage, so it stays green while the database is down;
use the records endpoints to probe persistence.
"""

from typing import Dict

from fastapi import APIRouter

from records_api.app.core.config import settings

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def health_check() -> Dict[str, str]:
    return {
        "status": "ok",
        "service": settings.project_name,
        "version": settings.api_version,
    }
