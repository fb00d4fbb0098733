"""
Health check endpoint.

Used to check by hand that the server is reachable from another
device; the reported address is resolved again on every call.
"""

from typing import Any, Dict

from fastapi import APIRouter

from sports_backend.app.core.config import settings
from sports_backend.app.core.network import get_local_ip

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "message": settings.project_name,
        "ip": get_local_ip(),
        "port": settings.port,
    }
