"""
Operational endpoints outside the versioned API.

``/actuator/health`` answers ``{"status": "UP"}`` when the store
responds and 503 ``{"status": "DOWN"}`` otherwise, so load balancers
can check the service.  ``/actuator/info`` reports the configured
project name and version.  Both are public.
"""

from typing import Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from portfolio_api.app.core.config import settings
from portfolio_api.app.core.db import check_connection

router = APIRouter()


@router.get("/health")
def health() -> JSONResponse:
    if check_connection():
        return JSONResponse(status_code=200, content={"status": "UP"})
    return JSONResponse(status_code=503, content={"status": "DOWN"})


@router.get("/info")
def info() -> Dict[str, Dict[str, str]]:
    return {"app": {"name": settings.project_name, "version": settings.api_version}}
