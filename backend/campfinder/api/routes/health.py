"""Liveness and readiness probes for the hosting platform.

GET /health/ answers 200 whenever the process is serving requests.
GET /health/ready answers 503 until the database is reachable.
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from campfinder.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "campfinder-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/ready")
async def readiness():
    # db_manager is read at call time; it is None before startup and after shutdown
    manager = database.db_manager
    if manager is not None and await manager.ping():
        return {"status": "ready", "checks": {"database": "healthy"}}
    logger.warning("Readiness check failed: database unavailable")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": "database_unavailable"},
    )
