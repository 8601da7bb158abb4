"""Health & Readiness Probes.

Invariants:
    - GET /api/v1/health/ returns 200 whenever the process serves requests
    - GET /api/v1/health/ready returns 503 until the claim database answers a query
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import claimcount.infrastructure.database as database

SERVICE_NAME = "claim-count-api"
SERVICE_VERSION = "1.0.0"

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/ready")
async def readiness_check():
    database_state = await _database_state()
    if database_state != "healthy":
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": {"database": database_state}},
        )
    return {"status": "ready", "checks": {"database": database_state}}


async def _database_state() -> str:
    # read at call time: the lifespan sets the singleton after import
    manager = database.db_manager
    if manager is None:
        return "not_initialized"
    return "healthy" if await manager.health_check() else "unavailable"
