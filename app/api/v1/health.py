# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# This file provides health check endpoints that tell us if Leaflings is working properly,
# like a doctor's checkup making sure the app is up and the database answers.
# 🧪 Purpose (Technical Summary):
# Health, liveness and readiness endpoints; readiness depends on database connectivity.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.connection, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check as db_health_check

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)

SERVICE_NAME = "leaflings-api"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Basic health check endpoint for load balancers and monitoring")
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint

    Returns simple OK status for quick health verification.
    """
    uptime = (datetime.now(timezone.utc) - _app_start_time).total_seconds()
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": _now(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
            "uptime_seconds": round(uptime, 1),
        }
    )


@health_router.get("/health/live",
                   summary="Liveness Probe",
                   description="Liveness probe endpoint")
async def liveness_probe() -> Response:
    """Returns 200 while the process is able to answer at all."""
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready",
                   summary="Readiness Probe",
                   description="Readiness probe endpoint")
async def readiness_probe() -> JSONResponse:
    """
    Readiness probe

    Returns 200 if the application is ready to serve traffic, 503 when the database
    cannot be reached.
    """
    db_health = await db_health_check()
    if db_health["status"] == "healthy":
        return JSONResponse(status_code=200, content={"status": "ready", "timestamp": _now()})

    logger.warning(f"Readiness probe failed: {db_health.get('error', 'database_unhealthy')}")
    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": "database_unhealthy",
            "timestamp": _now(),
        }
    )
