"""
Booking API - Health Check Routes
==================================

What:  GET /health for monitoring and load balancer probes, and GET / as a
       plain-text liveness answer for anything that pings the root URL.
How:   /health runs SELECT 1 against the app's database.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy import text

from bookingapi import __version__
from bookingapi.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request):
    db_status = "connected"
    overall = "healthy"

    try:
        async with request.app.state.db.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    body = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if overall != "healthy":
        return JSONResponse(status_code=503, content=body.model_dump())
    return body


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    return "Backend is working"
