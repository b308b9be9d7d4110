"""Health check endpoints for NexLink.

Provides Kubernetes-compatible liveness and readiness probes:
- /health/live  - Liveness probe (always returns OK if process is running)
- /health/ready - Readiness probe (checks database connectivity)
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from nexlink.persistence.db import health_check as db_health_check

router = APIRouter(tags=["health"])


class HealthStatus(str, Enum):
    """Health check status."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass
class ComponentHealth:
    """Health status of a single component."""

    name: str
    status: HealthStatus
    latency_ms: float
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "status": self.status.value,
            "latency_ms": round(self.latency_ms, 2),
        }
        if self.message:
            result["message"] = self.message
        return result


async def check_database() -> ComponentHealth:
    """Check database connectivity."""
    start = time.monotonic()
    try:
        healthy = await asyncio.wait_for(db_health_check(), timeout=5.0)
    except asyncio.TimeoutError:
        return ComponentHealth(
            name="database",
            status=HealthStatus.UNHEALTHY,
            latency_ms=(time.monotonic() - start) * 1000,
            message="Database check timed out",
        )
    return ComponentHealth(
        name="database",
        status=HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY,
        latency_ms=(time.monotonic() - start) * 1000,
        message=None if healthy else "Database check failed",
    )


@router.get("/health")
async def full_health() -> ORJSONResponse:
    """Full health report. Returns 200 when the database is reachable, 503 otherwise."""
    db_result = await check_database()
    is_healthy = db_result.status == HealthStatus.HEALTHY
    return ORJSONResponse(
        content={"status": db_result.status.value, "components": [db_result.to_dict()]},
        status_code=200 if is_healthy else 503,
    )


@router.get("/health/live")
async def live() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/health/ready")
async def ready() -> ORJSONResponse:
    """Readiness probe; 503 until the database answers."""
    db_result = await check_database()
    is_healthy = db_result.status == HealthStatus.HEALTHY
    return ORJSONResponse(
        content={"status": db_result.status.value},
        status_code=200 if is_healthy else 503,
    )
