"""
Health check and monitoring API routes.

This module provides endpoints for system health checks, container binding
status, and monitoring information.
"""

from datetime import datetime, timezone
from typing import Dict, Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
import structlog
import psutil

from plugboard import __version__
from plugboard.application.api.dependencies import get_container
from plugboard.application.models import HealthResponse, HealthStatus, DependencyStatus
from plugboard.core.domain.devices import PowerInterface
from plugboard.infrastructure.di.container import Container
from plugboard.shared.exceptions import describe_identifier

logger = structlog.get_logger(__name__)
router = APIRouter()


class SystemMetrics(BaseModel):
    """System resource metrics."""
    cpu_percent: float
    memory_percent: float


def check_container_health(container: Container) -> DependencyStatus:
    """Check that the power capability is bound and resolves."""
    start_time = datetime.now(timezone.utc)
    identifiers = [describe_identifier(i) for i in container.identifiers()]

    if not container.has(PowerInterface):
        return DependencyStatus(
            name="Binding Container",
            status=HealthStatus.UNHEALTHY,
            response_time_ms=0,
            details={"bindings": identifiers},
            error=f"{describe_identifier(PowerInterface)} is not bound"
        )

    try:
        device = container.make(PowerInterface)
    except Exception as e:
        logger.error("Container health check failed", error=str(e))
        return DependencyStatus(
            name="Binding Container",
            status=HealthStatus.DEGRADED,
            response_time_ms=0,
            details={"bindings": identifiers},
            error=str(e)
        )

    response_time_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000

    return DependencyStatus(
        name="Binding Container",
        status=HealthStatus.HEALTHY,
        response_time_ms=round(response_time_ms, 2),
        details={
            "bindings": identifiers,
            "default_device": device.kind.value
        }
    )


def get_system_metrics() -> SystemMetrics:
    """Get current system resource metrics."""
    try:
        return SystemMetrics(
            cpu_percent=round(psutil.cpu_percent(interval=None), 2),
            memory_percent=round(psutil.virtual_memory().percent, 2)
        )

    except Exception as e:
        logger.error("Failed to get system metrics", error=str(e))
        return SystemMetrics(cpu_percent=0, memory_percent=0)


@router.get("/", response_model=HealthResponse)
async def health_check(container: Container = Depends(get_container)) -> HealthResponse:
    """
    Comprehensive health check endpoint.

    Returns:
        Overall system health status with dependency checks
    """
    logger.info("Performing health check")

    dependencies = [check_container_health(container)]

    unhealthy_deps = [d for d in dependencies if d.status == HealthStatus.UNHEALTHY]
    degraded_deps = [d for d in dependencies if d.status == HealthStatus.DEGRADED]

    if unhealthy_deps:
        overall_status = HealthStatus.UNHEALTHY
    elif degraded_deps:
        overall_status = HealthStatus.DEGRADED
    else:
        overall_status = HealthStatus.HEALTHY

    return HealthResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        dependencies=dependencies,
        metrics=get_system_metrics().model_dump()
    )


@router.get("/liveness", status_code=status.HTTP_200_OK)
async def liveness_check() -> Dict[str, str]:
    """
    Simple liveness check for container orchestration.

    Returns:
        200 OK if the service is alive
    """
    return {"status": "alive"}


@router.get("/readiness", response_model=Dict[str, Any])
async def readiness_check(container: Container = Depends(get_container)) -> Dict[str, Any]:
    """
    Readiness check for container orchestration.

    Returns:
        200 OK if the power capability is bound
        503 Service Unavailable otherwise
    """
    if not container.has(PowerInterface):
        errors = [f"{describe_identifier(PowerInterface)} is not bound"]
        logger.warning("Service not ready", errors=errors)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"status": "not ready", "errors": errors}
        )

    return {"status": "ready"}
