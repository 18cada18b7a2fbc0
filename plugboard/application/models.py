"""
Pydantic models for the plug board API requests and responses.

These models provide validation, serialization, and API documentation.
They serve as the boundary between the HTTP API and the domain.
"""

import os
from datetime import datetime
from typing import Optional, List, Dict, Any
from enum import Enum

from pydantic import BaseModel

from plugboard import __version__
from plugboard.core.use_cases.power_control import PowerStatus
from plugboard.shared.types import DeviceKind


# Configuration models
class APIConfig(BaseModel):
    """Configuration for FastAPI application."""
    title: str = "Smart Plug Board"
    version: str = __version__
    description: str = "Binding container demo: one power controller, many devices"
    docs_url: str = "/docs"
    redoc_url: str = "/redoc"
    openapi_url: str = "/openapi.json"
    cors_origins: List[str] = ["*"]
    cors_methods: List[str] = ["*"]
    cors_headers: List[str] = ["*"]

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Build configuration, overriding defaults from the environment."""
        overrides: Dict[str, Any] = {}

        title = os.getenv("PLUGBOARD_TITLE")
        if title:
            overrides["title"] = title

        origins = os.getenv("PLUGBOARD_CORS_ORIGINS")
        if origins:
            overrides["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        return cls(**overrides)


# Status and Health models
class HealthStatus(str, Enum):
    """Health status enumeration."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class DependencyStatus(BaseModel):
    """Status of a system dependency."""
    name: str
    status: HealthStatus
    response_time_ms: float
    details: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response model."""
    status: HealthStatus
    timestamp: datetime
    version: str
    dependencies: List[DependencyStatus]
    metrics: Dict[str, Any] = {}


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str
    detail: Optional[str] = None
    code: Optional[str] = None


# Power models
class PowerResponse(BaseModel):
    """Result of turning on the selected device."""
    device: DeviceKind
    message: str

    @classmethod
    def from_domain(cls, status: PowerStatus) -> "PowerResponse":
        return cls(device=status.device, message=status.message)


class DeviceListResponse(BaseModel):
    """Devices the board knows how to power."""
    default: DeviceKind
    devices: List[PowerResponse]
