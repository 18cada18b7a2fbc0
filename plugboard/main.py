"""
Main FastAPI application for the smart plug board.

This module is the composition root: it builds the binding container,
creates the FastAPI application, and wires middleware, exception handlers
and routes.
"""

import asyncio
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator
import structlog

from plugboard.application.api.request_context import current_device_selector
from plugboard.application.api.routes import health, power
from plugboard.application.models import APIConfig, ErrorResponse
from plugboard.infrastructure.di.container import Container, PowerServiceProvider, build_container
from plugboard.infrastructure.logging.config import configure_logging
from plugboard.shared.exceptions import PlugBoardError, describe_identifier, get_http_status_code, should_log_error

# Configure structured logging
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown."""
    logger.info(
        "Starting smart plug board",
        bindings=[describe_identifier(i) for i in app.state.container.identifiers()]
    )

    yield

    logger.info("Smart plug board shut down")


def create_container() -> Container:
    """Register the application's bindings."""
    return build_container(PowerServiceProvider(selector=current_device_selector))


def create_application(container: Optional[Container] = None, config: Optional[APIConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    # Load configuration
    config = config or APIConfig.from_env()

    app = FastAPI(
        title=config.title,
        version=config.version,
        description=config.description,
        docs_url=config.docs_url,
        redoc_url=config.redoc_url,
        openapi_url=config.openapi_url,
        lifespan=lifespan
    )

    app.state.container = container if container is not None else create_container()

    setup_middleware(app, config)
    setup_exception_handlers(app)
    setup_routes(app)
    setup_prometheus_metrics(app)

    return app


def setup_middleware(app: FastAPI, config: APIConfig) -> None:
    """Configure application middleware."""

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=config.cors_methods,
        allow_headers=config.cors_headers,
    )

    # Compression middleware
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with correlation IDs."""

        correlation_id = request.headers.get("X-Correlation-ID") or f"req_{id(request)}"

        with structlog.contextvars.bound_contextvars(
            correlation_id=correlation_id,
            method=request.method,
            url=str(request.url),
        ):
            start_time = asyncio.get_running_loop().time()

            logger.info("Request started")

            try:
                response = await call_next(request)

                response.headers["X-Correlation-ID"] = correlation_id

                duration = asyncio.get_running_loop().time() - start_time
                logger.info(
                    "Request completed",
                    status_code=response.status_code,
                    duration_ms=round(duration * 1000, 2)
                )

                return response

            except Exception as e:
                duration = asyncio.get_running_loop().time() - start_time
                logger.error(
                    "Request failed",
                    error=str(e),
                    duration_ms=round(duration * 1000, 2)
                )
                raise


def setup_exception_handlers(app: FastAPI) -> None:
    """Setup global exception handlers."""

    @app.exception_handler(PlugBoardError)
    async def plugboard_exception_handler(request: Request, exc: PlugBoardError):
        """Handle plug board custom exceptions."""

        status_code = get_http_status_code(exc)

        if should_log_error(exc):
            logger.error(
                "Plug board error occurred",
                error_type=type(exc).__name__,
                error_message=exc.message,
                error_code=exc.error_code,
                details=exc.details,
                status_code=status_code
            )

        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=exc.message,
                detail=str(exc.details) if exc.details else None,
                code=exc.error_code
            ).model_dump()
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""

        logger.error(
            "Unexpected error occurred",
            error_type=type(exc).__name__,
            error_message=str(exc),
            request_method=request.method,
            request_url=str(request.url)
        )

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal server error",
                detail="An unexpected error occurred"
            ).model_dump()
        )


def setup_routes(app: FastAPI) -> None:
    """Setup application routes."""

    app.include_router(
        power.page_router,
        tags=["Power"]
    )

    app.include_router(
        power.router,
        prefix="/api/v1/power",
        tags=["Power"]
    )

    app.include_router(
        health.router,
        prefix="/api/v1/health",
        tags=["Health"]
    )


def setup_prometheus_metrics(app: FastAPI) -> None:
    """Setup Prometheus metrics collection (enabled by ENABLE_METRICS=true)."""

    instrumentator = Instrumentator(
        should_group_status_codes=False,
        should_ignore_untemplated=True,
        should_respect_env_var=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=["/metrics"],
        env_var_name="ENABLE_METRICS",
        inprogress_name="plugboard_requests_inprogress",
        inprogress_labels=True,
        registry=CollectorRegistry(),
    )

    instrumentator.instrument(app).expose(app, endpoint="/metrics")


# Create the application instance
app = create_application()


# Development server entry point
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "plugboard.main:app",
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "8000")),
        reload=os.getenv("API_RELOAD", "false").lower() == "true",
        log_config=None,  # Use our custom logging configuration
        access_log=False,  # Handled by our middleware
    )
