"""FastAPI application factory for NexLink.

Creates the application with:
- Member and investor endpoints addressed by encoded identifier tokens
- Health and Prometheus metrics endpoints
- Correlation IDs and structured logging
- Legacy-envelope error handling
- ORJSON for fast JSON serialization
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ExceptionHandler

from nexlink import __version__
from nexlink.api.errors import (
    ApiError,
    api_exception_handler,
    generic_exception_handler,
    http_exception_handler,
    request_validation_handler,
)
from nexlink.api.middleware import CorrelationMiddleware
from nexlink.api.routers import health, investors, users
from nexlink.api.routers import metrics as metrics_router
from nexlink.config import settings
from nexlink.observability import MetricsMiddleware, configure_logging, get_metrics
from nexlink.persistence.db import close_db, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle.

    On startup:
    - Configure structured logging
    - Initialize Prometheus metrics
    - Create tables when running against a throwaway database

    On shutdown:
    - Close database connections
    """
    configure_logging(
        json_format=settings.env != "dev",
        level=settings.log_level,
    )
    get_metrics()

    logger.info(f"Starting NexLink ({settings.env})")
    if settings.db_create_tables:
        await init_db()
    logger.info("NexLink startup complete")

    yield

    logger.info("Shutting down NexLink")
    await close_db()
    logger.info("NexLink shutdown complete")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, cast(ExceptionHandler, api_exception_handler))
    app.add_exception_handler(
        StarletteHTTPException, cast(ExceptionHandler, http_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast(ExceptionHandler, request_validation_handler)
    )
    app.add_exception_handler(Exception, cast(ExceptionHandler, generic_exception_handler))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="NexLink",
        description="Professional networking platform API",
        version=__version__,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Last added runs first: CORS, then correlation, then metrics around the routes
    if settings.enable_metrics:
        app.add_middleware(MetricsMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-User-Id", "X-Auth-Token"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    if settings.enable_metrics:
        app.include_router(metrics_router.router)
    app.include_router(users.router)
    app.include_router(investors.router)

    return app
