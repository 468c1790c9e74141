"""FastAPI application factory for the TaxCalc API.

``create_app`` wires together:

- logging and tracing setup
- exception handlers mapping domain errors to status codes
- middleware (CORS, security headers, request context, request logging)
- the taxonomy and calculation routers under ``/api``
- ``/health`` and ``/info`` endpoints

Middleware execute in reverse order of registration, so the last one
added sees the request first.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated, Any, cast

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from src.api.constants import API_PREFIX, CORRELATION_ID_HEADER, REQUEST_ID_HEADER
from src.api.middleware.error_handler import register_exception_handlers
from src.api.middleware.request_context import RequestContextMiddleware
from src.api.middleware.request_logging import RequestLoggingMiddleware
from src.api.middleware.security_headers import SecurityHeadersMiddleware
from src.api.routes import calculation_router, taxonomy_router
from src.api.utils.responses import ORJSONResponse
from src.core.config import Settings, get_settings
from src.core.logging import setup_logging
from src.core.observability import instrument_app, setup_tracing
from src.infrastructure.database.session import (
    check_database_connection,
    close_database,
    get_engine,
)


@asynccontextmanager
async def lifespan(app_instance: FastAPI) -> AsyncGenerator[None]:
    """Check the database at startup and release the pool at shutdown.

    An unreachable database does not abort startup: the service comes up
    degraded, every store-backed request answers 503, and ``/health``
    reports the condition until the database returns.

    Args:
        app_instance: The FastAPI application instance.

    Yields:
        None: Nothing is yielded, this is just a lifespan context.
    """
    is_healthy, error_msg = await check_database_connection()
    if is_healthy:
        logger.info("Database connection successful")
    else:
        logger.error("Database connection failed during startup: {}", error_msg)

    logger.info(
        "Application startup complete - {} v{}",
        app_instance.title,
        app_instance.version,
    )

    yield

    logger.info("Application shutdown initiated")
    await close_database()
    logger.info("Application shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings instance. If not provided, will use get_settings().

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings)
    setup_tracing(settings)

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Withholding tax calculator over a four-level tax taxonomy.",
        debug=settings.debug,
        docs_url=settings.docs_url,
        redoc_url=settings.redoc_url,
        openapi_url=settings.openapi_url,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    register_exception_handlers(application)

    # 4. Request logging (innermost, sees the bound IDs)
    application.add_middleware(RequestLoggingMiddleware, log_config=settings.log_config)

    # 3. Correlation and request IDs
    application.add_middleware(RequestContextMiddleware)

    # 2. Security headers, HSTS in production only
    application.add_middleware(
        SecurityHeadersMiddleware,
        hsts_enabled=settings.environment == "production",
    )

    # 1. CORS (outermost, answers preflight requests directly)
    cors = settings.cors_config
    application.add_middleware(
        CORSMiddleware,
        allow_origins=cors.allow_origins,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
        expose_headers=[CORRELATION_ID_HEADER, REQUEST_ID_HEADER],
    )

    application.include_router(taxonomy_router, prefix=API_PREFIX)
    application.include_router(calculation_router, prefix=API_PREFIX)

    @application.get("/health")
    async def health() -> dict[str, object]:
        """Health check endpoint for container orchestration and load balancers.

        Returns:
            dict[str, object]: Status and database connectivity. The status is
                ``degraded`` while the database is unreachable.
        """
        health_status: dict[str, object] = {"status": "healthy", "database": False}

        is_healthy, error_msg = await check_database_connection()
        health_status["database"] = is_healthy

        if is_healthy:
            pool = get_engine().pool
            logger.bind(
                metric_type="db.pool.health",
                checked_out=cast("Any", pool).checkedout(),
                size=cast("Any", pool).size(),
                overflow=cast("Any", pool).overflow(),
            ).info("Database pool health check")
        else:
            logger.warning("Database health check failed: {}", error_msg)
            health_status["status"] = "degraded"

        return health_status

    @application.get("/info")
    async def info(
        app_settings: Annotated[Settings, Depends(get_settings)],
    ) -> dict[str, Any]:
        """Return application name, version and environment."""
        return {
            "app_name": app_settings.app_name,
            "version": app_settings.app_version,
            "environment": app_settings.environment,
            "debug": app_settings.debug,
        }

    instrument_app(application, settings)

    return application


app = create_app()
