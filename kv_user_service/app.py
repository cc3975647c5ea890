"""
FastAPI application factory for the user service.

create_app wires settings, the key-value gateway and the user
repository together; nothing is read from module-level state inside
request handlers.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import Settings, settings
from .core.redis_manager import create_redis_client
from .domain.exceptions import UserServiceException
from .metrics import track_request_metrics
from .metrics_middleware import PrometheusMiddleware
from .repositories.user_repository import UserRepository
from .routers import health, users
from .seed import seed_demo_users
from .store.gateway import KeyValueGateway
from .store.redis_gateway import RedisGateway

logger = structlog.get_logger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    gateway: Optional[KeyValueGateway] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Service settings (defaults to the environment)
        gateway: Key-value gateway; a Redis gateway is built when omitted

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or settings
    if gateway is None:
        gateway = RedisGateway(create_redis_client(app_settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting User Service", version=__version__)

        if app_settings.SEED_DEMO_USERS:
            try:
                await seed_demo_users(app.state.user_repository)
            except UserServiceException as e:
                logger.error("Failed to load demo users", error=e.message)

        logger.info("User Service started", port=app_settings.PORT)

        yield

        logger.info("Shutting down User Service")
        await gateway.close()
        logger.info("User Service stopped")

    app = FastAPI(
        title="User Service",
        description="User records stored as hashes in a key-value store",
        version=__version__,
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.user_repository = UserRepository(gateway)

    app.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)
    register_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(health.router)

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": "<message>"}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(
            "Rejected request body",
            path=request.url.path,
            errors=len(exc.errors()),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "invalid request body"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal server error"},
        )
