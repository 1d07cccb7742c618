"""
Application entry point.

Creates the FastAPI application and wires together:
- Repositories (one per account collection, sharing one MongoClient)
- Routers (users, admins, health, metrics)
- Error handlers (centralized failure-to-HTTP mapping)
- Middleware (metrics, security headers)
- Rate limiting (an application-wide dependency)
- Logging configuration

No business logic belongs here.
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from prometheus_client import CollectorRegistry
from pydantic import ValidationError
from pymongo import MongoClient
from slowapi.errors import RateLimitExceeded

from account_service.core.config import Settings
from account_service.domain.accounts.entities import Admin, User
from account_service.domain.accounts.errors import StoreError
from account_service.infrastructure.accounts.mongo_repository import MongoAccountRepository
from account_service.infrastructure.mongo_client import connect_mongo
from account_service.interfaces.accounts.router import ADMINS, USERS, create_account_router
from account_service.interfaces.health import router as health_router
from account_service.interfaces.metrics import router as metrics_router
from account_service.shared.errors.handlers import register_error_handlers
from account_service.shared.logging import configure_logging
from account_service.shared.metrics import HttpMetrics, MetricsMiddleware
from account_service.shared.security.headers import SecurityHeadersMiddleware
from account_service.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: release the store connection on shutdown."""
    logger.info("%s %s started", app.title, app.version)
    yield
    app.state.mongo_client.close()
    logger.info("MongoDB connection closed")


def create_app(settings: Settings, mongo_client: MongoClient) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. The settings
    and the connected client are built by the caller and passed in.

    Args:
        settings: Application settings.
        mongo_client: A connected client, shared by all repositories.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
        dependencies=[Depends(enforce_rate_limit)],
    )
    app.state.settings = settings
    app.state.mongo_client = mongo_client

    # --- Repositories ---
    database = mongo_client[settings.mongo_database]
    app.state.user_repository = MongoAccountRepository(
        database[settings.mongo_users_collection], User
    )
    app.state.admin_repository = MongoAccountRepository(
        database[settings.mongo_admins_collection], Admin
    )

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Metrics ---
    app.state.metrics = HttpMetrics(CollectorRegistry())
    app.add_middleware(MetricsMiddleware, metrics=app.state.metrics)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(create_account_router(USERS))
    app.include_router(create_account_router(ADMINS))

    return app


def run() -> None:
    """Load settings, connect to MongoDB and serve the application.

    Exits with status 1 when configuration is missing or invalid,
    or when MongoDB cannot be reached.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        configure_logging()
        logger.critical("Invalid configuration:\n%s", exc)
        sys.exit(1)

    configure_logging(level=settings.log_level)

    try:
        mongo_client = connect_mongo(settings)
    except StoreError as exc:
        logger.critical("Cannot connect to MongoDB: %s", exc.message)
        sys.exit(1)

    app = create_app(settings, mongo_client)

    if settings.listen_type == "sock":
        logger.info("Listening on unix socket %s", settings.listen_socket_path)
        uvicorn.run(app, uds=settings.listen_socket_path, log_config=None)
    else:
        logger.info("Listening on %s:%d", settings.listen_address, settings.listen_port)
        uvicorn.run(
            app,
            host=settings.listen_address,
            port=settings.listen_port,
            log_config=None,
        )
