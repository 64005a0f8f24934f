"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- GET /api/v1/departments, /api/v1/news, /api/v1/users
- GET /, /health, /metrics
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from org_api.config.logging_config import setup_logging
from org_api.config.settings import Config
from org_api.domain.exceptions import ResponseCode
from org_api.domain.ports import Database
from org_api.presentation.api import (
    departments_router,
    metrics_router,
    news_router,
    users_router,
)
from org_api.presentation.envelope import error_response
from org_api.presentation.middleware import (
    CorrelationIdMiddleware,
    RequestMetricsMiddleware,
)
from org_api.setup.ioc import create_container

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: resolve the store handle so the connection is opened once, up front
    - Shutdown: close the DI container (disconnects Prisma)
    """
    container: AsyncContainer = app.state.dishka_container
    await container.get(Database)
    logger.info("Application started. DI container initialized.")
    yield
    await container.close()
    logger.info("Application shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; defaults to the production providers

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Organization Directory API",
        description="Public read API for periods, departments, users and news",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.add_middleware(RequestMetricsMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Framework-level errors use the same envelope as the listings
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error: {exc.errors()}")
        return error_response(
            ResponseCode.BAD_REQUEST,
            "Validation error",
            400,
            metadata={"details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            code = ResponseCode.NOT_FOUND
        elif exc.status_code < 500:
            code = ResponseCode.BAD_REQUEST
        else:
            code = ResponseCode.INTERNAL_ERROR
        return error_response(code, str(exc.detail), exc.status_code)

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Organization directory API is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(departments_router, prefix=API_PREFIX)
    app.include_router(news_router, prefix=API_PREFIX)
    app.include_router(users_router, prefix=API_PREFIX)
    app.include_router(metrics_router)

    return app


# Create the app instance
app = create_fastapi_app()
