"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from message_api.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from message_api.config.settings import Config
from message_api.observability.metrics import observe_request_latency
from message_api.presentation.api import messages_router, metrics_router
from message_api.setup.ioc.container import create_container

logger = logging.getLogger(__name__)

# Route label for requests that matched no route
UNMATCHED_ROUTE = "unmatched"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record request latency per route template (not per raw path)."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        observe_request_latency(
            method=request.method,
            route=getattr(route, "path", UNMATCHED_ROUTE),
            status_code=response.status_code,
            duration=time.perf_counter() - started,
        )
        return response


def jsonable_errors(errors) -> list:
    """Pydantic error dicts may carry exception objects under "ctx"."""
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in errors
    ]


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Dishka container to use; built from Config when omitted

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        - Startup: container already set up (Dishka adds middleware before start)
        - Shutdown: close DI container (disconnects Prisma, etc.)
        """
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title="Organization Messages API",
        description="CRUD API for messages scoped to an organization",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    app.add_middleware(MetricsMiddleware)
    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Malformed path ids or bodies
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info(f"[VALIDATION ERROR] {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": jsonable_errors(errors)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(messages_router)  # /organizations/{organization_id}/messages
    app.include_router(metrics_router)  # GET /metrics

    return app


# Create the app instance
app = create_fastapi_app()
