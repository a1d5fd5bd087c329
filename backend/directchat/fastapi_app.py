"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Routers:
- auth, users, conversations (with messages), files
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from directchat.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from directchat.config.settings import Config
from directchat.presentation.api import (
    auth_router,
    conversations_router,
    files_router,
    users_router,
)
from directchat.presentation.errors import register_exception_handlers

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id
        return response


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Dishka container to resolve handlers from. Defaults to the
            production container (Prisma, bcrypt, JWT, disk storage).

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

    if container is None:
        # Imported here so the Prisma client is only needed when serving for real
        from directchat.setup.ioc.container import create_container

        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        - Startup: container and Dishka already set up before app starts
        - Shutdown: close DI container (disconnects Prisma, etc.)
        """
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title="Direct Chat API",
        description="Two-party direct messaging backend",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(auth_router)  # POST /auth/register, /auth/login
    app.include_router(users_router)  # GET /users
    app.include_router(conversations_router)  # /conversations, /conversations/{id}/messages
    app.include_router(files_router)  # /files, /files/upload, /files/{id}[/download]

    return app
