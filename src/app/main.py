import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, UTC
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.app.api import customers
from src.app.api.errors import register_error_handlers
from src.app.api.middleware import log_requests
from src.app.config import get_settings
from src.app.containers import Container
from src.app.logging import configure_logging

# Configure logging at module load time
configure_logging(get_settings().logging.level)

logger = logging.getLogger(__name__)

# Type alias for lifespan context manager
LifespanType = Callable[[FastAPI], AsyncIterator[None]]


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - creates the schema on startup, disposes the pool on shutdown."""
    container: Container = app.state.container
    logger.info("Starting CRM API...")

    db = container.database()
    await db.create_schema()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down CRM API...")
    await db.dispose()


def create_app(container: Container, lifespan: Optional[LifespanType] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
        lifespan: Optional lifespan context manager. If not provided, uses default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=[
        "src.app.api.customers",
    ])

    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan or default_lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    register_error_handlers(app)

    app.include_router(customers.router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": config.app_name, "version": config.app_version}

    @app.get("/health")
    async def health():
        return {"status": "ok", "timestamp": datetime.now(UTC).isoformat()}

    return app


container = Container()
app = create_app(container=container)
