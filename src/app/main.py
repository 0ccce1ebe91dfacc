import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI

from src.app.api.v1 import archive, clients, license_types
from src.app.config import get_settings
from src.app.containers import Container
from src.app.logging import configure_logging

# Configure logging at module load time
configure_logging(get_settings().log_level)

logger = logging.getLogger(__name__)

# Type alias for lifespan context manager
LifespanType = Callable[[FastAPI], AsyncIterator[None]]


async def initialize_storage(container: Container) -> None:
    """Create the schema and seed the configured license types."""
    db = container.database()
    await db.create_all()

    config = container.config()
    seeded = await container.client_service().ensure_license_types(config.licenses.default_labels)
    logger.info("License types available: %s", ", ".join(license_type.label for license_type in seeded))


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - initializes database tables and reference data on startup."""
    container: Container = app.state.container
    logger.info("Starting Rental Back Office API...")

    await initialize_storage(container)
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Rental Back Office API...")
    await container.database().dispose()


def create_app(container: Container, lifespan: LifespanType | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
        lifespan: Optional lifespan context manager. If not provided, uses default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan or default_lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    # Include routers
    app.include_router(clients.router, prefix="/api/v1")
    app.include_router(license_types.router, prefix="/api/v1")
    app.include_router(archive.router, prefix="/api/v1")

    @app.get("/")
    async def root():
        return {"message": "Welcome to Rental Back Office API"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


container = Container()
app = create_app(container=container)
