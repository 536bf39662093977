"""FastAPI application entry point.

This module initializes the FastAPI application with CORS,
middleware, route registration and the datastore lifecycle.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from listing_catalog import __version__
from listing_catalog.api.endpoints import health, properties
from listing_catalog.core.config import settings
from listing_catalog.middleware.error_handler import (
    ErrorHandlerMiddleware,
    setup_exception_handlers,
)
from listing_catalog.services.database import PropertyDatabase

logger = logging.getLogger(__name__)


def create_application(database: Optional[PropertyDatabase] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        database: Already opened datastore handle. When omitted, one is
            opened on ``settings.DATABASE_PATH`` at startup.

    Returns:
        Configured FastAPI application instance.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Starting Listing Catalog API...")
        logger.info(f"Environment: {settings.APP_ENV}")

        handle = database or PropertyDatabase(settings.DATABASE_PATH, echo=settings.DEBUG)
        app.state.database = handle
        try:
            yield
        finally:
            logger.info("Shutting down Listing Catalog API...")
            handle.close()

    app = FastAPI(
        title="Listing Catalog API",
        description=(
            "Read-only catalog of real-estate listings. Supports filtered, "
            "paginated search and per-listing detail lookups."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(ErrorHandlerMiddleware)
    setup_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(properties.router, prefix=settings.API_PREFIX)

    return app
