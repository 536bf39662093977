"""Health check endpoint for service monitoring.

This module provides health and readiness endpoints for
container orchestration and monitoring systems.
"""

import logging
from datetime import datetime, timezone
from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from listing_catalog import __version__
from listing_catalog.api.deps import get_database
from listing_catalog.core.config import settings
from listing_catalog.services.database import PropertyDatabase

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=Dict[str, Any],
    summary="Health Check",
    description="Check if the API service is running.",
)
def health_check() -> Dict[str, Any]:
    """Perform a basic health check.

    Returns:
        Dictionary with service status and metadata.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.APP_ENV,
        "version": __version__,
    }


@router.get(
    "/health/ready",
    response_model=Dict[str, Any],
    summary="Readiness Check",
    description="Check if the listing datastore can be read.",
)
def readiness_check(
    database: Annotated[PropertyDatabase, Depends(get_database)],
) -> Dict[str, Any]:
    """Perform a readiness check including datastore connectivity.

    Returns:
        Dictionary with detailed service and dependency status.
    """
    db_status = "healthy"
    db_message = "Connected"

    try:
        database.ping()
    except (SQLAlchemyError, RuntimeError) as exc:
        logger.warning(f"Readiness check failed: {exc}")
        db_status = "unhealthy"
        db_message = "Datastore unavailable"

    overall_status = "ready" if db_status == "healthy" else "not_ready"

    return {
        "status": overall_status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {
            "database": {
                "status": db_status,
                "message": db_message,
            },
        },
    }
