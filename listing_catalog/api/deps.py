"""Dependency injection utilities for API endpoints.

This module provides the datastore session dependency and the
lenient query-parameter parsing used by the property search.
"""

from typing import Annotated, Iterator, Optional

from fastapi import Depends, Query, Request
from sqlalchemy.orm import Session

from listing_catalog.core.config import settings
from listing_catalog.services.database import PropertyDatabase
from listing_catalog.services.properties import DEFAULT_OFFSET, PropertySearch

# Largest value SQLite can bind as INTEGER
SQLITE_MAX_INT = 2**63 - 1


def get_database(request: Request) -> PropertyDatabase:
    """Return the process-wide datastore handle opened at startup."""
    return request.app.state.database


def get_db(
    database: Annotated[PropertyDatabase, Depends(get_database)],
) -> Iterator[Session]:
    """Provide a read-only session for the duration of a request.

    Yields:
        Session: SQLAlchemy session on the shared connection.
    """
    with database.session() as db:
        yield db


# Type alias for database session dependency
DBSession = Annotated[Session, Depends(get_db)]


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a non-negative integer SQLite can store, treating anything else as absent."""
    if value is None or not value.strip():
        return None
    try:
        parsed = int(value.strip())
    except ValueError:
        return None
    return parsed if 0 <= parsed <= SQLITE_MAX_INT else None


def parse_float(value: Optional[str]) -> Optional[float]:
    """Parse a non-negative finite number, treating anything else as absent."""
    if value is None or not value.strip():
        return None
    try:
        parsed = float(value.strip())
    except ValueError:
        return None
    if parsed != parsed or parsed in (float("inf"), float("-inf")) or parsed < 0:
        return None
    return parsed


class SearchParams:
    """Query parameters for the property search.

    Numbers arrive as raw strings so that malformed values can be
    dropped instead of failing validation.

    Attributes:
        criteria: Parsed search criteria for the query layer.
    """

    def __init__(
        self,
        search: Annotated[Optional[str], Query(description="Address or city substring")] = None,
        min_price: Annotated[Optional[str], Query(alias="minPrice")] = None,
        max_price: Annotated[Optional[str], Query(alias="maxPrice")] = None,
        bedrooms: Annotated[Optional[str], Query(description="Minimum bedrooms")] = None,
        bathrooms: Annotated[Optional[str], Query(description="Minimum bathrooms")] = None,
        property_type: Annotated[Optional[str], Query(alias="propertyType")] = None,
        limit: Annotated[Optional[str], Query(description="Max records to return")] = None,
        offset: Annotated[Optional[str], Query(description="Records to skip")] = None,
    ) -> None:
        page_size = parse_int(limit)
        skip = parse_int(offset)
        self.criteria = PropertySearch(
            search=search or None,
            min_price=parse_int(min_price),
            max_price=parse_int(max_price),
            bedrooms=parse_int(bedrooms),
            bathrooms=parse_float(bathrooms),
            property_type=property_type or None,
            limit=page_size if page_size is not None else settings.DEFAULT_PAGE_SIZE,
            offset=skip if skip is not None else DEFAULT_OFFSET,
        )


# Type alias for search dependency
Search = Annotated[SearchParams, Depends()]
