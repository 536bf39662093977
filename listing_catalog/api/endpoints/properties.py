"""Property catalog endpoints.

Read-only search and detail routes over the listing datastore.
"""

import logging

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from listing_catalog.api.deps import DBSession, Search
from listing_catalog.core.exceptions import DatabaseException, NotFoundException
from listing_catalog.schemas.property import (
    ErrorResponse,
    PropertyDetailResponse,
    PropertyListResponse,
)
from listing_catalog.services.properties import (
    count_properties,
    get_property_by_zpid,
    search_properties,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/properties", tags=["Properties"])


@router.get(
    "",
    response_model=PropertyListResponse,
    summary="Search Properties",
    description="Filter the catalog and return one page, most expensive first.",
    responses={500: {"model": ErrorResponse}},
)
def list_properties(params: Search, db: DBSession) -> PropertyListResponse:
    """Search the catalog.

    ``total`` is the size of the returned page; ``matched`` counts
    every property meeting the criteria.

    Args:
        params: Parsed search criteria and page window.
        db: Read-only datastore session.

    Returns:
        The page of assembled properties.

    Raises:
        DatabaseException: If the datastore cannot be read.
    """
    try:
        properties = search_properties(db, params.criteria)
        matched = count_properties(db, params.criteria)
    except SQLAlchemyError:
        logger.exception("Error fetching properties")
        raise DatabaseException("Failed to fetch properties")

    return PropertyListResponse(
        properties=properties,
        total=len(properties),
        matched=matched,
    )


@router.get(
    "/{zpid}",
    response_model=PropertyDetailResponse,
    summary="Get Property",
    description="Fetch one property by its public listing id.",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_property(zpid: str, db: DBSession) -> PropertyDetailResponse:
    """Fetch a single property.

    Raises:
        NotFoundException: If no property has this listing id.
        DatabaseException: If the datastore cannot be read.
    """
    try:
        prop = get_property_by_zpid(db, zpid)
    except SQLAlchemyError:
        logger.exception(f"Error fetching property {zpid}")
        raise DatabaseException("Failed to fetch property")

    if prop is None:
        raise NotFoundException("Property not found", details={"zpid": zpid})

    return PropertyDetailResponse(property=prop)
