"""Property search and lookup.

Turns search criteria into a conjunctive, parameterized SELECT over
the ``properties`` table, then hands each matched row to the
assembly layer.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session

from listing_catalog.models import Property
from listing_catalog.schemas.property import PropertyView
from listing_catalog.services.assembly import assemble_property

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0


@dataclass
class PropertySearch:
    """Search criteria for the catalog.

    Every criterion is optional; ``None`` (or an empty string for the
    text criteria) imposes no constraint. Numeric values are expected
    to be already validated by the caller.

    Attributes:
        search: Substring matched against address or city.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        bedrooms: Minimum number of bedrooms.
        bathrooms: Minimum number of bathrooms.
        property_type: Exact property type.
        limit: Page size.
        offset: Rows to skip before the page starts.
    """

    search: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[float] = None
    property_type: Optional[str] = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET


def apply_filters(stmt: Select, criteria: PropertySearch) -> Select:
    """Add a WHERE clause for each criterion that is present."""
    if criteria.search:
        stmt = stmt.where(
            or_(
                Property.address.contains(criteria.search, autoescape=True),
                Property.city.contains(criteria.search, autoescape=True),
            )
        )
    if criteria.min_price is not None:
        stmt = stmt.where(Property.price >= criteria.min_price)
    if criteria.max_price is not None:
        stmt = stmt.where(Property.price <= criteria.max_price)
    if criteria.bedrooms is not None:
        stmt = stmt.where(Property.bedrooms >= criteria.bedrooms)
    if criteria.bathrooms is not None:
        stmt = stmt.where(Property.bathrooms >= criteria.bathrooms)
    if criteria.property_type:
        stmt = stmt.where(Property.property_type == criteria.property_type)
    return stmt


def search_properties(db: Session, criteria: Optional[PropertySearch] = None) -> List[PropertyView]:
    """Return one page of matching properties, most expensive first.

    Args:
        db: Session on the listing datastore.
        criteria: Filters and page window; defaults to no filters,
            first page of 20.

    Returns:
        Assembled views for the requested page.
    """
    criteria = criteria or PropertySearch()
    stmt = (
        apply_filters(select(Property), criteria)
        .order_by(Property.price.desc(), Property.id.asc())
        .limit(criteria.limit)
        .offset(criteria.offset)
    )
    rows = db.scalars(stmt).all()
    logger.debug(f"Search {criteria} matched {len(rows)} properties on this page")
    return [assemble_property(db, prop) for prop in rows]


def count_properties(db: Session, criteria: Optional[PropertySearch] = None) -> int:
    """Count every property matching the criteria, ignoring the page window."""
    criteria = criteria or PropertySearch()
    stmt = apply_filters(select(func.count()).select_from(Property), criteria)
    return db.scalar(stmt) or 0


def get_property_by_zpid(db: Session, zpid: str) -> Optional[PropertyView]:
    """Look up a single property by its public listing id.

    Returns:
        The assembled view, or ``None`` when no property has that id.
    """
    prop = db.scalars(select(Property).where(Property.zpid == zpid).limit(1)).first()
    if prop is None:
        return None
    return assemble_property(db, prop)


def get_all_properties(db: Session) -> List[PropertyView]:
    """Return every property, most expensive first, without paging."""
    stmt = select(Property).order_by(Property.price.desc(), Property.id.asc())
    return [assemble_property(db, prop) for prop in db.scalars(stmt).all()]
