"""Assembly of denormalized property views.

For each property row, the listing, features and photo rows are
fetched by ``property_id`` and merged into a single ``PropertyView``.
List-like columns stored as JSON or comma-separated text are decoded
on the way out.
"""

import json
import logging
from typing import Any, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from listing_catalog.models import Listing, Property, PropertyFeatures, PropertyPhoto
from listing_catalog.schemas.property import (
    FeaturesView,
    ListingView,
    PhotoView,
    PropertyView,
)

logger = logging.getLogger(__name__)

LISTING_COLLECTIONS = ("key_features", "open_house_dates")
FEATURE_COLLECTIONS = (
    "flooring_types",
    "kitchen_features",
    "bathroom_features",
    "yard_features",
    "security_features",
    "accessibility_features",
    "green_features",
)


def parse_collection_field(value: Optional[str]) -> Optional[List[str]]:
    """Decode a text-collection column into a list of strings.

    A JSON array is used as-is, keeping only its string and number
    items. Anything else falls back to splitting
    on commas, trimming, and dropping empty items. Never raises.

    Args:
        value: Raw column text.

    Returns:
        Decoded items, or ``None`` when the column is empty, so callers
        can tell "no data" apart from an empty list.

    Example:
        >>> parse_collection_field('["Hardwood", "Tile"]')
        ['Hardwood', 'Tile']
        >>> parse_collection_field("Hardwood, Tile")
        ['Hardwood', 'Tile']
        >>> parse_collection_field(None) is None
        True
    """
    if not value:
        return None
    try:
        parsed = json.loads(value)
    except ValueError:
        parsed = None
    if isinstance(parsed, list):
        # null and nested arrays/objects are not list items
        return [str(item) for item in parsed if isinstance(item, (str, int, float))]
    return [part.strip() for part in value.split(",") if part.strip()]


def parse_price_history(value: Optional[str]) -> Optional[List[Any]]:
    """Decode the JSON price-change history of a listing.

    Args:
        value: Raw ``price_changes`` column text.

    Returns:
        The decoded list, or ``None`` when the column is empty or not a
        JSON array.
    """
    if not value:
        return None
    try:
        parsed = json.loads(value)
    except ValueError:
        logger.warning(f"Unparseable price history: {value[:80]!r}")
        return None
    if not isinstance(parsed, list):
        logger.warning(f"Price history is not a list: {value[:80]!r}")
        return None
    return parsed


def fetch_listing(db: Session, property_id: int) -> Optional[Listing]:
    stmt = select(Listing).where(Listing.property_id == property_id).limit(1)
    return db.scalars(stmt).first()


def fetch_features(db: Session, property_id: int) -> Optional[PropertyFeatures]:
    stmt = (
        select(PropertyFeatures)
        .where(PropertyFeatures.property_id == property_id)
        .limit(1)
    )
    return db.scalars(stmt).first()


def fetch_photos(db: Session, property_id: int) -> Sequence[PropertyPhoto]:
    """Fetch photos in display order.

    Ascending ``sort_order``, primary photo first on ties, then by id.
    """
    stmt = (
        select(PropertyPhoto)
        .where(PropertyPhoto.property_id == property_id)
        .order_by(
            PropertyPhoto.sort_order.asc(),
            PropertyPhoto.is_primary.desc(),
            PropertyPhoto.id.asc(),
        )
    )
    return db.scalars(stmt).all()


def build_listing_view(listing: Listing) -> ListingView:
    data = listing.to_dict()
    for column in LISTING_COLLECTIONS:
        data[column] = parse_collection_field(data[column])
    data["price_changes"] = parse_price_history(data["price_changes"])
    data["tour_available"] = bool(data["tour_available"])
    return ListingView.model_validate(data)


def build_features_view(features: PropertyFeatures) -> FeaturesView:
    data = features.to_dict()
    for column in FEATURE_COLLECTIONS:
        data[column] = parse_collection_field(data[column])
    for flag in ("fireplace", "pool", "spa"):
        data[flag] = bool(data[flag])
    return FeaturesView.model_validate(data)


def build_photo_view(photo: PropertyPhoto) -> PhotoView:
    return PhotoView(
        image_url=photo.image_url or photo.photo_url,
        caption=photo.caption,
        room_type=photo.room_type,
        is_primary=bool(photo.is_primary),
        sort_order=photo.sort_order,
    )


def assemble_property(db: Session, prop: Property) -> PropertyView:
    """Hydrate one property row into its assembled view.

    Missing listing or features rows come back as ``None``; a property
    without photos gets an empty list.

    Args:
        db: Session on the listing datastore.
        prop: Property row to hydrate.

    Returns:
        PropertyView merging the property with its related records.
    """
    listing = fetch_listing(db, prop.id)
    features = fetch_features(db, prop.id)
    photos = fetch_photos(db, prop.id)

    data = prop.to_dict()
    data["listing"] = build_listing_view(listing) if listing is not None else None
    data["features"] = build_features_view(features) if features is not None else None
    data["photos"] = [build_photo_view(photo) for photo in photos]
    return PropertyView.model_validate(data)
