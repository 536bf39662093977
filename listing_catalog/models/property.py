"""Property model for the listing catalog.

One row per physical property. The datastore is opened read-only,
so rows are never mutated through this model at runtime.
"""

from typing import Optional

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from listing_catalog.models.base import Base, TimestampMixin


class Property(Base, TimestampMixin):
    """Represents a single property and its commercial attributes.

    Related listing, features and photo rows are looked up by
    ``property_id`` rather than loaded through ORM relationships.

    Attributes:
        id: Internal primary key.
        zpid: Public listing identifier used in URLs.
        address: Street address.
        city: City name.
        state: State abbreviation.
        zip_code: ZIP/postal code.
        price: Current asking price, the catalog's sort key.
    """

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(primary_key=True)
    zpid: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)

    # Location
    address: Mapped[str] = mapped_column(String, nullable=False)
    city: Mapped[Optional[str]] = mapped_column(String)
    state: Mapped[Optional[str]] = mapped_column(String)
    zip_code: Mapped[Optional[str]] = mapped_column(String)
    latitude: Mapped[Optional[float]] = mapped_column(Float)
    longitude: Mapped[Optional[float]] = mapped_column(Float)

    # Physical attributes
    bedrooms: Mapped[Optional[int]] = mapped_column(Integer)
    bathrooms: Mapped[Optional[float]] = mapped_column(Float)
    sqft: Mapped[Optional[int]] = mapped_column(Integer)
    lot_size_sqft: Mapped[Optional[int]] = mapped_column(Integer)
    year_built: Mapped[Optional[int]] = mapped_column(Integer)
    property_type: Mapped[Optional[str]] = mapped_column(String)
    stories: Mapped[Optional[int]] = mapped_column(Integer)
    garage_spaces: Mapped[Optional[int]] = mapped_column(Integer)
    parking_spaces: Mapped[Optional[int]] = mapped_column(Integer)

    # Commercial attributes
    price: Mapped[Optional[int]] = mapped_column(Integer, index=True)
    price_per_sqft: Mapped[Optional[float]] = mapped_column(Float)
    hoa_fee: Mapped[Optional[float]] = mapped_column(Float)
    property_tax: Mapped[Optional[float]] = mapped_column(Float)
    status: Mapped[Optional[str]] = mapped_column(String)
    listing_type: Mapped[Optional[str]] = mapped_column(String)
