"""Listing and feature models, one-to-one with a property.

Several columns hold list-like values serialized as JSON or
comma-separated text; they are decoded by the assembly layer.
"""

from typing import Optional

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from listing_catalog.models.base import Base, TimestampMixin


class Listing(Base, TimestampMixin):
    """Marketing metadata for a property.

    Attributes:
        property_id: Foreign key to the owning property.
        key_features: Text collection of headline features.
        open_house_dates: Text collection of open-house dates.
        price_changes: JSON-encoded price history.
    """

    __tablename__ = "listings"

    id: Mapped[int] = mapped_column(primary_key=True)
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id"),
        nullable=False,
        index=True,
    )
    list_date: Mapped[Optional[str]] = mapped_column(String)
    days_on_market: Mapped[Optional[int]] = mapped_column(Integer)
    description: Mapped[Optional[str]] = mapped_column(Text)
    key_features: Mapped[Optional[str]] = mapped_column(Text)
    agent_name: Mapped[Optional[str]] = mapped_column(String)
    agent_phone: Mapped[Optional[str]] = mapped_column(String)
    agent_email: Mapped[Optional[str]] = mapped_column(String)
    brokerage: Mapped[Optional[str]] = mapped_column(String)
    open_house_dates: Mapped[Optional[str]] = mapped_column(Text)
    tour_available: Mapped[bool] = mapped_column(Boolean, server_default=text("0"))
    virtual_tour_url: Mapped[Optional[str]] = mapped_column(String)
    original_price: Mapped[Optional[int]] = mapped_column(Integer)
    price_changes: Mapped[Optional[str]] = mapped_column(Text)


class PropertyFeatures(Base, TimestampMixin):
    """Structural and amenity attributes for a property."""

    __tablename__ = "property_features"

    id: Mapped[int] = mapped_column(primary_key=True)
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id"),
        nullable=False,
        index=True,
    )

    # Text collections
    flooring_types: Mapped[Optional[str]] = mapped_column(Text)
    kitchen_features: Mapped[Optional[str]] = mapped_column(Text)
    bathroom_features: Mapped[Optional[str]] = mapped_column(Text)
    yard_features: Mapped[Optional[str]] = mapped_column(Text)
    security_features: Mapped[Optional[str]] = mapped_column(Text)
    accessibility_features: Mapped[Optional[str]] = mapped_column(Text)
    green_features: Mapped[Optional[str]] = mapped_column(Text)

    fireplace: Mapped[bool] = mapped_column(Boolean, server_default=text("0"))
    fireplace_count: Mapped[Optional[int]] = mapped_column(Integer)
    laundry_features: Mapped[Optional[str]] = mapped_column(String)
    cooling: Mapped[Optional[str]] = mapped_column(String)
    heating: Mapped[Optional[str]] = mapped_column(String)
    pool: Mapped[bool] = mapped_column(Boolean, server_default=text("0"))
    spa: Mapped[bool] = mapped_column(Boolean, server_default=text("0"))
    garage_type: Mapped[Optional[str]] = mapped_column(String)
    school_district: Mapped[Optional[str]] = mapped_column(String)
    walkability_score: Mapped[Optional[float]] = mapped_column(Float)
    transit_score: Mapped[Optional[float]] = mapped_column(Float)
    bike_score: Mapped[Optional[float]] = mapped_column(Float)
