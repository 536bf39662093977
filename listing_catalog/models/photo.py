"""Photo model for storing property images.

This module defines the PropertyPhoto model which stores references
to images associated with a property.
"""

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from listing_catalog.models.base import Base


class PropertyPhoto(Base):
    """Represents a photo associated with a property.

    Attributes:
        id: Primary key identifier.
        property_id: Foreign key to the associated property.
        photo_url: Original source URL of the photo.
        image_url: Hosted URL of the photo, preferred when present.
        caption: Optional description of the photo.
        room_type: Room the photo shows (kitchen, exterior, ...).
        is_primary: Whether this is the cover photo.
        sort_order: Display position, ascending.
    """

    __tablename__ = "property_photos"

    id: Mapped[int] = mapped_column(primary_key=True)
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id"),
        nullable=False,
        index=True,
    )
    photo_url: Mapped[Optional[str]] = mapped_column(String)
    image_url: Mapped[Optional[str]] = mapped_column(String)
    caption: Mapped[Optional[str]] = mapped_column(Text)
    room_type: Mapped[Optional[str]] = mapped_column(String)
    is_primary: Mapped[bool] = mapped_column(Boolean, server_default=text("0"))
    sort_order: Mapped[Optional[int]] = mapped_column(Integer)
    created_at: Mapped[Optional[str]] = mapped_column(
        String,
        server_default=text("CURRENT_TIMESTAMP"),
    )
