"""Pydantic schemas for the assembled property views.

Field names are snake_case in Python and serialized as camelCase,
which is the shape the catalog front end consumes.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema emitting camelCase keys and accepting either form."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PhotoView(CamelModel):
    """A single photo of a property, in display order."""

    image_url: Optional[str] = None
    caption: Optional[str] = None
    room_type: Optional[str] = None
    is_primary: bool = False
    sort_order: Optional[int] = None


class ListingView(CamelModel):
    """Marketing metadata with decoded text collections."""

    list_date: Optional[str] = None
    days_on_market: Optional[int] = None
    description: Optional[str] = None
    key_features: Optional[List[str]] = None
    agent_name: Optional[str] = None
    agent_phone: Optional[str] = None
    agent_email: Optional[str] = None
    brokerage: Optional[str] = None
    open_house_dates: Optional[List[str]] = None
    tour_available: bool = False
    virtual_tour_url: Optional[str] = None
    original_price: Optional[int] = None
    price_changes: Optional[List[Any]] = None


class FeaturesView(CamelModel):
    """Structural and amenity attributes with decoded text collections."""

    flooring_types: Optional[List[str]] = None
    kitchen_features: Optional[List[str]] = None
    bathroom_features: Optional[List[str]] = None
    fireplace: bool = False
    fireplace_count: Optional[int] = None
    laundry_features: Optional[str] = None
    cooling: Optional[str] = None
    heating: Optional[str] = None
    yard_features: Optional[List[str]] = None
    pool: bool = False
    spa: bool = False
    garage_type: Optional[str] = None
    security_features: Optional[List[str]] = None
    accessibility_features: Optional[List[str]] = None
    green_features: Optional[List[str]] = None
    school_district: Optional[str] = None
    walkability_score: Optional[float] = None
    transit_score: Optional[float] = None
    bike_score: Optional[float] = None


class PropertyView(CamelModel):
    """Assembled view: a property merged with its listing, features and photos."""

    zpid: str
    address: str
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[float] = None
    sqft: Optional[int] = None
    lot_size_sqft: Optional[int] = None
    year_built: Optional[int] = None
    property_type: Optional[str] = None
    stories: Optional[int] = None
    garage_spaces: Optional[int] = None
    parking_spaces: Optional[int] = None
    price: Optional[int] = None
    price_per_sqft: Optional[float] = None
    hoa_fee: Optional[float] = None
    property_tax: Optional[float] = None
    status: Optional[str] = None
    listing_type: Optional[str] = None
    listing: Optional[ListingView] = None
    features: Optional[FeaturesView] = None
    photos: List[PhotoView] = Field(default_factory=list)


class PropertyListResponse(BaseModel):
    """Response body for a property search.

    Attributes:
        properties: The requested page of assembled views.
        total: Number of properties on this page.
        matched: Number of properties matching the criteria across all pages.
    """

    properties: List[PropertyView]
    total: int
    matched: int


class PropertyDetailResponse(BaseModel):
    """Response body for a single property lookup."""

    property: PropertyView


class ErrorResponse(BaseModel):
    """Error body produced by the exception handlers."""

    error: str
    details: Dict[str, Any] = Field(default_factory=dict)
    request_id: Optional[str] = None
