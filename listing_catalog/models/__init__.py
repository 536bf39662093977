"""Datastore models for the listing catalog."""

from listing_catalog.models.base import Base
from listing_catalog.models.listing import Listing, PropertyFeatures
from listing_catalog.models.photo import PropertyPhoto
from listing_catalog.models.property import Property

__all__ = ["Base", "Listing", "Property", "PropertyFeatures", "PropertyPhoto"]
