"""
Pytest conftest.py - Shared fixtures and configuration

Builds a small seeded listing datastore once per session and opens it
read-only through ``PropertyDatabase``, the same way the API does.
"""

import json
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from listing_catalog.main import create_application
from listing_catalog.models import Listing, Property, PropertyFeatures, PropertyPhoto
from listing_catalog.services.database import PropertyDatabase
from listing_catalog.services.init_db import create_schema


# =============================================================================
# PYTEST HOOKS
# =============================================================================

def pytest_collection_modifyitems(config, items):
    """Auto-mark API tests as integration tests, everything else as unit."""
    for item in items:
        if "test_api" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# DATA FIXTURES
# =============================================================================

# zpid, address, city, price, bedrooms, bathrooms, property_type
SEED_PROPERTIES = [
    ("1001", "12 Alcatraz Ave", "Oakland", 600000, 2, 1.0, "Condo"),
    ("1002", "480 Keith Ave", "Oakland", 800000, 3, 2.0, "Townhouse"),
    ("1003", "5912 Chabot Rd", "Oakland", 900000, 4, 2.5, "Single Family"),
    ("1004", "77 Hudson St", "Berkeley", 1200000, 3, 2.0, "Single Family"),
    ("1005", "6200 Broadway Ter", "Oakland", 1500000, 5, 3.5, "Single Family"),
]


def seed_catalog(session: Session) -> None:
    """Insert the five seed properties and their related rows."""
    rows = {}
    for zpid, address, city, price, bedrooms, bathrooms, property_type in SEED_PROPERTIES:
        prop = Property(
            zpid=zpid,
            address=address,
            city=city,
            state="CA",
            zip_code="94618",
            latitude=37.84,
            longitude=-122.25,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            sqft=bedrooms * 600,
            year_built=1925,
            property_type=property_type,
            price=price,
            status="For Sale",
            listing_type="Agent Listed",
        )
        session.add(prop)
        rows[zpid] = prop
    session.flush()

    top = rows["1005"].id
    session.add_all(
        [
            Listing(
                property_id=top,
                list_date="2024-05-01",
                days_on_market=9,
                description="View home above College Ave.",
                key_features=json.dumps(["Bay views", "Wine cellar"]),
                agent_name="Dana Whitfield",
                open_house_dates="2024-05-04, 2024-05-05",
                tour_available=True,
                original_price=1600000,
                price_changes=json.dumps([{"date": "2024-05-08", "price": 1500000}]),
            ),
            PropertyFeatures(
                property_id=top,
                flooring_types=json.dumps(["Hardwood", "Stone"]),
                kitchen_features="Gas range, Island , ,Pantry",
                fireplace=True,
                fireplace_count=2,
                heating="Radiant",
                pool=False,
                spa=True,
                walkability_score=88,
            ),
            # Inserted out of display order on purpose
            PropertyPhoto(property_id=top, image_url="https://img.test/d.jpg", sort_order=2),
            PropertyPhoto(property_id=top, image_url="https://img.test/c.jpg", sort_order=1),
            PropertyPhoto(
                property_id=top,
                image_url="https://img.test/b.jpg",
                sort_order=1,
                is_primary=True,
            ),
            PropertyPhoto(
                property_id=top,
                photo_url="https://source.test/a.jpg",
                caption="Street view",
                room_type="exterior",
                sort_order=0,
            ),
        ]
    )

    # Listing with comma-separated features and a broken price history
    session.add(
        Listing(
            property_id=rows["1003"].id,
            list_date="2024-03-15",
            key_features="Hardwood, Views",
            price_changes="not json",
        )
    )
    # Features row with nothing in the collection columns
    session.add(PropertyFeatures(property_id=rows["1004"].id, flooring_types=""))
    session.commit()


@pytest.fixture(scope="session")
def catalog_path(tmp_path_factory) -> Path:
    """Seeded SQLite file shared by the whole test session."""
    path = tmp_path_factory.mktemp("catalog") / "listings.db"
    engine = create_schema(path)
    try:
        with Session(engine) as session:
            seed_catalog(session)
    finally:
        engine.dispose()
    return path


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture
def database(catalog_path) -> Iterator[PropertyDatabase]:
    """Read-only handle on the seeded datastore."""
    handle = PropertyDatabase(catalog_path)
    yield handle
    handle.close()


@pytest.fixture
def db(database) -> Iterator[Session]:
    """Session on the read-only handle."""
    with database.session() as session:
        yield session


# =============================================================================
# API FIXTURES
# =============================================================================

@pytest.fixture
def client(database) -> Iterator[TestClient]:
    """TestClient running the full app against the seeded datastore."""
    app = create_application(database)
    with TestClient(app) as test_client:
        yield test_client
