"""
Datastore Initialization
========================

The API only ever reads the listing datastore. This module is the
development-side tool that creates an empty datastore with the
expected schema and, optionally, a handful of sample listings.

Usage:
------
```bash
python -m listing_catalog.services.init_db data/zillow_rockridge.db --sample-data
```
"""

import json
import logging
from pathlib import Path
from typing import Union

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session

from listing_catalog.models import Base, Listing, Property, PropertyFeatures, PropertyPhoto

logger = logging.getLogger(__name__)


def create_schema(path: Union[str, Path], drop_existing: bool = False) -> Engine:
    """Create every catalog table in a writable SQLite file.

    Args:
        path: Database file to create or update.
        drop_existing: Drop the catalog tables first (deletes data).

    Returns:
        Writable engine on the file; the caller disposes of it.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite+pysqlite:///{path.resolve().as_posix()}")

    if drop_existing:
        Base.metadata.drop_all(engine)
        logger.warning("All catalog tables dropped!")

    Base.metadata.create_all(engine)
    logger.info(f"Created {len(Base.metadata.tables)} tables in {path}")
    return engine


def insert_sample_data(engine: Engine) -> None:
    """
    Insert sample listings for development.

    Note: This data is fake and only for development!
    """
    with Session(engine) as session:
        craftsman = Property(
            zpid="24503950",
            address="5730 Ocean View Dr",
            city="Oakland",
            state="CA",
            zip_code="94618",
            latitude=37.8469,
            longitude=-122.2421,
            bedrooms=4,
            bathrooms=3.0,
            sqft=2450,
            lot_size_sqft=5200,
            year_built=1924,
            property_type="Single Family",
            stories=2,
            garage_spaces=1,
            parking_spaces=2,
            price=2195000,
            price_per_sqft=896.0,
            property_tax=27400.0,
            status="For Sale",
            listing_type="Agent Listed",
        )
        condo = Property(
            zpid="24503951",
            address="6001 College Ave #4",
            city="Oakland",
            state="CA",
            zip_code="94618",
            latitude=37.8512,
            longitude=-122.2522,
            bedrooms=2,
            bathrooms=2.0,
            sqft=1100,
            year_built=2008,
            property_type="Condo",
            price=899000,
            price_per_sqft=817.3,
            hoa_fee=540.0,
            property_tax=11200.0,
            status="For Sale",
            listing_type="Agent Listed",
        )
        session.add_all([craftsman, condo])
        session.flush()

        session.add_all(
            [
                Listing(
                    property_id=craftsman.id,
                    list_date="2024-04-02",
                    days_on_market=12,
                    description="Classic Rockridge craftsman with a sunny garden.",
                    key_features=json.dumps(["Original built-ins", "Updated kitchen"]),
                    agent_name="Dana Whitfield",
                    agent_phone="510-555-0142",
                    brokerage="Bayside Realty",
                    open_house_dates="2024-04-06, 2024-04-07",
                    tour_available=True,
                    original_price=2250000,
                    price_changes=json.dumps(
                        [{"date": "2024-04-10", "price": 2195000, "change": -55000}]
                    ),
                ),
                PropertyFeatures(
                    property_id=craftsman.id,
                    flooring_types=json.dumps(["Hardwood", "Tile"]),
                    kitchen_features="Gas range, Island, Pantry",
                    fireplace=True,
                    fireplace_count=1,
                    heating="Forced air",
                    yard_features=json.dumps(["Garden", "Patio"]),
                    school_district="Oakland Unified",
                    walkability_score=92,
                    transit_score=68,
                    bike_score=85,
                ),
                PropertyPhoto(
                    property_id=craftsman.id,
                    image_url="https://photos.example.com/24503950/front.jpg",
                    caption="Front elevation",
                    room_type="exterior",
                    is_primary=True,
                    sort_order=0,
                ),
                PropertyPhoto(
                    property_id=craftsman.id,
                    image_url="https://photos.example.com/24503950/kitchen.jpg",
                    caption="Kitchen",
                    room_type="kitchen",
                    sort_order=1,
                ),
            ]
        )
        session.commit()
    logger.info("Sample data inserted successfully")


if __name__ == "__main__":
    import argparse

    from listing_catalog.core.logging import setup_logging

    parser = argparse.ArgumentParser(description="Initialize a listing datastore")
    parser.add_argument("path", type=Path, help="SQLite file to create")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing tables before creating (DANGER: deletes data!)",
    )
    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Insert sample data for development",
    )
    args = parser.parse_args()

    setup_logging()
    engine = create_schema(args.path, drop_existing=args.drop)
    try:
        if args.sample_data:
            insert_sample_data(engine)
    finally:
        engine.dispose()
