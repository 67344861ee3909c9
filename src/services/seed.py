"""Sample Bay Area locations for a fresh database."""

import logging

from src.errors import AppError, NotFound
from src.models.enums import LocationCategory
from src.models.location import Location
from src.models.user import User
from src.services.storage import Storage

logger = logging.getLogger(__name__)

CURATOR_EMAIL = "seed@myarea.com"
CURATOR_USERNAME = "myarea_seed"
CURATOR_DISPLAY_NAME = "MyArea Curator"

SAMPLE_LOCATIONS = [
    {
        "name": "Golden Gate Bridge",
        "description": "Iconic suspension bridge and San Francisco landmark",
        "category": LocationCategory.VIEWPOINT.value,
        "address": "Golden Gate Bridge, San Francisco, CA 94129",
        "latitude": 37.8199,
        "longitude": -122.4783,
        "city": "San Francisco",
        "rating": 5,
        "tags": ["iconic", "photography", "walking"],
    },
    {
        "name": "Tartine Bakery",
        "description": "Famous bakery known for incredible pastries and bread",
        "category": LocationCategory.CAFE.value,
        "address": "600 Guerrero St, San Francisco, CA 94110",
        "latitude": 37.7617,
        "longitude": -122.4240,
        "city": "San Francisco",
        "rating": 4,
        "price_level": 3,
        "tags": ["bakery", "pastries", "coffee"],
    },
    {
        "name": "Dolores Park",
        "description": "Popular park with great city views and picnic spots",
        "category": LocationCategory.PARK.value,
        "address": "Dolores St & 18th St, San Francisco, CA 94114",
        "latitude": 37.7596,
        "longitude": -122.4269,
        "city": "San Francisco",
        "rating": 4,
        "tags": ["picnic", "views", "outdoor"],
    },
    {
        "name": "Muir Woods",
        "description": "Ancient redwood forest just north of the Golden Gate",
        "category": LocationCategory.HIKE.value,
        "address": "1 Muir Woods Rd, Mill Valley, CA 94941",
        "latitude": 37.8965,
        "longitude": -122.5811,
        "city": "Mill Valley",
        "rating": 5,
        "tags": ["redwoods", "nature", "hiking"],
    },
    {
        "name": "The Ferry Building",
        "description": "Historic ferry terminal with artisanal food vendors",
        "category": LocationCategory.SHOPPING.value,
        "address": "1 Ferry Building, San Francisco, CA 94111",
        "latitude": 37.7955,
        "longitude": -122.3933,
        "city": "San Francisco",
        "rating": 4,
        "price_level": 3,
        "tags": ["food", "market", "shopping"],
    },
]


def get_or_create_curator(storage: Storage) -> User:
    """Get the user that owns seeded locations, creating it on first use."""
    try:
        return storage.find_one(User, User.email == CURATOR_EMAIL)
    except NotFound:
        return storage.create(
            User(
                email=CURATOR_EMAIL,
                username=CURATOR_USERNAME,
                display_name=CURATOR_DISPLAY_NAME,
            )
        )


def seed_sample_locations(storage: Storage) -> int:
    """Insert the sample locations unless the table already has rows.

    Returns the number of locations created.
    """
    if storage.count(Location) > 0:
        logger.info("Sample locations already exist, skipping seed")
        return 0

    curator = get_or_create_curator(storage)
    seeded = 0
    for data in SAMPLE_LOCATIONS:
        try:
            storage.create(Location(user_id=curator.id, **data))
        except AppError as e:
            logger.error(f"Failed to seed location {data['name']}: {e.message}")
            continue
        seeded += 1

    logger.info(f"Seeded {seeded} sample Bay Area locations")
    return seeded
