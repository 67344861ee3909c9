"""Validation and ownership rules for locations.

Pure functions: they inspect values and raise, or mutate a loaded
``Location`` in memory. Persisting is up to the caller.
"""

from src.errors import Forbidden, InvalidCategory, InvalidPriceLevel, InvalidRating, MissingField
from src.models.enums import LocationCategory
from src.models.location import Location
from src.schemas.location import LocationCreate, LocationUpdate
from src.services.auth import Identity

RATING_RANGE = (1, 5)
PRICE_LEVEL_RANGE = (1, 4)


def validate_category(category: str) -> None:
    if not LocationCategory.is_valid(category):
        raise InvalidCategory("Invalid category")


def validate_rating(rating: int | None) -> None:
    """A rating is optional; when given it must be within 1..5."""
    low, high = RATING_RANGE
    if rating is not None and not low <= rating <= high:
        raise InvalidRating(f"Rating must be between {low} and {high}")


def validate_price_level(price_level: int | None) -> None:
    """A price level is optional; when given it must be within 1..4."""
    low, high = PRICE_LEVEL_RANGE
    if price_level is not None and not low <= price_level <= high:
        raise InvalidPriceLevel(f"Price level must be between {low} and {high}")


def require_fields(name: str, category: str, address: str, city: str) -> None:
    if not (name and category and address and city):
        raise MissingField("Name, category, address, and city are required")


def validate_new_location(payload: LocationCreate) -> None:
    """Run every creation check, in order: required fields, category, rating, price level."""
    require_fields(payload.name, payload.category, payload.address, payload.city)
    validate_category(payload.category)
    validate_rating(payload.rating)
    validate_price_level(payload.price_level)


def check_ownership(location: Location, identity: Identity, action: str) -> None:
    """Only the user who created a location may change it."""
    if location.user_id != identity.user_id:
        raise Forbidden(f"You can only {action} your own locations")


def apply_location_update(location: Location, payload: LocationUpdate) -> Location:
    """Merge the provided fields of an update into a location.

    Strings overwrite only when non-empty. Latitude and longitude overwrite
    only when non-zero and non-null, so an update to exactly 0.0 is dropped.
    Optional fields overwrite whenever they are not null. All checks run before the
    first assignment, so a rejected update leaves the location untouched.
    """
    if payload.category:
        validate_category(payload.category)
    validate_rating(payload.rating)
    validate_price_level(payload.price_level)

    if payload.name:
        location.name = payload.name
    if payload.description is not None:
        location.description = payload.description
    if payload.category:
        location.category = payload.category
    if payload.address:
        location.address = payload.address
    if payload.city:
        location.city = payload.city
    if payload.latitude:
        location.latitude = payload.latitude
    if payload.longitude:
        location.longitude = payload.longitude
    if payload.rating is not None:
        location.rating = payload.rating
    if payload.price_level is not None:
        location.price_level = payload.price_level
    if payload.tags is not None:
        location.tags = list(payload.tags)
    if payload.image_url is not None:
        location.image_url = payload.image_url
    if payload.website_url is not None:
        location.website_url = payload.website_url
    return location
