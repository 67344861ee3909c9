"""Location query and mutation service."""

import logging
import uuid
from typing import Any

import pydantic

from src.errors import ValidationError
from src.models.location import Location
from src.models.user import User
from src.schemas.location import LocationCreate, LocationUpdate
from src.services.auth import Identity
from src.services.location_rules import (
    apply_location_update,
    check_ownership,
    validate_category,
    validate_new_location,
)
from src.services.storage import Storage

logger = logging.getLogger(__name__)

DEFAULT_CITY = "San Francisco"


class LocationService:
    """Service for location-related operations."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def list_locations(
        self, city: str = DEFAULT_CITY, category: str | None = None
    ) -> list[Location]:
        """Locations whose city contains ``city`` (case-insensitive), optionally of one category."""
        criteria = [Location.city.ilike(f"%{city}%")]
        if category:
            validate_category(category)
            criteria.append(Location.category == category)
        return self.storage.find_many(Location, *criteria, order_by=Location.created_at)

    def get(self, location_id: uuid.UUID) -> Location:
        return self.storage.find_by_id(Location, location_id, message="Location not found")

    def create(self, identity: Identity, payload: LocationCreate) -> Location:
        """Validate and store a new location owned by the caller."""
        validate_new_location(payload)
        location = self.storage.create(
            Location(user_id=identity.user_id, **payload.model_dump())
        )
        logger.info(f"User {identity.user_id} created location {location.id}")
        return location

    def update(
        self, identity: Identity, location_id: uuid.UUID, changes: dict[str, Any]
    ) -> Location:
        """Merge an update into a location the caller owns.

        The raw body is parsed only after the ownership check, so a non-owner
        is refused even when the body is malformed.
        """
        location = self.get(location_id)
        check_ownership(location, identity, "update")
        try:
            payload = LocationUpdate.model_validate(changes)
        except pydantic.ValidationError as e:
            raise ValidationError("Invalid request body") from e
        apply_location_update(location, payload)
        location = self.storage.save(location)
        logger.info(f"User {identity.user_id} updated location {location.id}")
        return location

    def delete(self, identity: Identity, location_id: uuid.UUID) -> None:
        """Delete a location the caller owns."""
        location = self.get(location_id)
        check_ownership(location, identity, "delete")
        self.storage.delete(location)
        logger.info(f"User {identity.user_id} deleted location {location_id}")

    def list_for_user(self, username: str) -> tuple[User, list[Location]]:
        """A user and every location they recommended."""
        user = self.storage.find_one(User, User.username == username, message="User not found")
        locations = self.storage.find_many(
            Location, Location.user_id == user.id, order_by=Location.created_at
        )
        return user, locations
