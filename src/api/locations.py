"""Location API endpoints."""

import uuid
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from src.api.dependencies import CurrentIdentity, OptionalIdentity, get_location_service
from src.errors import ValidationError
from src.schemas.location import (
    LocationCreate,
    LocationListResponse,
    LocationResponse,
    MessageResponse,
)
from src.services.locations import DEFAULT_CITY, LocationService

router = APIRouter(prefix="/api/v1/locations", tags=["locations"])


def parse_location_id(location_id: str) -> uuid.UUID:
    """Parse a path id, rejecting anything that is not a UUID."""
    try:
        return uuid.UUID(location_id)
    except ValueError:
        raise ValidationError("Invalid location ID") from None


@router.get("", response_model=LocationListResponse)
def get_locations(
    _identity: OptionalIdentity,
    locations: Annotated[LocationService, Depends(get_location_service)],
    city: str = DEFAULT_CITY,
    category: str | None = None,
):
    """Get locations in a city, optionally filtered by category."""
    results = locations.list_locations(city=city, category=category)
    return LocationListResponse(
        locations=[LocationResponse.model_validate(loc) for loc in results],
        count=len(results),
    )


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(
    location_id: str,
    _identity: OptionalIdentity,
    locations: Annotated[LocationService, Depends(get_location_service)],
):
    """Get a specific location."""
    return locations.get(parse_location_id(location_id))


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def create_location(
    location_data: LocationCreate,
    identity: CurrentIdentity,
    locations: Annotated[LocationService, Depends(get_location_service)],
):
    """Create a new location owned by the current user."""
    return locations.create(identity, location_data)


@router.put("/{location_id}", response_model=LocationResponse)
def update_location(
    location_id: str,
    location_data: Annotated[dict[str, Any], Body()],
    identity: CurrentIdentity,
    locations: Annotated[LocationService, Depends(get_location_service)],
):
    """Update a location (owner only). Only provided fields are changed."""
    return locations.update(identity, parse_location_id(location_id), location_data)


@router.delete("/{location_id}", response_model=MessageResponse)
def delete_location(
    location_id: str,
    identity: CurrentIdentity,
    locations: Annotated[LocationService, Depends(get_location_service)],
):
    """Delete a location (owner only)."""
    locations.delete(identity, parse_location_id(location_id))
    return MessageResponse(message="Location deleted successfully")
