"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import OptionalIdentity, get_location_service
from src.schemas.auth import UserResponse
from src.schemas.location import LocationResponse, UserLocationsResponse
from src.services.locations import LocationService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("/{username}/locations", response_model=UserLocationsResponse)
def get_user_locations(
    username: str,
    _identity: OptionalIdentity,
    locations: Annotated[LocationService, Depends(get_location_service)],
):
    """Get all locations recommended by a user."""
    user, results = locations.list_for_user(username)
    return UserLocationsResponse(
        user=UserResponse.model_validate(user),
        locations=[LocationResponse.model_validate(loc) for loc in results],
        count=len(results),
    )
