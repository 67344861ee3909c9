"""Location schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.auth import UserResponse


class LocationCreate(BaseModel):
    """Create a new location.

    Text fields default to empty so that missing values are reported as
    missing fields rather than as a malformed body.
    """

    name: str = Field("", max_length=255)
    description: str | None = None
    category: str = Field("", max_length=50)
    address: str = ""
    latitude: float
    longitude: float
    city: str = Field("", max_length=255)
    rating: int | None = None
    price_level: int | None = None
    tags: list[str] | None = None
    image_url: str | None = None
    website_url: str | None = None


class LocationUpdate(BaseModel):
    """Update a location. Empty strings, zero coordinates and nulls mean 'leave as is'."""

    name: str = Field("", max_length=255)
    description: str | None = None
    category: str = Field("", max_length=50)
    address: str = ""
    latitude: float | None = None
    longitude: float | None = None
    city: str = Field("", max_length=255)
    rating: int | None = None
    price_level: int | None = None
    tags: list[str] | None = None
    image_url: str | None = None
    website_url: str | None = None


class LocationResponse(BaseModel):
    """Location response with its owner embedded."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    description: str | None
    category: str
    address: str
    latitude: float
    longitude: float
    city: str
    rating: int | None
    price_level: int | None
    tags: list[str] | None
    image_url: str | None
    website_url: str | None
    created_at: datetime
    updated_at: datetime
    user: UserResponse | None = None


class LocationListResponse(BaseModel):
    """Locations matching a query."""

    locations: list[LocationResponse]
    count: int


class UserLocationsResponse(BaseModel):
    """All locations recommended by one user."""

    user: UserResponse
    locations: list[LocationResponse]
    count: int


class MessageResponse(BaseModel):
    message: str
