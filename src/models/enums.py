"""Enums for model fields."""

from enum import Enum


class LocationCategory(str, Enum):
    """Categories a location can be filed under."""

    RESTAURANT = "restaurant"
    CAFE = "cafe"
    BAR = "bar"
    SHOPPING = "shopping"
    PARK = "park"
    HIKE = "hike"
    MUSEUM = "museum"
    ENTERTAINMENT = "entertainment"
    BEACH = "beach"
    VIEWPOINT = "viewpoint"
    OTHER = "other"

    @classmethod
    def values(cls) -> list[str]:
        """All valid category strings, in declaration order."""
        return [category.value for category in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string names a category (case-sensitive)."""
        return value in cls.values()
