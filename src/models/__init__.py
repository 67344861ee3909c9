"""SQLAlchemy models."""

from src.models.location import Location
from src.models.user import User

__all__ = [
    "User",
    "Location",
]
