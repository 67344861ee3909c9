"""Location model."""

from sqlalchemy import JSON, CheckConstraint, Column, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Location(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A place recommended by a user."""

    __tablename__ = "locations"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_locations_rating"),
        CheckConstraint("price_level >= 1 AND price_level <= 4", name="ck_locations_price_level"),
    )

    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=False, index=True)  # see LocationCategory
    address = Column(String, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    city = Column(String(255), nullable=False, index=True)
    rating = Column(Integer, nullable=True)
    price_level = Column(Integer, nullable=True)
    tags = Column(JSON, nullable=True)  # ordered list of strings
    image_url = Column(String, nullable=True)
    website_url = Column(String, nullable=True)

    # Relationships
    user = relationship("User", backref="locations", lazy="joined")
