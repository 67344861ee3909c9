"""Account service: registration, login and profiles."""

import logging
import uuid

from sqlalchemy import or_

from src.errors import Conflict, NotFound, Unauthorized, ValidationError
from src.models.user import User
from src.services.auth import TokenService, get_password_hash
from src.services.storage import Storage

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AccountService:
    """Service for user accounts."""

    def __init__(self, storage: Storage, tokens: TokenService):
        self.storage = storage
        self.tokens = tokens

    def register(
        self, email: str, username: str, display_name: str, password: str
    ) -> tuple[User, str]:
        """Create a user and return it with a fresh token.

        The password is hashed but the hash is not stored anywhere yet, so
        there is nothing for login to check it against.
        """
        if not (email and username and display_name and password):
            raise ValidationError("All fields are required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        # Fast path; the unique indexes are what actually guard against races
        if self.storage.count(User, or_(User.email == email, User.username == username)):
            raise Conflict("User with this email or username already exists")

        get_password_hash(password)

        try:
            user = self.storage.create(
                User(email=email, username=username, display_name=display_name)
            )
        except Conflict:
            raise Conflict("User with this email or username already exists") from None

        logger.info(f"Registered user {user.username} ({user.id})")
        return user, self.tokens.issue(user.id, user.email)

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Issue a token for the user with this email.

        The password is accepted but not verified.
        """
        try:
            user = self.storage.find_one(User, User.email == email)
        except NotFound:
            raise Unauthorized("Invalid credentials") from None
        return user, self.tokens.issue(user.id, user.email)

    def get_profile(self, user_id: uuid.UUID) -> User:
        return self.storage.find_by_id(User, user_id, message="User not found")

    def update_profile(
        self, user_id: uuid.UUID, display_name: str = "", avatar_url: str | None = None
    ) -> User:
        """Overwrite the display name when non-empty and the avatar URL when given."""
        user = self.get_profile(user_id)
        if display_name:
            user.display_name = display_name
        if avatar_url is not None:
            user.avatar_url = avatar_url
        return self.storage.save(user)

    def get_by_username(self, username: str) -> User:
        return self.storage.find_one(User, User.username == username, message="User not found")
