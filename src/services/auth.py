"""Authentication service for JWT and password handling."""

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache

from jose import ExpiredSignatureError, JWSError, JWTError, jws, jwt
from passlib.context import CryptContext

from src.config import get_settings
from src.errors import ExpiredToken, InvalidSignature, MalformedToken

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

TOKEN_ALGORITHM = "HS256"


@dataclass(frozen=True)
class Identity:
    """Verified claims of the caller, valid for a single request."""

    user_id: uuid.UUID
    email: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class TokenService:
    """Issues and verifies HMAC-signed access tokens.

    The signing algorithm is pinned: a token whose header names any other
    algorithm (``none``, RS256, HS512, ...) is rejected before its signature
    is looked at.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = TOKEN_ALGORITHM,
        expiration_minutes: int = 1440,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self.secret = secret
        self.algorithm = algorithm
        self.expiration = timedelta(minutes=expiration_minutes)

    def issue(self, user_id: uuid.UUID, email: str) -> str:
        """Create a signed token for the given user."""
        issued_at = datetime.now(UTC)
        to_encode = {
            "user_id": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.expiration,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        """Decode a token and return the identity it carries.

        Raises:
            MalformedToken: the token or its claims cannot be parsed.
            InvalidSignature: wrong algorithm, or signed with another key.
            ExpiredToken: the token is past its expiry.
        """
        try:
            header = jwt.get_unverified_header(token)
        except JWTError as e:
            raise MalformedToken("Malformed token") from e

        if header.get("alg") != self.algorithm:
            raise InvalidSignature(f"Unexpected signing method: {header.get('alg')}")

        try:
            jws.get_unverified_claims(token)
        except JWSError as e:
            raise MalformedToken("Malformed token") from e

        # Every segment decodes, so a failure here is the signature itself
        try:
            jws.verify(token, self.secret, algorithms=[self.algorithm])
        except JWSError as e:
            raise InvalidSignature("Token signature is invalid") from e

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise ExpiredToken("Token has expired") from e
        except JWTError as e:
            raise MalformedToken("Token claims are invalid") from e

        email = payload.get("email")
        if not isinstance(email, str) or "exp" not in payload:
            raise MalformedToken("Token claims are incomplete")
        try:
            user_id = uuid.UUID(str(payload.get("user_id")))
        except ValueError as e:
            raise MalformedToken("Token claims are incomplete") from e

        return Identity(user_id=user_id, email=email)


@lru_cache
def get_token_service() -> TokenService:
    """Get the process-wide token service built from settings."""
    settings = get_settings()
    return TokenService(settings.jwt_secret, expiration_minutes=settings.jwt_expiration_minutes)
