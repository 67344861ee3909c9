"""FastAPI dependencies for authentication and services."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from src.database import get_db
from src.errors import Unauthorized
from src.services.accounts import AccountService
from src.services.auth import Identity, TokenService, get_token_service
from src.services.locations import LocationService
from src.services.storage import Storage

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str:
    """Pull the token out of an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        raise Unauthorized("Authorization header required")
    if not authorization.startswith(BEARER_PREFIX):
        raise Unauthorized("Invalid authorization header format")
    token = authorization[len(BEARER_PREFIX) :]
    if not token:
        raise Unauthorized("Token is required")
    return token


def require_identity(
    request: Request,
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> Identity:
    """Get the verified caller, rejecting the request when there is none."""
    token = extract_bearer_token(request.headers.get("Authorization"))
    try:
        return tokens.verify(token)
    except Unauthorized as e:
        logger.debug(f"Rejected token: {e.message}")
        raise Unauthorized("Invalid token") from e


def optional_identity(
    request: Request,
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> Identity | None:
    """Get the verified caller if there is one; anonymous otherwise."""
    try:
        token = extract_bearer_token(request.headers.get("Authorization"))
        return tokens.verify(token)
    except Unauthorized as e:
        logger.debug(f"Continuing anonymously: {e.message}")
        return None


def get_storage(db: Annotated[Session, Depends(get_db)]) -> Storage:
    """Get storage bound to the request's session."""
    return Storage(db)


def get_account_service(
    storage: Annotated[Storage, Depends(get_storage)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AccountService:
    """Get account service with dependencies."""
    return AccountService(storage, tokens)


def get_location_service(
    storage: Annotated[Storage, Depends(get_storage)],
) -> LocationService:
    """Get location service with dependencies."""
    return LocationService(storage)


CurrentIdentity = Annotated[Identity, Depends(require_identity)]
OptionalIdentity = Annotated[Identity | None, Depends(optional_identity)]
