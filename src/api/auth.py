"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import CurrentIdentity, get_account_service
from src.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse, UserUpdate
from src.services.accounts import AccountService

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Register a new user."""
    user, token = accounts.register(
        user_data.email, user_data.username, user_data.display_name, user_data.password
    )
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Login with email."""
    user, token = accounts.login(credentials.email, credentials.password)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/me", response_model=UserResponse)
def get_me(
    identity: CurrentIdentity,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Get current user information."""
    return accounts.get_profile(identity.user_id)


@router.put("/me", response_model=UserResponse)
def update_me(
    profile: UserUpdate,
    identity: CurrentIdentity,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Update the current user's display name or avatar."""
    return accounts.update_profile(identity.user_id, profile.display_name, profile.avatar_url)
