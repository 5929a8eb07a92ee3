"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookmarks_api.api.dependencies import get_auth_service
from bookmarks_api.schemas.auth import AuthCredentials, Token
from bookmarks_api.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=Token, status_code=status.HTTP_201_CREATED)
def signup(
    credentials: AuthCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user and return an access token."""
    access_token = auth_service.signup(credentials.email, credentials.password)
    return Token(access_token=access_token)


@router.post("/signin", response_model=Token, status_code=status.HTTP_200_OK)
def signin(
    credentials: AuthCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Sign in with email and password."""
    access_token = auth_service.signin(credentials.email, credentials.password)
    return Token(access_token=access_token)
