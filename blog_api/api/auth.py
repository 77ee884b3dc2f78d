"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool

from blog_api.api.dependencies import get_auth_service
from blog_api.errors import OAuthFailed
from blog_api.schemas.auth import (
    AccessTokenResponse,
    AuthResponse,
    RefreshRequest,
    UserLogin,
    UserResponse,
    UserSignup,
)
from blog_api.schemas.common import DataResponse
from blog_api.services.auth import AuthResult, AuthService
from blog_api.services.oauth import get_oauth_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_payload(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        user=UserResponse.model_validate(result.user),
        access_token=result.access_token,
        refresh_token=result.refresh_token,
    )


@router.post(
    "/signup",
    response_model=DataResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
)
def signup(
    user_data: UserSignup,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user and return a token pair."""
    result = auth_service.signup(user_data.email, user_data.password, user_data.name)
    return DataResponse[AuthResponse](
        message="User registered successfully",
        data=_auth_payload(result),
    )


@router.post("/login", response_model=DataResponse[AuthResponse])
def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    result = auth_service.login(credentials.email, credentials.password)
    return DataResponse[AuthResponse](message="Login successful", data=_auth_payload(result))


@router.post("/refresh", response_model=DataResponse[AccessTokenResponse])
def refresh(
    body: RefreshRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Exchange a refresh token for a new access token."""
    access_token = auth_service.refresh(body.refresh_token)
    return DataResponse[AccessTokenResponse](
        message="Token refreshed successfully",
        data=AccessTokenResponse(access_token=access_token),
    )


@router.get("/oauth/failure")
async def oauth_failure():
    """Landing route for failed provider logins."""
    raise OAuthFailed()


@router.get("/{provider}")
def oauth_start(provider: str):
    """Redirect the browser to the provider's consent screen."""
    client = get_oauth_client(provider)
    return RedirectResponse(client.authorization_url(), status_code=status.HTTP_302_FOUND)


@router.get("/{provider}/callback", response_model=DataResponse[AuthResponse])
async def oauth_callback(
    provider: str,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    code: str | None = None,
    error: str | None = None,
):
    """Complete a provider login and return a token pair."""
    client = get_oauth_client(provider)
    if error or not code:
        logger.warning(f"{provider} OAuth callback without code (error={error})")
        raise OAuthFailed()

    identity = await client.fetch_identity(code)
    result = await run_in_threadpool(auth_service.oauth_login, identity.email, identity.name)
    return DataResponse[AuthResponse](message="OAuth login successful", data=_auth_payload(result))
