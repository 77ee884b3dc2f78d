"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class UserSignup(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class RefreshRequest(BaseModel):
    """Token refresh request; accepts refreshToken or refresh_token."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    refresh_token: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """User information response (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """User plus a fresh access/refresh token pair."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user: UserResponse
    access_token: str
    refresh_token: str


class AccessTokenResponse(BaseModel):
    """Access token issued by a refresh."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    access_token: str
