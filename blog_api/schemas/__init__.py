"""Pydantic schemas for API requests and responses."""

from blog_api.schemas.article import ArticleCreate, ArticleResponse, ArticleUpdate, AuthorSummary
from blog_api.schemas.auth import (
    AccessTokenResponse,
    AuthResponse,
    RefreshRequest,
    UserLogin,
    UserResponse,
    UserSignup,
)
from blog_api.schemas.common import (
    DataResponse,
    MessageResponse,
    PageResponse,
    Pagination,
)

__all__ = [
    "UserSignup",
    "UserLogin",
    "RefreshRequest",
    "UserResponse",
    "AuthResponse",
    "AccessTokenResponse",
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "AuthorSummary",
    "MessageResponse",
    "DataResponse",
    "PageResponse",
    "Pagination",
]
