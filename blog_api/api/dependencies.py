"""FastAPI dependencies for authentication, services and the database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from blog_api.database import get_db
from blog_api.errors import Unauthenticated
from blog_api.repositories.article import ArticleRepository
from blog_api.repositories.user import UserRepository
from blog_api.services.articles import ArticleService
from blog_api.services.auth import AuthService
from blog_api.services.tokens import TokenClaims, TokenService, TokenType, get_token_service

# auto_error=False so a missing header goes through our own 401 envelope
security = HTTPBearer(auto_error=False)


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> TokenClaims:
    """Get the caller's identity from a Bearer access token.

    Only the token is inspected; no database lookup is made.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    claims = tokens.verify(credentials.credentials)
    if claims.type is not TokenType.ACCESS:
        raise Unauthenticated("Invalid token type. Please use an access token.")

    return claims


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(UserRepository(db), tokens)


def get_article_service(
    db: Annotated[Session, Depends(get_db)],
) -> ArticleService:
    """Get article service with dependencies."""
    return ArticleService(ArticleRepository(db))
