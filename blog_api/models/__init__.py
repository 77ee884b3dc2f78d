"""SQLAlchemy models."""

from blog_api.models.article import Article
from blog_api.models.user import OAUTH_PASSWORD_SENTINEL, User

__all__ = [
    "User",
    "Article",
    "OAUTH_PASSWORD_SENTINEL",
]
