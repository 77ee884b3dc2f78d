"""User model."""

from sqlalchemy import Column, Integer, String

from blog_api.database import Base
from blog_api.models.mixins import TimestampMixin

# Stored in place of a bcrypt hash for accounts created through an OAuth provider.
OAUTH_PASSWORD_SENTINEL = "oauth_user_no_password"  # noqa: S105


class User(Base, TimestampMixin):
    """User model for authentication and article authorship."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)

    @property
    def is_oauth_only(self) -> bool:
        """True when the account has no local password."""
        return self.password_hash == OAUTH_PASSWORD_SENTINEL
