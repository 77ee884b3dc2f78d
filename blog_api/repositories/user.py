"""User persistence: lookups by key and account creation."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog_api.errors import DuplicateEmail
from blog_api.models.user import OAUTH_PASSWORD_SENTINEL, User

logger = logging.getLogger(__name__)


class UserRepository:
    """Queries and writes against the users table."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> User | None:
        """Get a user by exact (case-sensitive) email."""
        return self.db.query(User).filter(User.email == email).first()

    def create(self, email: str, password_hash: str, name: str) -> User:
        """Insert a user.

        The unique index on email decides races between concurrent signups;
        a violation surfaces as DuplicateEmail.
        """
        user = User(email=email, password_hash=password_hash, name=name)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Unique violation creating user {email}: {e.orig}")
            raise DuplicateEmail() from e
        self.db.refresh(user)
        return user

    def get_or_create_oauth_user(self, email: str, name: str) -> tuple[User, bool]:
        """Find a user by email, creating a password-less account if absent.

        Returns (user, created).
        """
        user = self.get_by_email(email)
        if user:
            return user, False

        try:
            user = self.create(email, OAUTH_PASSWORD_SENTINEL, name)
        except DuplicateEmail:
            # Lost a race with a concurrent first login for the same email
            user = self.get_by_email(email)
            if user is None:
                raise
            return user, False
        return user, True
