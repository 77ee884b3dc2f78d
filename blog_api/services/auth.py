"""Authentication service: signup, password login, token refresh and OAuth login."""

import logging
from dataclasses import dataclass

from passlib.context import CryptContext

from blog_api.errors import DuplicateEmail, InvalidCredentials, OAuthOnlyAccount
from blog_api.models.user import User
from blog_api.repositories.user import UserRepository
from blog_api.services.tokens import TokenService

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


@dataclass
class AuthResult:
    """A user together with a fresh token pair."""

    user: User
    access_token: str
    refresh_token: str


class AuthService:
    """Service for account and token operations."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self.users = users
        self.tokens = tokens

    def signup(self, email: str, password: str, name: str) -> AuthResult:
        """Register a new account and log it in."""
        if self.users.get_by_email(email):
            raise DuplicateEmail()

        user = self.users.create(email, get_password_hash(password), name)
        logger.info(f"Registered user {user.id}")
        return self._issue(user)

    def login(self, email: str, password: str) -> AuthResult:
        """Authenticate with email and password.

        Unknown email and wrong password fail with the same message so the
        response does not reveal whether an account exists.
        """
        user = self.users.get_by_email(email)
        if not user:
            logger.info("Login failed: unknown email")
            raise InvalidCredentials()

        if user.is_oauth_only:
            raise OAuthOnlyAccount()

        if not verify_password(password, user.password_hash):
            logger.info(f"Login failed: bad password for user {user.id}")
            raise InvalidCredentials()

        logger.info(f"User {user.id} logged in")
        return self._issue(user)

    def refresh(self, refresh_token: str) -> str:
        """Exchange a refresh token for a new access token (no rotation)."""
        claims = self.tokens.verify_refresh(refresh_token)
        return self.tokens.issue_access(claims.user_id, claims.email)

    def oauth_login(self, email: str, name: str) -> AuthResult:
        """Log in a provider-verified identity, creating the account on first use."""
        user, created = self.users.get_or_create_oauth_user(email, name)
        if created:
            logger.info(f"Created OAuth account for user {user.id}")
        return self._issue(user)

    def _issue(self, user: User) -> AuthResult:
        return AuthResult(
            user=user,
            access_token=self.tokens.issue_access(user.id, user.email),
            refresh_token=self.tokens.issue_refresh(user.id, user.email),
        )
