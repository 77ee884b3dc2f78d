"""JWT issuance and verification for access and refresh tokens."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum
from functools import lru_cache

from jose import JWTError, jwt

from blog_api.config import get_settings
from blog_api.errors import InvalidToken, WrongTokenType


class TokenType(str, Enum):
    """Discriminant embedded in every token."""

    ACCESS = "access"
    REFRESH = "refresh"


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token."""

    user_id: int
    email: str
    type: TokenType


class TokenService:
    """Sign and verify tokens with a single shared secret.

    Access and refresh tokens share the secret and algorithm; they are told
    apart by the ``type`` claim, so a refresh token can never be used to call
    the API and an access token can never be exchanged for a new one.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        access_ttl: timedelta = timedelta(minutes=15),
        refresh_ttl: timedelta = timedelta(days=7),
    ) -> None:
        self.secret = secret
        self.algorithm = algorithm
        self.access_ttl = access_ttl
        self.refresh_ttl = refresh_ttl

    def issue_access(self, user_id: int, email: str) -> str:
        """Create a short-lived access token."""
        return self._issue(user_id, email, TokenType.ACCESS, self.access_ttl)

    def issue_refresh(self, user_id: int, email: str) -> str:
        """Create a long-lived refresh token."""
        return self._issue(user_id, email, TokenType.REFRESH, self.refresh_ttl)

    def verify(self, token: str) -> TokenClaims:
        """Validate signature and expiry and return the claims.

        Raises InvalidToken when the token is malformed, tampered with,
        expired, or missing any of the identity claims.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidToken() from e

        try:
            return TokenClaims(
                user_id=int(payload["sub"]),
                email=str(payload["email"]),
                type=TokenType(payload["type"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidToken() from e

    def verify_refresh(self, token: str) -> TokenClaims:
        """Verify a token and require it to be a refresh token."""
        claims = self.verify(token)
        if claims.type is not TokenType.REFRESH:
            raise WrongTokenType()
        return claims

    def _issue(self, user_id: int, email: str, token_type: TokenType, ttl: timedelta) -> str:
        now = datetime.now(UTC)
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "type": token_type.value,
            "iat": now,
            "exp": now + ttl,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)


@lru_cache
def get_token_service() -> TokenService:
    """Process-wide token service built from settings."""
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        access_ttl=settings.access_token_ttl,
        refresh_ttl=settings.refresh_token_ttl,
    )
