"""Domain errors raised by services and mapped to HTTP responses at the API boundary.

Services never raise ``HTTPException`` directly; they raise an ``AppError``
subclass tagged with an ``ErrorKind``. ``STATUS_BY_KIND`` is the only place
where a kind is turned into a transport status code.
"""

from enum import Enum

from fastapi import status


class ErrorKind(str, Enum):
    """Failure categories understood by the API layer."""

    VALIDATION = "validation"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(Exception):
    """Base class for failures that carry a kind and a client-safe message."""

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class ValidationFailed(AppError):
    kind = ErrorKind.VALIDATION
    default_message = "Validation failed"


class Unauthenticated(AppError):
    kind = ErrorKind.UNAUTHENTICATED
    default_message = "Authentication required. Please provide a valid token."


class InvalidToken(Unauthenticated):
    """Signature, format or expiry check failed."""

    default_message = "Invalid or expired token"


class WrongTokenType(Unauthenticated):
    """A valid token was presented for the wrong purpose (access vs refresh)."""

    default_message = "Invalid token type"


class InvalidCredentials(Unauthenticated):
    default_message = "Invalid email or password"


class OAuthOnlyAccount(InvalidCredentials):
    """The account was created through an OAuth provider and has no password."""

    default_message = "Please use OAuth to login"


class OAuthFailed(Unauthenticated):
    default_message = "OAuth authentication failed"


class Forbidden(AppError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Forbidden"


class NotAuthor(Forbidden):
    default_message = "Forbidden: You are not the author of this article"


class NotFound(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"


class ArticleNotFound(NotFound):
    default_message = "Article not found"


class ProviderNotConfigured(NotFound):
    default_message = "OAuth provider is not configured"


class Conflict(AppError):
    kind = ErrorKind.CONFLICT
    default_message = "Conflict"


class DuplicateEmail(Conflict):
    default_message = "User with this email already exists"


class SlugConflict(Conflict):
    """The store rejected a slug that was free when it was generated."""

    default_message = "An article with this slug already exists, please retry"
