"""OAuth provider integration (Google, GitHub) via the authorization-code flow."""

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx

from blog_api.config import Settings, get_settings
from blog_api.errors import OAuthFailed, ProviderNotConfigured

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OAuthProvider:
    """Static endpoints and scope for one identity provider."""

    name: str
    authorize_url: str
    token_url: str
    userinfo_url: str
    scope: str


GOOGLE = OAuthProvider(
    name="google",
    authorize_url="https://accounts.google.com/o/oauth2/v2/auth",
    token_url="https://oauth2.googleapis.com/token",
    userinfo_url="https://openidconnect.googleapis.com/v1/userinfo",
    scope="openid email profile",
)

GITHUB = OAuthProvider(
    name="github",
    authorize_url="https://github.com/login/oauth/authorize",
    token_url="https://github.com/login/oauth/access_token",
    userinfo_url="https://api.github.com/user",
    scope="user:email",
)

PROVIDERS = {provider.name: provider for provider in (GOOGLE, GITHUB)}


@dataclass(frozen=True)
class OAuthIdentity:
    """What we keep from a provider profile."""

    email: str
    name: str


class OAuthClient:
    """Talks to one provider: builds the consent URL and resolves callback codes."""

    def __init__(
        self,
        provider: OAuthProvider,
        client_id: str,
        client_secret: str,
        callback_url: str,
        timeout: float = 10.0,
    ) -> None:
        self.provider = provider
        self.client_id = client_id
        self.client_secret = client_secret
        self.callback_url = callback_url
        self.timeout = timeout

    def authorization_url(self) -> str:
        """URL the browser is redirected to for consent."""
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.callback_url,
            "response_type": "code",
            "scope": self.provider.scope,
        }
        return f"{self.provider.authorize_url}?{urlencode(params)}"

    async def fetch_identity(self, code: str) -> OAuthIdentity:
        """Exchange an authorization code and read the user's email and name."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                access_token = await self._exchange_code(client, code)
                headers = {"Authorization": f"Bearer {access_token}"}
                response = await client.get(self.provider.userinfo_url, headers=headers)
                response.raise_for_status()
                profile = response.json()

                if self.provider is GITHUB:
                    return await self._github_identity(client, headers, profile)
                return self._google_identity(profile)
        except httpx.HTTPError as e:
            logger.error(f"HTTP error during {self.provider.name} OAuth: {e}")
            raise OAuthFailed() from e

    async def _exchange_code(self, client: httpx.AsyncClient, code: str) -> str:
        response = await client.post(
            self.provider.token_url,
            data={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code": code,
                "redirect_uri": self.callback_url,
                "grant_type": "authorization_code",
            },
            headers={"Accept": "application/json"},
        )
        response.raise_for_status()
        token = response.json().get("access_token")
        if not token:
            # GitHub answers 200 with an "error" field for bad codes
            logger.warning(f"{self.provider.name} token exchange returned no access token")
            raise OAuthFailed()
        return token

    def _google_identity(self, profile: dict[str, Any]) -> OAuthIdentity:
        email = profile.get("email")
        if not email:
            raise OAuthFailed()
        name = profile.get("name") or profile.get("given_name") or "User"
        return OAuthIdentity(email=email, name=name)

    async def _github_identity(
        self,
        client: httpx.AsyncClient,
        headers: dict[str, str],
        profile: dict[str, Any],
    ) -> OAuthIdentity:
        login = profile.get("login")
        email = profile.get("email")

        if not email:
            response = await client.get(f"{self.provider.userinfo_url}/emails", headers=headers)
            if response.is_success:
                email = _primary_github_email(response.json())

        if not email:
            if not login:
                raise OAuthFailed()
            email = f"{login}@github.com"

        name = profile.get("name") or login or "User"
        return OAuthIdentity(email=email, name=name)


def _primary_github_email(emails: list[dict[str, Any]]) -> str | None:
    """Pick the primary verified address from GitHub's /user/emails payload."""
    verified = [entry for entry in emails if entry.get("verified")]
    for entry in verified:
        if entry.get("primary"):
            return entry.get("email")
    if verified:
        return verified[0].get("email")
    return None


def get_oauth_client(provider_name: str, settings: Settings | None = None) -> OAuthClient:
    """Build a client for a configured provider.

    Raises ProviderNotConfigured for unknown providers or missing credentials.
    """
    settings = settings or get_settings()
    provider = PROVIDERS.get(provider_name)
    if provider is None:
        raise ProviderNotConfigured()

    client_id = getattr(settings, f"{provider.name}_client_id")
    client_secret = getattr(settings, f"{provider.name}_client_secret")
    if not client_id or not client_secret:
        raise ProviderNotConfigured()

    return OAuthClient(
        provider=provider,
        client_id=client_id,
        client_secret=client_secret,
        callback_url=getattr(settings, f"{provider.name}_callback_url"),
        timeout=settings.oauth_request_timeout,
    )
