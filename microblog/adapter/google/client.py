"""Google OAuth 2.0 client implementation.

Authorization Code Flow with PKCE against Google's OpenID Connect endpoints.
Only the stable ``sub`` claim and the email are used.
"""

import hashlib
import secrets
from base64 import urlsafe_b64encode
from collections import OrderedDict
from urllib.parse import urlencode

import httpx
import logfire

from microblog.adapter.error import ProviderError
from microblog.domain.service.auth_service import OAuthClient
from microblog.domain.value import AuthProvider, OAuthProviderInfo


class GoogleOAuthError(ProviderError):
    """Google OAuth error."""

    pass


class GoogleOAuthClient(OAuthClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 client with PKCE support."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        max_pending: int = 1024,
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: Callback URL registered with Google
            max_pending: Most authorizations awaiting a callback at once
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

        self.authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
        self.token_url = "https://oauth2.googleapis.com/token"
        self.user_info_url = "https://openidconnect.googleapis.com/v1/userinfo"

        # PKCE verifiers keyed by state, oldest first. Abandoned logins are
        # evicted once max_pending is reached.
        self.max_pending = max_pending
        self._pkce_verifiers: OrderedDict[str, str] = OrderedDict()

    def _generate_pkce_pair(self) -> tuple[str, str]:
        """Generate PKCE code verifier and challenge.

        Returns:
            Tuple of (verifier, challenge)
        """
        code_verifier = urlsafe_b64encode(secrets.token_bytes(32)).decode("utf-8")
        code_verifier = code_verifier.rstrip("=")

        challenge_bytes = hashlib.sha256(code_verifier.encode("utf-8")).digest()
        code_challenge = urlsafe_b64encode(challenge_bytes).decode("utf-8")
        code_challenge = code_challenge.rstrip("=")

        return code_verifier, code_challenge

    async def initiate_authorization(self, state: str) -> str:
        """Initiate Google OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        code_verifier, code_challenge = self._generate_pkce_pair()
        self._pkce_verifiers[state] = code_verifier
        while len(self._pkce_verifiers) > self.max_pending:
            self._pkce_verifiers.popitem(last=False)

        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": "openid email",
            "state": state,
            "code_challenge": code_challenge,
            "code_challenge_method": "S256",
        }

        logfire.info(
            "Google OAuth authorization initiated",
            state=state,
            redirect_uri=self.redirect_uri,
        )

        return f"{self.authorize_url}?{urlencode(params)}"

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Complete Google OAuth authorization flow.

        Args:
            code: Authorization code from Google callback
            state: State parameter for verification

        Returns:
            User information from Google

        Raises:
            GoogleOAuthError: If OAuth flow fails
        """
        code_verifier = self._pkce_verifiers.pop(state, None)
        if not code_verifier:
            raise GoogleOAuthError("Invalid state or PKCE verifier not found")

        access_token = await self._exchange_code_for_token(code, code_verifier)
        user_info = await self._get_user_info(access_token)

        subject_id = user_info.get("sub")
        if not subject_id:
            raise GoogleOAuthError("User info response has no subject")

        logfire.info("Google OAuth completed")

        return OAuthProviderInfo(
            provider=AuthProvider.GOOGLE,
            subject_id=subject_id,
            email=user_info.get("email"),
            display_name=user_info.get("name"),
        )

    async def _exchange_code_for_token(self, code: str, code_verifier: str) -> str:
        """Exchange authorization code for access token.

        Args:
            code: Authorization code from callback
            code_verifier: PKCE code verifier

        Returns:
            Access token

        Raises:
            GoogleOAuthError: If token exchange fails
        """
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code_verifier": code_verifier,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=30.0,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google token exchange failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"Token exchange failed: {response.status_code}"
                    )

                return response.json()["access_token"]

        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error during token exchange: {e}")

    async def _get_user_info(self, access_token: str) -> dict:
        """Get user information from the OpenID Connect userinfo endpoint.

        Args:
            access_token: OAuth access token

        Returns:
            User information dictionary

        Raises:
            GoogleOAuthError: If API request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=30.0,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google user info request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"User info request failed: {response.status_code}"
                    )

                return response.json()

        except httpx.HTTPError as e:
            logfire.error("Google user info HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching user info: {e}")


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing.

    The authorization code doubles as the subject id, so tests can log in
    as distinct provider identities without making real API calls.
    """

    def __init__(self):
        """Initialize mock client without real OAuth configuration."""
        pass

    async def initiate_authorization(self, state: str) -> str:
        """Return mock authorization URL.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Mock authorization URL
        """
        return f"https://accounts.google.com/o/oauth2/v2/auth?state={state}&mock=true"

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Return mock user information.

        Args:
            code: Authorization code, used as the subject id
            state: State parameter (unused in mock)

        Returns:
            Mock Google user information
        """
        return OAuthProviderInfo(
            provider=AuthProvider.GOOGLE,
            subject_id=f"google-{code}",
            email=f"{code}@example.com",
            display_name="Mock Google User",
        )
