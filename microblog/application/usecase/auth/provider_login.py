"""External identity provider login use cases."""

import secrets

import logfire
from pydantic import BaseModel

from microblog.application.usecase.base import SessionRequest
from microblog.domain.model import Session
from microblog.domain.service import AuthService, IdentityService
from microblog.domain.value import AuthProvider

from .common import UserInfo


class InitiateProviderLoginRequest(BaseModel):
    """Initiate provider login request."""

    provider: AuthProvider = AuthProvider.GOOGLE


class InitiateProviderLoginResponse(BaseModel):
    """Initiate provider login response."""

    authorization_url: str
    state: str


class InitiateProviderLoginUseCase:
    """Use case for starting an OAuth login."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize initiate provider login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(
        self, request: InitiateProviderLoginRequest
    ) -> InitiateProviderLoginResponse:
        """Build the provider authorization URL with a fresh state.

        Args:
            request: Initiate provider login request

        Returns:
            Authorization URL and the state to verify on callback
        """
        state = secrets.token_urlsafe(32)
        url = await self.auth_service.initiate_login(request.provider, state)
        logfire.info("Provider login initiated", provider=request.provider.value)
        return InitiateProviderLoginResponse(authorization_url=url, state=state)


class CompleteProviderLoginRequest(SessionRequest):
    """OAuth callback parameters."""

    session: Session
    provider: AuthProvider = AuthProvider.GOOGLE
    code: str
    state: str


class CompleteProviderLoginResponse(BaseModel):
    """Complete provider login response."""

    user: UserInfo
    needs_handle: bool  # True while the account is unclaimed


class CompleteProviderLoginUseCase:
    """Use case for finishing an OAuth login."""

    def __init__(
        self, auth_service: AuthService, identity_service: IdentityService
    ) -> None:
        """Initialize complete provider login use case.

        Args:
            auth_service: Authentication domain service
            identity_service: Identity domain service
        """
        self.auth_service = auth_service
        self.identity_service = identity_service

    async def execute(
        self, request: CompleteProviderLoginRequest
    ) -> CompleteProviderLoginResponse:
        """Execute provider login flow.

        Steps:
        1. Exchange the code with the provider for the subject id
        2. Resolve or create the user by identity proof
        3. Report whether a handle still has to be claimed

        Args:
            request: OAuth callback parameters and session

        Returns:
            The resolved user and whether registration must continue

        Raises:
            ProviderError: If the provider exchange fails
        """
        with logfire.span(
            "complete_provider_login.execute", provider=request.provider.value
        ):
            info = await self.auth_service.complete_login(
                request.provider, request.code, request.state
            )

            user = await self.identity_service.login_or_register_via_provider(
                request.session, info.subject_id, info.email
            )

            return CompleteProviderLoginResponse(
                user=UserInfo.from_user(user), needs_handle=not user.is_claimed
            )
