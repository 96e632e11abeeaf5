"""Domain layer DI providers."""

from dishka import Scope, provide

from microblog.config import AuthSettings
from microblog.domain.repository import PostRepository, UserRepository
from microblog.domain.service import (
    AuthService,
    AvatarRenderer,
    AvatarService,
    IdentityService,
    OAuthClient,
    PostService,
    ProofService,
    SessionTokenService,
)
from microblog.domain.value import AuthProvider
from microblog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, oauth_clients: dict[AuthProvider, OAuthClient]
    ) -> AuthService:
        """Provide multi-provider authentication domain service."""
        return AuthService(oauth_clients=oauth_clients)

    @provide(scope=Scope.APP)
    def get_proof_service(self, auth_settings: AuthSettings) -> ProofService:
        """Provide identity proof domain service."""
        return ProofService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_session_token_service(
        self, auth_settings: AuthSettings
    ) -> SessionTokenService:
        """Provide session token domain service."""
        return SessionTokenService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self, user_repository: UserRepository, proof_service: ProofService
    ) -> IdentityService:
        """Provide identity resolution domain service."""
        return IdentityService(
            user_repository=user_repository, proof_service=proof_service
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_avatar_service(
        self, renderer: AvatarRenderer, user_repository: UserRepository
    ) -> AvatarService:
        """Provide avatar domain service."""
        return AvatarService(renderer=renderer, user_repository=user_repository)
