"""Application layer DI providers."""

from dishka import Scope, provide

from microblog.application.usecase.auth import (
    CompleteProviderLoginUseCase,
    GetCurrentUserUseCase,
    InitiateProviderLoginUseCase,
    LoginUseCase,
    LogoutUseCase,
    RegisterUseCase,
)
from microblog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListPostsUseCase,
)
from microblog.application.usecase.user import GetAvatarUseCase, GetProfileUseCase
from microblog.domain.service import (
    AuthService,
    AvatarService,
    IdentityService,
    PostService,
)
from microblog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, identity_service: IdentityService) -> LoginUseCase:
        """Provide local login use case."""
        return LoginUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, identity_service: IdentityService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self, identity_service: IdentityService) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, identity_service: IdentityService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_initiate_provider_login_use_case(
        self, auth_service: AuthService
    ) -> InitiateProviderLoginUseCase:
        """Provide initiate provider login use case."""
        return InitiateProviderLoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_complete_provider_login_use_case(
        self, auth_service: AuthService, identity_service: IdentityService
    ) -> CompleteProviderLoginUseCase:
        """Provide complete provider login use case."""
        return CompleteProviderLoginUseCase(
            auth_service=auth_service, identity_service=identity_service
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, identity_service: IdentityService, post_service: PostService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            identity_service=identity_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(self, post_service: PostService) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, identity_service: IdentityService, post_service: PostService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            identity_service=identity_service, post_service=post_service
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_profile_use_case(
        self, identity_service: IdentityService, post_service: PostService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(
            identity_service=identity_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_avatar_use_case(self, avatar_service: AvatarService) -> GetAvatarUseCase:
        """Provide get avatar use case."""
        return GetAvatarUseCase(avatar_service=avatar_service)
