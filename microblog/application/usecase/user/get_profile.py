"""Get profile use case."""

import logfire
from pydantic import BaseModel

from microblog.application.usecase.auth.common import UserInfo
from microblog.application.usecase.base import SessionRequest
from microblog.application.usecase.post.common import PostItem
from microblog.domain.model import Session
from microblog.domain.service import IdentityService, PostService


class GetProfileRequest(SessionRequest):
    """Get profile request."""

    session: Session


class GetProfileResponse(BaseModel):
    """The logged-in user with their own posts, newest first."""

    user: UserInfo
    posts: list[PostItem]


class GetProfileUseCase:
    """Use case for the personalised profile feed."""

    def __init__(
        self, identity_service: IdentityService, post_service: PostService
    ) -> None:
        """Initialize get profile use case.

        Args:
            identity_service: Identity domain service
            post_service: Post domain service
        """
        self.identity_service = identity_service
        self.post_service = post_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Execute get profile flow.

        Args:
            request: Get profile request

        Returns:
            User and their posts

        Raises:
            UnauthenticatedError: If the session is not logged in
        """
        user = await self.identity_service.require_authenticated(request.session)

        with logfire.span("get_profile.execute", user_id=user.id):
            posts = await self.post_service.list_by_author(user.handle)
            return GetProfileResponse(
                user=UserInfo.from_user(user),
                posts=[PostItem.from_post(p) for p in posts],
            )
