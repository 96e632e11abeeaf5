"""Create post use case."""

import logfire
from pydantic import BaseModel, Field

from microblog.application.usecase.base import SessionRequest
from microblog.domain.model import Session
from microblog.domain.service import IdentityService, PostService

from .common import PostItem


class CreatePostRequest(SessionRequest):
    """Create post request."""

    session: Session
    title: str
    body: str
    tags: list[str] = Field(default_factory=list)


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostItem


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(
        self, identity_service: IdentityService, post_service: PostService
    ) -> None:
        """Initialize create post use case.

        Args:
            identity_service: Identity domain service
            post_service: Post domain service
        """
        self.identity_service = identity_service
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Resolve the authenticated author from the session
        2. Validate and store the post

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            UnauthenticatedError: If the session is not logged in
            ValidationError: If the title or body is empty
        """
        author = await self.identity_service.require_authenticated(request.session)

        post = await self.post_service.create(
            title=request.title,
            body=request.body,
            tags=request.tags,
            author=author,
        )

        logfire.info("Post created via use case", post_id=post.id)
        return CreatePostResponse(post=PostItem.from_post(post))
