"""Get post use case."""

from pydantic import BaseModel

from microblog.domain.service import PostService
from microblog.domain.value import PostId

from .common import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Get post request

        Returns:
            Post details

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        return GetPostResponse(post=PostItem.from_post(post))
