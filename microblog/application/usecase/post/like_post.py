"""Like post use case."""

from pydantic import BaseModel

from microblog.domain.service import PostService
from microblog.domain.value import PostId


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: int


class LikePostResponse(BaseModel):
    """Like post response."""

    likes: int


class LikePostUseCase:
    """Use case for liking a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize like post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute like post flow.

        Args:
            request: Like post request

        Returns:
            The new like count

        Raises:
            NotFoundError: If the post does not exist
        """
        likes = await self.post_service.increment_like(PostId(request.post_id))
        return LikePostResponse(likes=likes)
