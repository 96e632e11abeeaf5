"""List posts use case."""

import logfire
from pydantic import BaseModel

from microblog.domain.repository.post import PostSortOrder
from microblog.domain.service import PostService

from .common import PostItem


class ListPostsRequest(BaseModel):
    """List posts request."""

    sort: PostSortOrder = PostSortOrder.RECENT
    tag: str | None = None  # Filter by exact tag, always in recent order


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]


class ListPostsUseCase:
    """Use case for listing posts by recency, popularity or tag."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        A tag filter takes precedence over the sort order.

        Args:
            request: List posts request

        Returns:
            Every matching post, in order
        """
        with logfire.span(
            "list_posts.execute", sort=request.sort.value, tag=request.tag
        ):
            if request.tag is not None:
                posts = await self.post_service.list_by_tag(request.tag)
            elif request.sort == PostSortOrder.POPULAR:
                posts = await self.post_service.list_popular()
            else:
                posts = await self.post_service.list_recent()

            logfire.info("Posts listed", count=len(posts))
            return ListPostsResponse(posts=[PostItem.from_post(p) for p in posts])
