"""Post domain service."""

from typing import Iterable

import logfire
import pydantic

from microblog.domain.error import (
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from microblog.domain.model.post import NewPost, Post
from microblog.domain.model.user import User
from microblog.domain.repository import PostRepository, PostSortOrder
from microblog.domain.value import Handle, PostId, TagName

from .base import Service


class PostService(Service):
    """Domain service for the post lifecycle.

    Listings are fully materialized in a stable total order. Destructive
    operations are gated on the exact author handle.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def list_recent(self) -> list[Post]:
        """List all posts, newest first (ties by id descending)."""
        with logfire.span("post_service.list_recent"):
            return await self.post_repository.find_all(sort=PostSortOrder.RECENT)

    async def list_popular(self) -> list[Post]:
        """List all posts, most liked first (ties by id descending)."""
        with logfire.span("post_service.list_popular"):
            return await self.post_repository.find_all(sort=PostSortOrder.POPULAR)

    async def list_by_tag(self, tag: str) -> list[Post]:
        """List posts carrying exactly ``tag``, newest first.

        Args:
            tag: Tag to match (case-sensitive)

        Returns:
            Matching posts, empty for a blank tag
        """
        if not tag or not tag.strip():
            return []

        with logfire.span("post_service.list_by_tag", tag=tag):
            try:
                tag_name = TagName(tag)
            except pydantic.ValidationError:
                # Longer than any stored tag
                return []
            return await self.post_repository.find_all(
                sort=PostSortOrder.RECENT, tag=tag_name
            )

    async def list_by_author(self, handle: Handle) -> list[Post]:
        """List posts whose author handle is ``handle``, newest first.

        Args:
            handle: Author handle

        Returns:
            The author's posts
        """
        with logfire.span("post_service.list_by_author", handle=str(handle)):
            return await self.post_repository.find_all(
                sort=PostSortOrder.RECENT, author_handle=handle
            )

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If no post has the ID
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            return post

    async def create(
        self, title: str, body: str, tags: Iterable[str], author: User
    ) -> Post:
        """Create a post authored by ``author``.

        Args:
            title: Post title
            body: Post body
            tags: Tags, deduplicated; blank entries are ignored
            author: Authenticated author

        Returns:
            The stored post with zero likes

        Raises:
            ValidationError: If the title or body is empty or too long
            UnauthenticatedError: If the author has not claimed a handle
        """
        if not title or not title.strip() or not body or not body.strip():
            raise ValidationError("Title and content are required")
        if author.handle is None:
            raise UnauthenticatedError("A handle is required to post")

        with logfire.span(
            "post_service.create", author=str(author.handle), title=title
        ):
            try:
                new_post = NewPost(
                    title=title,
                    body=body,
                    author_handle=author.handle,
                    tags=frozenset(TagName(t.strip()) for t in tags if t.strip()),
                )
            except pydantic.ValidationError as e:
                raise ValidationError(str(e.errors()[0]["msg"])) from e

            post = await self.post_repository.insert(new_post)
            logfire.info(
                "Post created",
                post_id=post.id,
                author=str(post.author_handle),
                tags=post.tag_names,
            )
            return post

    async def increment_like(self, post_id: PostId) -> int:
        """Atomically add one like to a post.

        Args:
            post_id: Post ID

        Returns:
            The new like count

        Raises:
            NotFoundError: If no post has the ID
        """
        with logfire.span("post_service.increment_like", post_id=post_id):
            count = await self.post_repository.increment_like(post_id)
            if count is None:
                logfire.warn("Like for missing post", post_id=post_id)
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post liked", post_id=post_id, like_count=count)
            return count

    async def delete_owned(self, post_id: PostId, requester: User | None) -> None:
        """Delete a post owned by ``requester``.

        Checks run in order: authentication, existence, ownership.

        Args:
            post_id: Post ID
            requester: Resolved requesting user, or None

        Raises:
            UnauthenticatedError: If there is no requester
            NotFoundError: If no post has the ID
            ForbiddenError: If the requester is not the author
        """
        if requester is None:
            raise UnauthenticatedError()

        with logfire.span(
            "post_service.delete_owned",
            post_id=post_id,
            requester=str(requester.handle),
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                raise NotFoundError("Post", str(post_id))

            if not post.is_owned_by(requester.handle):
                logfire.warn(
                    "Delete refused for non-owner",
                    post_id=post_id,
                    author=str(post.author_handle),
                    requester=str(requester.handle),
                )
                raise ForbiddenError("Post", str(post_id), str(requester.handle))

            if not await self.post_repository.delete(post_id):
                # Removed between the read and the delete
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post deleted", post_id=post_id)
