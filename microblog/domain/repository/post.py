"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from microblog.domain.model.post import NewPost, Post
from microblog.domain.value import Handle, PostId, TagName


class PostSortOrder(str, Enum):
    """Sort order for post listings.

    Both orders break ties by id descending, so the result is a stable
    total order.
    """

    RECENT = "recent"  # created_at DESC, id DESC
    POPULAR = "popular"  # like_count DESC, id DESC


class PostRepository(ABC):
    """Repository for Post aggregate (the content store).

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        tag: Optional[TagName] = None,
        author_handle: Optional[Handle] = None,
    ) -> List[Post]:
        """Find posts, fully materialized and ordered.

        Args:
            sort: Sort order
            tag: Only posts carrying exactly this tag (None for all)
            author_handle: Only posts by this author handle (None for all)

        Returns:
            Every matching post, each exactly once
        """
        pass

    @abstractmethod
    async def insert(self, post: NewPost) -> Post:
        """Insert a new post with a fresh id and zero likes.

        Args:
            post: The post to insert

        Returns:
            The stored post
        """
        pass

    @abstractmethod
    async def increment_like(self, post_id: PostId) -> Optional[int]:
        """Atomically increment like_count by 1.

        The read-modify-write happens inside the store so concurrent
        increments are never lost.

        Args:
            post_id: The post ID

        Returns:
            The new like count, or None if the post does not exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post permanently, with its tags.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass
