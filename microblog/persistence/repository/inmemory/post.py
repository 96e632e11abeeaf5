"""In-memory post repository for testing."""

from itertools import count
from typing import Optional

from microblog.domain.model.post import NewPost, Post
from microblog.domain.repository.post import PostRepository, PostSortOrder
from microblog.domain.value import Handle, PostId, TagName


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    No method awaits between reading and writing, so concurrent tasks on
    one event loop cannot interleave inside an operation.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._ids = count(1)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        tag: Optional[TagName] = None,
        author_handle: Optional[Handle] = None,
    ) -> list[Post]:
        """Find posts, fully materialized and ordered."""
        posts = list(self._posts.values())

        if tag is not None:
            posts = [p for p in posts if tag in p.tags]

        if author_handle is not None:
            posts = [p for p in posts if p.author_handle == author_handle]

        if sort == PostSortOrder.POPULAR:
            posts.sort(key=lambda p: (p.like_count, p.id), reverse=True)
        else:
            posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)

        return posts

    async def insert(self, post: NewPost) -> Post:
        """Insert a new post with a fresh id and zero likes."""
        stored = Post(id=PostId(next(self._ids)), like_count=0, **dict(post))
        self._posts[stored.id] = stored
        return stored

    async def increment_like(self, post_id: PostId) -> Optional[int]:
        """Increment like_count by 1."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        updated = post.model_copy(update={"like_count": post.like_count + 1})
        self._posts[post_id] = updated
        return updated.like_count

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None
