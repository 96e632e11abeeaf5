"""SQL implementation of Post repository."""

from collections import defaultdict
from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from microblog.domain.model import NewPost, Post
from microblog.domain.repository.post import PostRepository, PostSortOrder
from microblog.domain.value import Handle, PostId, TagName
from microblog.persistence.database import translate_store_errors
from microblog.persistence.mappers import new_post_to_dict, row_to_post
from microblog.persistence.tables import post_tags_table, posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Uses only portable SQL (including ``RETURNING``), so it also runs on SQLite.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_posts(self, post_ids: list[int]) -> dict[int, list[str]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tag names
        """
        if not post_ids:
            return {}

        stmt = select(post_tags_table.c.post_id, post_tags_table.c.tag).where(
            post_tags_table.c.post_id.in_(post_ids)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[int, list[str]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row.tag)

        return post_tag_map

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id), (
            translate_store_errors()
        ):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            post_tag_map = await self._fetch_tags_for_posts([post_id])
            return row_to_post(row._asdict(), tag_names=post_tag_map.get(post_id, []))

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        tag: Optional[TagName] = None,
        author_handle: Optional[Handle] = None,
    ) -> List[Post]:
        """Find posts, fully materialized and ordered."""
        with logfire.span(
            "post_repository.find_all",
            sort=sort.value,
            tag=tag.root if tag else None,
            author_handle=author_handle.root if author_handle else None,
        ), translate_store_errors():
            stmt = select(posts_table)

            # (post_id, tag) is unique, so the join cannot duplicate posts
            if tag:
                stmt = stmt.join(
                    post_tags_table, posts_table.c.id == post_tags_table.c.post_id
                ).where(post_tags_table.c.tag == tag.root)

            if author_handle:
                stmt = stmt.where(posts_table.c.author_handle == author_handle.root)

            if sort == PostSortOrder.POPULAR:
                stmt = stmt.order_by(
                    desc(posts_table.c.like_count), desc(posts_table.c.id)
                )
            else:
                stmt = stmt.order_by(
                    desc(posts_table.c.created_at), desc(posts_table.c.id)
                )

            result = await self.session.execute(stmt)
            post_rows = result.fetchall()

            if not post_rows:
                logfire.info("No posts found")
                return []

            post_tag_map = await self._fetch_tags_for_posts([row.id for row in post_rows])

            posts = [
                row_to_post(row._asdict(), tag_names=post_tag_map.get(row.id, []))
                for row in post_rows
            ]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def insert(self, post: NewPost) -> Post:
        """Insert a new post with a fresh id and zero likes."""
        with logfire.span(
            "post_repository.insert",
            title=post.title,
            author=post.author_handle.root,
        ), translate_store_errors():
            stmt = (
                insert(posts_table)
                .values(**new_post_to_dict(post))
                .returning(*posts_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.one()

            tag_names = sorted(tag.root for tag in post.tags)
            if tag_names:
                await self.session.execute(
                    insert(post_tags_table),
                    [{"post_id": row.id, "tag": name} for name in tag_names],
                )

            await self.session.flush()
            logfire.info("Post inserted", post_id=row.id, tags=tag_names)
            return row_to_post(row._asdict(), tag_names=tag_names)

    async def increment_like(self, post_id: PostId) -> Optional[int]:
        """Atomically increment like_count (SQL-level read-modify-write)."""
        with logfire.span("post_repository.increment_like", post_id=post_id), (
            translate_store_errors()
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(like_count=posts_table.c.like_count + 1)
                .returning(posts_table.c.like_count)
            )
            result = await self.session.execute(stmt)
            count = result.scalar_one_or_none()
            await self.session.flush()
            return count

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its tags (hard delete)."""
        with logfire.span("post_repository.delete", post_id=post_id), (
            translate_store_errors()
        ):
            # Explicit so the tags go even where foreign keys are not enforced
            await self.session.execute(
                delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
            )
            result = await self.session.execute(
                delete(posts_table).where(posts_table.c.id == post_id)
            )
            await self.session.flush()
            return result.rowcount > 0
