"""Integration tests for the SQL post repository.

Runs the real repository against SQLite through the DI container. Each
``async with sqlite_env()`` block is one request scope, i.e. one committed
transaction.
"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from microblog.domain.model import NewPost
from microblog.domain.repository import PostRepository, PostSortOrder
from microblog.domain.value import Handle, PostId, TagName
from tests.harness import create_sqlite_env_fixture

# Integration fixture - real persistence on a throwaway SQLite file
sqlite_env = create_sqlite_env_fixture()


def _new_post(title: str, handle: str = "alice", **kwargs) -> NewPost:
    return NewPost(title=title, body="Body", author_handle=Handle(root=handle), **kwargs)


class TestSQLPostRepository:
    """Integration tests for PostgresPostRepository on SQLite."""

    @pytest.mark.asyncio
    async def test_insert_and_find_by_id(self, sqlite_env):
        """Inserted posts are committed and read back with their tags."""
        # Arrange
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            created = await repo.insert(
                _new_post(
                    "Hello", tags=frozenset({TagName(root="b"), TagName(root="a")})
                )
            )

        # Act
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            found = await repo.find_by_id(created.id)

        # Assert
        assert created.id is not None
        assert created.like_count == 0
        assert found is not None
        assert found.title == "Hello"
        assert found.author_handle == Handle(root="alice")
        assert found.tag_names == ["a", "b"]
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, sqlite_env):
        """Unknown ids are not an error at the store level."""
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            assert await repo.find_by_id(PostId(12345)) is None

    @pytest.mark.asyncio
    async def test_ids_are_monotonic(self, sqlite_env):
        """Each insert gets a larger id than the one before."""
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            first = await repo.insert(_new_post("One"))
            second = await repo.insert(_new_post("Two"))

        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_find_all_orders(self, sqlite_env):
        """Recent and popular orders are total and break ties by id."""
        # Arrange
        now = datetime.now(timezone.utc)
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            old = await repo.insert(_new_post("Old", created_at=now - timedelta(days=1)))
            tie_a = await repo.insert(_new_post("TieA", created_at=now))
            tie_b = await repo.insert(_new_post("TieB", created_at=now))
            await repo.increment_like(old.id)
            await repo.increment_like(old.id)
            await repo.increment_like(tie_a.id)

        # Act
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            recent = await repo.find_all(sort=PostSortOrder.RECENT)
            popular = await repo.find_all(sort=PostSortOrder.POPULAR)

        # Assert
        assert [p.id for p in recent] == [tie_b.id, tie_a.id, old.id]
        assert [p.id for p in popular] == [old.id, tie_a.id, tie_b.id]

    @pytest.mark.asyncio
    async def test_find_all_filters(self, sqlite_env):
        """Tag and author filters match exactly."""
        # Arrange
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            tagged = await repo.insert(
                _new_post("Tagged", tags=frozenset({TagName(root="python")}))
            )
            await repo.insert(
                _new_post("Cased", tags=frozenset({TagName(root="Python")}))
            )
            by_bob = await repo.insert(_new_post("Bob", handle="bob"))

        # Act
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            with_tag = await repo.find_all(tag=TagName(root="python"))
            from_bob = await repo.find_all(author_handle=Handle(root="bob"))

        # Assert
        assert [p.id for p in with_tag] == [tagged.id]
        assert with_tag[0].tag_names == ["python"]
        assert [p.id for p in from_bob] == [by_bob.id]

    @pytest.mark.asyncio
    async def test_increment_like_missing_post(self, sqlite_env):
        """Liking an unknown post reports None."""
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            assert await repo.increment_like(PostId(12345)) is None

    @pytest.mark.asyncio
    async def test_concurrent_likes_are_not_lost(self, sqlite_env):
        """Concurrent transactions each add exactly one like."""
        # Arrange
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            post = await repo.insert(_new_post("Popular"))

        async def like_once() -> int | None:
            async with sqlite_env() as request:
                repo = await request.get(PostRepository)
                return await repo.increment_like(post.id)

        # Act
        counts = await asyncio.gather(*(like_once() for _ in range(10)))

        # Assert
        assert sorted(counts) == list(range(1, 11))
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            final = await repo.find_by_id(post.id)
        assert final is not None
        assert final.like_count == 10

    @pytest.mark.asyncio
    async def test_delete_removes_post_and_tags(self, sqlite_env):
        """Deleted posts disappear from every listing."""
        # Arrange
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            post = await repo.insert(
                _new_post("Doomed", tags=frozenset({TagName(root="gone")}))
            )

        # Act
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            deleted = await repo.delete(post.id)
            deleted_again = await repo.delete(post.id)

        # Assert
        assert deleted is True
        assert deleted_again is False
        async with sqlite_env() as request:
            repo = await request.get(PostRepository)
            assert await repo.find_by_id(post.id) is None
            assert await repo.find_all(tag=TagName(root="gone")) == []
