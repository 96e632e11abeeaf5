"""Unit tests for the profile and avatar use cases."""

from dishka import AsyncContainer
import pytest

from microblog.application.usecase.auth import RegisterRequest, RegisterUseCase
from microblog.application.usecase.post import CreatePostRequest, CreatePostUseCase
from microblog.application.usecase.user import (
    GetAvatarRequest,
    GetAvatarUseCase,
    GetProfileRequest,
    GetProfileUseCase,
)
from microblog.domain.error import NotFoundError, UnauthenticatedError
from microblog.domain.model import Session
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetProfileUseCase:
    """Tests for GetProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_lists_only_own_posts(self, unit_env: AsyncContainer):
        """The profile shows the user and their posts, newest first."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        create = await unit_env.get(CreatePostUseCase)
        get_profile = await unit_env.get(GetProfileUseCase)

        alice = Session()
        bob = Session()
        await register.execute(RegisterRequest(session=alice, handle="alice"))
        await register.execute(RegisterRequest(session=bob, handle="bob"))

        first = await create.execute(
            CreatePostRequest(session=alice, title="One", body="b")
        )
        second = await create.execute(
            CreatePostRequest(session=alice, title="Two", body="b")
        )
        await create.execute(CreatePostRequest(session=bob, title="Other", body="b"))

        # Act
        result = await get_profile.execute(GetProfileRequest(session=alice))

        # Assert
        assert result.user.handle == "alice"
        assert [p.post_id for p in result.posts] == [
            second.post.post_id,
            first.post.post_id,
        ]

    @pytest.mark.asyncio
    async def test_profile_requires_login(self, unit_env: AsyncContainer):
        """Anonymous sessions have no profile."""
        get_profile = await unit_env.get(GetProfileUseCase)

        with pytest.raises(UnauthenticatedError):
            await get_profile.execute(GetProfileRequest(session=Session()))


class TestGetAvatarUseCase:
    """Tests for GetAvatarUseCase."""

    @pytest.mark.asyncio
    async def test_avatar_for_registered_user(self, unit_env: AsyncContainer):
        """Avatars are served as PNG for known handles."""
        register = await unit_env.get(RegisterUseCase)
        get_avatar = await unit_env.get(GetAvatarUseCase)
        await register.execute(RegisterRequest(session=Session(), handle="alice"))

        result = await get_avatar.execute(GetAvatarRequest(handle="alice"))

        assert result.media_type == "image/png"
        assert result.content.startswith(b"\x89PNG")

    @pytest.mark.asyncio
    async def test_avatar_for_unknown_user(self, unit_env: AsyncContainer):
        """Unknown handles raise NotFoundError."""
        get_avatar = await unit_env.get(GetAvatarUseCase)

        with pytest.raises(NotFoundError):
            await get_avatar.execute(GetAvatarRequest(handle="ghost"))
