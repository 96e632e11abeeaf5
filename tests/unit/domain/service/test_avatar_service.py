"""Unit tests for AvatarService."""

import pytest

from microblog.domain.error import NotFoundError, ValidationError
from microblog.domain.model import NewUser
from microblog.domain.repository import UserRepository
from microblog.domain.service import AvatarService
from microblog.domain.service.avatar_service import (
    AVATAR_PALETTE,
    normalize_avatar_letter,
)
from microblog.domain.value import Handle
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestNormalizeAvatarLetter:
    """Tests for letter normalization."""

    @pytest.mark.parametrize(("raw", "expected"), [("a", "A"), ("Z", "Z"), (" m ", "M")])
    def test_accepts_single_letters(self, raw, expected):
        """Letters of either case normalize to uppercase."""
        assert normalize_avatar_letter(raw) == expected

    @pytest.mark.parametrize("raw", ["3", "", "ab", "é", "#"])
    def test_rejects_everything_else(self, raw):
        """Digits, symbols, empty and multi-character input are rejected."""
        with pytest.raises(ValidationError):
            normalize_avatar_letter(raw)

    def test_palette_covers_alphabet(self):
        """Every letter A-Z has a background color."""
        assert sorted(AVATAR_PALETTE) == [chr(c) for c in range(ord("A"), ord("Z") + 1)]


class TestGenerateAvatar:
    """Tests for generate_avatar method."""

    @pytest.mark.asyncio
    async def test_generates_png(self, unit_env):
        """Output is a PNG image."""
        avatar_service = await unit_env.get(AvatarService)

        image = avatar_service.generate_avatar("A")

        assert image.startswith(PNG_SIGNATURE)

    @pytest.mark.asyncio
    async def test_case_insensitive_output_is_identical(self, unit_env):
        """'a' and 'A' produce byte-identical images."""
        avatar_service = await unit_env.get(AvatarService)

        assert avatar_service.generate_avatar("a") == avatar_service.generate_avatar(
            "A"
        )

    @pytest.mark.asyncio
    async def test_output_is_deterministic(self, unit_env):
        """Repeated calls give the same bytes."""
        avatar_service = await unit_env.get(AvatarService)

        assert avatar_service.generate_avatar("Q") == avatar_service.generate_avatar(
            "Q"
        )

    @pytest.mark.asyncio
    async def test_different_letters_differ(self, unit_env):
        """Different letters produce different images."""
        avatar_service = await unit_env.get(AvatarService)

        assert avatar_service.generate_avatar("A") != avatar_service.generate_avatar(
            "C"
        )

    @pytest.mark.asyncio
    async def test_digit_is_rejected(self, unit_env):
        """Non-letters raise ValidationError."""
        avatar_service = await unit_env.get(AvatarService)

        with pytest.raises(ValidationError):
            avatar_service.generate_avatar("3")


class TestGetAvatarForHandle:
    """Tests for get_avatar_for_handle method."""

    @pytest.mark.asyncio
    async def test_uses_first_letter_of_handle(self, unit_env):
        """A user's avatar is the avatar of their handle's first letter."""
        # Arrange
        avatar_service = await unit_env.get(AvatarService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.insert(NewUser(handle=Handle(root="alice")))

        # Act
        image = await avatar_service.get_avatar_for_handle("alice")

        # Assert
        assert image == avatar_service.generate_avatar("A")

    @pytest.mark.asyncio
    async def test_records_avatar_ref_once(self, unit_env):
        """The avatar reference is recorded the first time it is served."""
        # Arrange
        avatar_service = await unit_env.get(AvatarService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.insert(NewUser(handle=Handle(root="alice")))
        assert user.avatar_ref is None

        # Act
        await avatar_service.get_avatar_for_handle("alice")

        # Assert
        stored = await user_repo.find_by_id(user.id)
        assert stored is not None
        assert stored.avatar_ref == "/avatar/alice"

    @pytest.mark.asyncio
    async def test_unknown_handle_raises_not_found(self, unit_env):
        """Unknown handles have no avatar."""
        avatar_service = await unit_env.get(AvatarService)

        with pytest.raises(NotFoundError):
            await avatar_service.get_avatar_for_handle("ghost")

    @pytest.mark.asyncio
    async def test_blank_handle_raises_not_found(self, unit_env):
        """Blank handles never match a user."""
        avatar_service = await unit_env.get(AvatarService)

        with pytest.raises(NotFoundError):
            await avatar_service.get_avatar_for_handle(" ")

    @pytest.mark.asyncio
    async def test_overlong_handle_raises_not_found(self, unit_env):
        """Handles longer than any stored handle never match a user."""
        avatar_service = await unit_env.get(AvatarService)

        with pytest.raises(NotFoundError):
            await avatar_service.get_avatar_for_handle("a" * 256)

    @pytest.mark.asyncio
    async def test_handle_starting_with_digit_raises_validation(self, unit_env):
        """Handles that do not start with a letter cannot be rendered."""
        avatar_service = await unit_env.get(AvatarService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.insert(NewUser(handle=Handle(root="42bob")))

        with pytest.raises(ValidationError):
            await avatar_service.get_avatar_for_handle("42bob")
