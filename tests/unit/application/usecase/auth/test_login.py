"""Unit tests for the local login, registration and logout use cases."""

from dishka import AsyncContainer
import pytest

from microblog.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from microblog.domain.error import ConflictError, NotFoundError, ValidationError
from microblog.domain.model import Session
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_after_register(self, unit_env: AsyncContainer):
        """A registered handle can log in from a fresh session."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        registered = await register.execute(
            RegisterRequest(session=Session(), handle="alice")
        )
        session = Session()

        # Act
        result = await login.execute(LoginRequest(session=session, handle="alice"))

        # Assert
        assert result.user_id == registered.user_id
        assert result.handle == "alice"
        assert session.user_id == registered.user_id
        assert session.logged_in is True

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, unit_env: AsyncContainer):
        """Unknown usernames raise NotFoundError."""
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(NotFoundError):
            await login.execute(LoginRequest(session=Session(), handle="ghost"))

    @pytest.mark.asyncio
    async def test_login_blank_username(self, unit_env: AsyncContainer):
        """Blank usernames raise ValidationError."""
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(ValidationError, match="Username is required"):
            await login.execute(LoginRequest(session=Session(), handle=""))


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_user_info(self, unit_env: AsyncContainer):
        """Registration returns the new user's public info."""
        register = await unit_env.get(RegisterUseCase)
        session = Session()

        result = await register.execute(RegisterRequest(session=session, handle="alice"))

        assert result.handle == "alice"
        assert result.avatar_ref is None
        assert session.logged_in is True

    @pytest.mark.asyncio
    async def test_register_duplicate(self, unit_env: AsyncContainer):
        """Taken usernames raise ConflictError."""
        register = await unit_env.get(RegisterUseCase)
        await register.execute(RegisterRequest(session=Session(), handle="alice"))

        with pytest.raises(ConflictError):
            await register.execute(RegisterRequest(session=Session(), handle="alice"))


class TestLogoutUseCase:
    """Tests for LogoutUseCase and GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_current_user_before_and_after_logout(self, unit_env: AsyncContainer):
        """The session is authenticated until logout destroys it."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        logout = await unit_env.get(LogoutUseCase)
        current_user = await unit_env.get(GetCurrentUserUseCase)
        session = Session()
        await register.execute(RegisterRequest(session=session, handle="alice"))

        # Act
        before = await current_user.execute(GetCurrentUserRequest(session=session))
        await logout.execute(LogoutRequest(session=session))
        after = await current_user.execute(GetCurrentUserRequest(session=session))

        # Assert
        assert before.authenticated is True
        assert before.user is not None
        assert before.user.handle == "alice"
        assert after.authenticated is False
        assert after.user is None
        assert session.destroyed is True

    @pytest.mark.asyncio
    async def test_current_user_anonymous(self, unit_env: AsyncContainer):
        """Anonymous sessions are reported, not rejected."""
        current_user = await unit_env.get(GetCurrentUserUseCase)

        result = await current_user.execute(GetCurrentUserRequest(session=Session()))

        assert result.authenticated is False
