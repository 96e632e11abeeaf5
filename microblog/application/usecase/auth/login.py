"""Local login use case."""

import logfire

from microblog.application.usecase.base import SessionRequest
from microblog.domain.model import Session
from microblog.domain.service import IdentityService

from .common import UserInfo


class LoginRequest(SessionRequest):
    """Login request with a handle typed by the user."""

    session: Session
    handle: str


class LoginResponse(UserInfo):
    """Login response."""

    pass


class LoginUseCase:
    """Use case for logging in with an existing handle."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize login use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute local login flow.

        Args:
            request: Login request

        Returns:
            The logged-in user

        Raises:
            ValidationError: If the handle is blank
            NotFoundError: If no user has the handle
        """
        with logfire.span("login.execute", handle=request.handle):
            user = await self.identity_service.login_local(
                request.session, request.handle
            )
            return LoginResponse(**UserInfo.from_user(user).model_dump())
