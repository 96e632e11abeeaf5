"""Register handle use case."""

import logfire

from microblog.application.usecase.base import SessionRequest
from microblog.domain.model import Session
from microblog.domain.service import IdentityService

from .common import UserInfo


class RegisterRequest(SessionRequest):
    """Register request.

    If the session points at an unclaimed provider account, the handle is
    claimed for it; otherwise a new local user is created.
    """

    session: Session
    handle: str


class RegisterResponse(UserInfo):
    """Register response."""

    pass


class RegisterUseCase:
    """Use case for registering (or claiming) a handle."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize register use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Args:
            request: Register request

        Returns:
            The registered, now logged-in user

        Raises:
            ValidationError: If the handle is blank or too long
            ConflictError: If the handle is already taken
        """
        with logfire.span("register.execute", handle=request.handle):
            user = await self.identity_service.register_local_handle(
                request.session, request.handle
            )
            return RegisterResponse(**UserInfo.from_user(user).model_dump())
