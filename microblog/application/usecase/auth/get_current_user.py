"""Get current user use case."""

from pydantic import BaseModel

from microblog.application.usecase.base import SessionRequest
from microblog.domain.model import Session
from microblog.domain.service import IdentityService

from .common import UserInfo


class GetCurrentUserRequest(SessionRequest):
    """Get current user request."""

    session: Session


class GetCurrentUserResponse(BaseModel):
    """Authentication status of the session."""

    authenticated: bool
    user: UserInfo | None = None


class GetCurrentUserUseCase:
    """Use case for reporting who the session belongs to.

    Never fails for an anonymous session.
    """

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize get current user use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        user = await self.identity_service.resolve_current_user(request.session)
        if user is None:
            return GetCurrentUserResponse(authenticated=False)
        return GetCurrentUserResponse(authenticated=True, user=UserInfo.from_user(user))
