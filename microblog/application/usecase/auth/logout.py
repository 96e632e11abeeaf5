"""Logout use case."""

from microblog.application.usecase.base import SessionRequest
from microblog.domain.model import Session
from microblog.domain.service import IdentityService


class LogoutRequest(SessionRequest):
    """Logout request."""

    session: Session


class LogoutUseCase:
    """Use case for ending a session. Always succeeds."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: LogoutRequest) -> None:
        self.identity_service.logout(request.session)
