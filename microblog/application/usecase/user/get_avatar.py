"""Get avatar use case."""

from pydantic import BaseModel

from microblog.domain.service import AvatarService


class GetAvatarRequest(BaseModel):
    """Get avatar request."""

    handle: str


class GetAvatarResponse(BaseModel):
    """Get avatar response."""

    content: bytes
    media_type: str = "image/png"


class GetAvatarUseCase:
    """Use case for serving a user's generated avatar."""

    def __init__(self, avatar_service: AvatarService) -> None:
        """Initialize get avatar use case.

        Args:
            avatar_service: Avatar domain service
        """
        self.avatar_service = avatar_service

    async def execute(self, request: GetAvatarRequest) -> GetAvatarResponse:
        """Execute get avatar flow.

        Args:
            request: Get avatar request

        Returns:
            PNG image bytes

        Raises:
            NotFoundError: If no user has the handle
            ValidationError: If the handle does not start with a letter A-Z
        """
        content = await self.avatar_service.get_avatar_for_handle(request.handle)
        return GetAvatarResponse(content=content)
