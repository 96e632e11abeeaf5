"""Delete post use case."""

from pydantic import BaseModel

from microblog.application.usecase.base import SessionRequest
from microblog.domain.model import Session
from microblog.domain.service import IdentityService, PostService
from microblog.domain.value import PostId


class DeletePostRequest(SessionRequest):
    """Delete post request."""

    session: Session
    post_id: int


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: int
    deleted: bool = True


class DeletePostUseCase:
    """Use case for deleting one's own post."""

    def __init__(
        self, identity_service: IdentityService, post_service: PostService
    ) -> None:
        """Initialize delete post use case.

        Args:
            identity_service: Identity domain service
            post_service: Post domain service
        """
        self.identity_service = identity_service
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Args:
            request: Delete post request

        Returns:
            Confirmation of the deletion

        Raises:
            UnauthenticatedError: If the session is not logged in
            NotFoundError: If the post does not exist
            ForbiddenError: If the requester is not the author
        """
        requester = await self.identity_service.resolve_current_user(request.session)
        await self.post_service.delete_owned(PostId(request.post_id), requester)
        return DeletePostResponse(post_id=request.post_id)
