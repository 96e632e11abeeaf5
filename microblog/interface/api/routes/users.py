"""Profile and avatar routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response

from microblog.application.usecase.user import (
    GetAvatarRequest,
    GetAvatarUseCase,
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
)
from microblog.config import Settings
from microblog.domain.service import SessionTokenService
from microblog.interface.api.session import load_session

router = APIRouter(tags=["users"], route_class=DishkaRoute)


@router.get("/profile", response_model=GetProfileResponse)
async def get_profile(
    request: Request,
    get_profile_use_case: FromDishka[GetProfileUseCase],
    token_service: FromDishka[SessionTokenService],
    settings: FromDishka[Settings],
) -> GetProfileResponse:
    """Get the logged-in user's profile and posts.

    Raises:
        UnauthenticatedError: If not logged in
    """
    session = load_session(request, token_service, settings)
    return await get_profile_use_case.execute(GetProfileRequest(session=session))


@router.get("/avatar/{handle}")
async def get_avatar(
    handle: str,
    get_avatar_use_case: FromDishka[GetAvatarUseCase],
) -> Response:
    """Serve a user's generated avatar as PNG.

    Raises:
        NotFoundError: If no user has the handle
    """
    result = await get_avatar_use_case.execute(GetAvatarRequest(handle=handle))
    return Response(content=result.content, media_type=result.media_type)
