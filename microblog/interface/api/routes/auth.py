"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, Request, status
from fastapi.responses import RedirectResponse

from microblog.application.usecase.auth import (
    CompleteProviderLoginRequest,
    CompleteProviderLoginUseCase,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    InitiateProviderLoginRequest,
    InitiateProviderLoginUseCase,
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from microblog.config import Settings
from microblog.domain.error import ValidationError
from microblog.domain.service import SessionTokenService
from microblog.domain.value import AuthProvider
from microblog.interface.api.session import (
    OAUTH_STATE_COOKIE,
    frontend_redirect,
    load_session,
    store_session,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post("/login")
async def login(
    request: Request,
    login_use_case: FromDishka[LoginUseCase],
    token_service: FromDishka[SessionTokenService],
    settings: FromDishka[Settings],
    username: str = Form(default=""),
) -> RedirectResponse:
    """Log in with an existing username.

    Returns:
        HTTP 303 redirect to the home page with the session cookie set

    Raises:
        ValidationError: If the username is blank
        NotFoundError: If no user has the username
    """
    session = load_session(request, token_service, settings)
    user = await login_use_case.execute(LoginRequest(session=session, handle=username))
    logger.info(f"User {user.user_id} logged in locally")

    response = RedirectResponse(
        url=frontend_redirect(settings), status_code=status.HTTP_303_SEE_OTHER
    )
    store_session(response, session, token_service, settings)
    return response


@router.post("/register")
async def register(
    request: Request,
    register_use_case: FromDishka[RegisterUseCase],
    token_service: FromDishka[SessionTokenService],
    settings: FromDishka[Settings],
    username: str = Form(default=""),
) -> RedirectResponse:
    """Register a username, or claim one after a Google login.

    Returns:
        HTTP 303 redirect to the home page with the session cookie set

    Raises:
        ValidationError: If the username is blank
        ConflictError: If the username is taken
    """
    session = load_session(request, token_service, settings)
    user = await register_use_case.execute(
        RegisterRequest(session=session, handle=username)
    )
    logger.info(f"User {user.user_id} registered as {user.handle}")

    response = RedirectResponse(
        url=frontend_redirect(settings), status_code=status.HTTP_303_SEE_OTHER
    )
    store_session(response, session, token_service, settings)
    return response


@router.get("/logout")
async def logout(
    request: Request,
    logout_use_case: FromDishka[LogoutUseCase],
    token_service: FromDishka[SessionTokenService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Log out and clear the session cookie.

    Returns:
        HTTP 303 redirect to the home page
    """
    session = load_session(request, token_service, settings)
    await logout_use_case.execute(LogoutRequest(session=session))

    response = RedirectResponse(
        url=frontend_redirect(settings), status_code=status.HTTP_303_SEE_OTHER
    )
    store_session(response, session, token_service, settings)
    return response


@router.get("/google")
async def google_login(
    initiate_use_case: FromDishka[InitiateProviderLoginUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Start the Google OAuth flow.

    The state is kept in a short-lived cookie and checked on callback.

    Returns:
        HTTP 302 redirect to Google
    """
    result = await initiate_use_case.execute(
        InitiateProviderLoginRequest(provider=AuthProvider.GOOGLE)
    )

    response = RedirectResponse(
        url=result.authorization_url, status_code=status.HTTP_302_FOUND
    )
    response.set_cookie(
        key=OAUTH_STATE_COOKIE,
        value=result.state,
        max_age=600,
        httponly=True,
        secure=settings.api.protocol == "https",
        samesite="lax",
        path="/auth",
    )
    return response


@router.get("/google/callback")
async def google_callback(
    request: Request,
    code: str,
    state: str,
    complete_use_case: FromDishka[CompleteProviderLoginUseCase],
    token_service: FromDishka[SessionTokenService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Handle the Google OAuth callback.

    Known, claimed accounts are logged in. New accounts are sent to the
    registration page to claim a username.

    Returns:
        HTTP 303 redirect to the home page or the registration page

    Raises:
        ValidationError: If the state does not match the one issued
    """
    expected_state = request.cookies.get(OAUTH_STATE_COOKIE)
    if not expected_state or expected_state != state:
        logger.warning("Google callback with mismatched state")
        raise ValidationError("Invalid login state, please try again")

    session = load_session(request, token_service, settings)
    result = await complete_use_case.execute(
        CompleteProviderLoginRequest(
            session=session, provider=AuthProvider.GOOGLE, code=code, state=state
        )
    )

    target = "/register" if result.needs_handle else "/"
    response = RedirectResponse(
        url=frontend_redirect(settings, target),
        status_code=status.HTTP_303_SEE_OTHER,
    )
    response.delete_cookie(OAUTH_STATE_COOKIE, path="/auth")
    store_session(response, session, token_service, settings)
    return response


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token_service: FromDishka[SessionTokenService],
    settings: FromDishka[Settings],
) -> GetCurrentUserResponse:
    """Report the current session's user without failing when anonymous."""
    session = load_session(request, token_service, settings)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(session=session)
    )
