"""Session cookie handling.

The session lives in a signed cookie; routes load it before calling a use
case and write it back onto the response afterwards.
"""

from fastapi import Request, Response

from microblog.config import Settings
from microblog.domain.model import Session
from microblog.domain.service import SessionTokenService

OAUTH_STATE_COOKIE = "oauth_state"


def load_session(
    request: Request, token_service: SessionTokenService, settings: Settings
) -> Session:
    """Read the session from the request cookie.

    Args:
        request: Incoming request
        token_service: Session token codec
        settings: Application settings

    Returns:
        The decoded session, or a fresh anonymous one
    """
    return token_service.decode(request.cookies.get(settings.auth.session_cookie_name))


def store_session(
    response: Response,
    session: Session,
    token_service: SessionTokenService,
    settings: Settings,
) -> None:
    """Write the session back as a cookie, or delete it if destroyed.

    Args:
        response: Outgoing response
        session: Session state after the use case ran
        token_service: Session token codec
        settings: Application settings
    """
    if session.destroyed:
        response.delete_cookie(settings.auth.session_cookie_name, path="/")
        return

    response.set_cookie(
        key=settings.auth.session_cookie_name,
        value=token_service.encode(session),
        max_age=settings.auth.session_expiry_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.api.protocol == "https",
        samesite="lax",
        path="/",
    )


def frontend_redirect(settings: Settings, path: str = "/") -> str:
    """Absolute frontend URL for a path."""
    return f"{settings.api.frontend_url}{path}"
