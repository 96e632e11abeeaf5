"""Session token utilities.

The session cookie is a signed JWT carrying the two session fields.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from microblog.config import AuthSettings


class SessionPayload(BaseModel):
    """Session token payload."""

    user_id: int | None = None
    logged_in: bool = False
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: int | None, logged_in: bool, settings: AuthSettings
) -> str:
    """Create a signed session token.

    Args:
        user_id: Session user ID (None for an anonymous session)
        logged_in: Whether the session is authenticated
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.session_expiry_days)

    payload = {
        "user_id": user_id,
        "logged_in": logged_in,
        "exp": expiry,
    }

    return jwt.encode(
        payload, settings.session_secret, algorithm=settings.session_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> SessionPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )
        return SessionPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
